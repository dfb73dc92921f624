from typing import NamedTuple, Final

from ssm_runner.constants.platforms import PlatformTypes


class HandlerConfig(NamedTuple):
    document_name: str
    shell: str


PLATFORM_MAPPING: Final[dict[PlatformTypes, HandlerConfig]] = {
    PlatformTypes.LINUX: HandlerConfig(
        document_name='AWS-RunShellScript',
        shell='bash',
    ),
    PlatformTypes.WINDOWS: HandlerConfig(
        document_name='AWS-RunPowerShellScript',
        shell='powershell',
    ),
}
