from dataclasses import dataclass, asdict

from ssm_runner.constants.platforms import PlatformTypes
from ssm_runner.constants.statuses import DEFAULT_TIMEOUT_SECONDS
from ssm_runner.runner.platform_mapping import PLATFORM_MAPPING
from ssm_runner.typing import T_INSTANCE_ID, T_REGION_NAME


@dataclass
class RunCommandRequest:
    instance_id: T_INSTANCE_ID
    region: T_REGION_NAME
    command: str
    working_directory: str | None = None
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    platform: str = PlatformTypes.LINUX.value

    @property
    def document_name(self) -> str:
        return PLATFORM_MAPPING[PlatformTypes(self.platform)].document_name

    def send_command_kwargs(self) -> dict:
        """
        Keyword arguments for ssm_client.send_command.
        """
        parameters = {'commands': [self.command]}
        if self.working_directory:
            parameters['workingDirectory'] = [self.working_directory]
        return {
            'InstanceIds': [self.instance_id],
            'DocumentName': self.document_name,
            'Parameters': parameters,
            'TimeoutSeconds': self.timeout_seconds,
        }

    def dict(self):
        return asdict(self)
