from dataclasses import dataclass, asdict

from ssm_runner.constants.outputs import ActionOutput
from ssm_runner.constants.statuses import UNKNOWN_RESPONSE_CODE
from ssm_runner.typing import T_COMMAND_ID, T_INSTANCE_ID, T_REGION_NAME, T_INVOCATION_RESPONSE


@dataclass
class CommandInvocation:
    id: T_COMMAND_ID
    instance_id: T_INSTANCE_ID = None
    region: T_REGION_NAME = None
    status: str = ''
    status_code: int = UNKNOWN_RESPONSE_CODE
    stdout: str = ''
    stderr: str = ''

    @classmethod
    def from_response(cls, response: T_INVOCATION_RESPONSE, command_id: T_COMMAND_ID = None,
                      region: T_REGION_NAME = None) -> 'CommandInvocation':
        status_code = response.get('ResponseCode')
        return cls(
            id=response.get('CommandId') or command_id,
            instance_id=response.get('InstanceId'),
            region=region,
            status=response.get('Status', ''),
            status_code=UNKNOWN_RESPONSE_CODE if status_code is None else status_code,
            stdout=response.get('StandardOutputContent') or '',
            stderr=response.get('StandardErrorContent') or '',
        )

    def outputs(self) -> dict[str, str | int]:
        return {
            ActionOutput.STDOUT.value: self.stdout,
            ActionOutput.STDERR.value: self.stderr,
            ActionOutput.STATUS.value: self.status,
            ActionOutput.STATUS_CODE.value: self.status_code,
            ActionOutput.COMMAND_ID.value: self.id,
        }

    def dict(self):
        return asdict(self)
