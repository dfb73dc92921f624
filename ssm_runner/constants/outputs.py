import enum


@enum.unique
class ActionOutput(enum.Enum):
    STDOUT = 'stdout'
    STDERR = 'stderr'
    STATUS = 'status'
    STATUS_CODE = 'status-code'
    COMMAND_ID = 'command-id'


@enum.unique
class ActionInput(enum.Enum):
    INSTANCE_ID = 'instance-id'
    REGION = 'region'
    COMMAND = 'command'
    WORKING_DIRECTORY = 'working-directory'
    TIMEOUT_SECONDS = 'timeout-seconds'
    PLATFORM = 'platform'
