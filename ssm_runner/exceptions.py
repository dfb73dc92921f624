"""
Exceptions raised while dispatching a Run Command invocation.

Every error is fatal: it is reported once through the workflow surface and the run stops.
"""


class SSMRunnerError(Exception):
    """Base exception for all runner errors"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InputValidationError(SSMRunnerError):
    """A required action input is missing or an input has an invalid value"""

    def __init__(self, message: str, input_name: str | None = None):
        self.input_name = input_name
        super().__init__(message)


class CommandSubmissionError(SSMRunnerError):
    """SendCommand was rejected by the service"""


class CommandPollingError(SSMRunnerError):
    """GetCommandInvocation failed while waiting for the command"""

    def __init__(self, message: str, command_id: str | None = None, last_response: dict | None = None):
        self.command_id = command_id
        self.last_response = last_response
        super().__init__(message)


class PollingTimeoutError(CommandPollingError):
    """The command did not reach a terminal state within the attempt cap"""

    def __init__(self, command_id: str | None = None, last_response: dict | None = None, attempts: int = 0):
        self.attempts = attempts
        super().__init__(
            'Command execution timeout - exceeded maximum wait time',
            command_id=command_id,
            last_response=last_response,
        )


class OutputError(SSMRunnerError):
    """A step output could not be written"""
