import enum
from typing import Final


@enum.unique
class CommandStatus(enum.Enum):
    PENDING = 'Pending'
    IN_PROGRESS = 'InProgress'
    DELAYED = 'Delayed'
    SUCCESS = 'Success'
    CANCELLED = 'Cancelled'
    TIMED_OUT = 'TimedOut'
    FAILED = 'Failed'
    CANCELLING = 'Cancelling'


TERMINAL_STATUSES: Final[frozenset[str]] = frozenset({
    CommandStatus.SUCCESS.value,
    CommandStatus.FAILED.value,
    CommandStatus.CANCELLED.value,
    CommandStatus.TIMED_OUT.value,
})

POLL_INTERVAL_SECONDS: Final[int] = 5
# 120 checks with 5 second intervals, ~10 minutes
MAX_POLL_ATTEMPTS: Final[int] = 120

DEFAULT_TIMEOUT_SECONDS: Final[int] = 3600
MIN_TIMEOUT_SECONDS: Final[int] = 30
MAX_TIMEOUT_SECONDS: Final[int] = 2592000

# reported by GetCommandInvocation until the plugin has finished
UNKNOWN_RESPONSE_CODE: Final[int] = -1
