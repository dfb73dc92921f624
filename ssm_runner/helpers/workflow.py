"""
GitHub Actions runner protocol.

Outputs go to the file named by GITHUB_OUTPUT, annotations and log groups are
written to stdout as workflow commands (``::command prop=value::message``).
"""
import logging
import os
import sys
import uuid
from contextlib import contextmanager

from ssm_runner.exceptions import OutputError

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

_exit_code = EXIT_SUCCESS


def escape_data(value) -> str:
    return str(value).replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


def escape_property(value) -> str:
    return escape_data(value).replace(':', '%3A').replace(',', '%2C')


def to_command_value(value) -> str:
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    return str(value)


def format_command(command: str, message='', **properties) -> str:
    line = f'::{command}'
    props = ','.join(
        f'{key}={escape_property(value)}' for key, value in properties.items() if value is not None
    )
    if props:
        line += f' {props}'
    return f'{line}::{escape_data(to_command_value(message))}'


def issue_command(command: str, message='', stream=None, **properties) -> None:
    stream = stream or sys.stdout
    stream.write(format_command(command, message, **properties) + os.linesep)
    stream.flush()


def set_output(name: str, value) -> None:
    """
    Publish a step output.
    :param name: Output name as declared in action.yml.
    :param value: Output value. Multi-line values are written with a heredoc delimiter.
    :return: None
    """
    value = to_command_value(value)
    output_file = os.environ.get('GITHUB_OUTPUT', '')
    if not output_file:
        issue_command('set-output', value, name=name)
        return
    delimiter = f'ghadelimiter_{uuid.uuid4()}'
    if delimiter in name or delimiter in value:
        raise OutputError(f'Unexpected input: delimiter collision for output {name!r}')
    try:
        with open(output_file, 'a', encoding='utf-8') as handle:
            handle.write(f'{name}<<{delimiter}{os.linesep}{value}{os.linesep}{delimiter}{os.linesep}')
    except OSError as e:
        raise OutputError(f'Unable to write output {name!r} to {output_file}: {e}') from e


def set_failed(message: str) -> None:
    global _exit_code
    _exit_code = EXIT_FAILURE
    issue_command('error', message)


def get_exit_code() -> int:
    return _exit_code


def reset_exit_code() -> None:
    global _exit_code
    _exit_code = EXIT_SUCCESS


def is_debug() -> bool:
    return os.environ.get('RUNNER_DEBUG', '0') == '1'


@contextmanager
def group(title: str):
    issue_command('group', title)
    try:
        yield
    finally:
        issue_command('endgroup')


class WorkflowCommandHandler(logging.Handler):
    """Logging handler that turns log levels into runner annotations"""

    def __init__(self, stream=None):
        super().__init__()
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            stream = self.stream or sys.stdout
            if record.levelno >= logging.ERROR:
                issue_command('error', message, stream=stream)
            elif record.levelno >= logging.WARNING:
                issue_command('warning', message, stream=stream)
            elif record.levelno >= logging.INFO:
                stream.write(message + os.linesep)
                stream.flush()
            else:
                issue_command('debug', message, stream=stream)
        except Exception:
            self.handleError(record)
