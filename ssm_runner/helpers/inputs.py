import argparse
import logging
import os

from ssm_runner.constants.outputs import ActionInput
from ssm_runner.constants.platforms import PlatformTypes, PLATFORM_OPTIONS
from ssm_runner.constants.statuses import DEFAULT_TIMEOUT_SECONDS, MIN_TIMEOUT_SECONDS, MAX_TIMEOUT_SECONDS
from ssm_runner.exceptions import InputValidationError
from ssm_runner.runner.records.aws_credentials import AWSCredentials
from ssm_runner.runner.records.run_request import RunCommandRequest

logger = logging.getLogger(__name__)


def input_env_name(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, required: bool = False, override: str | None = None) -> str:
    """
    Read an action input the way the runner passes it.
    :param name: Input name as declared in action.yml, e.g. 'instance-id'.
    :param required: Raise when the input is missing or blank.
    :param override: Value given on the command line, takes precedence over the environment.
    :return: The stripped value, '' when unset.
    """
    value = override if override is not None else os.environ.get(input_env_name(name), '')
    value = value.strip()
    if required and not value:
        raise InputValidationError(f'Input required and not supplied: {name}', input_name=name)
    return value


def parse_timeout(raw_value: str) -> int:
    name = ActionInput.TIMEOUT_SECONDS.value
    if not raw_value:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = int(raw_value)
    except ValueError:
        raise InputValidationError(f'Input {name} must be an integer, got: {raw_value!r}', input_name=name)
    if not MIN_TIMEOUT_SECONDS <= timeout <= MAX_TIMEOUT_SECONDS:
        raise InputValidationError(
            f'Input {name} must be between {MIN_TIMEOUT_SECONDS} and {MAX_TIMEOUT_SECONDS}, got: {timeout}',
            input_name=name,
        )
    return timeout


def parse_platform(raw_value: str) -> str:
    if not raw_value:
        return PlatformTypes.LINUX.value
    platform = raw_value.lower()
    if platform not in PLATFORM_OPTIONS:
        name = ActionInput.PLATFORM.value
        raise InputValidationError(
            f"Input {name} must be one of {', '.join(PLATFORM_OPTIONS)}, got: {raw_value!r}", input_name=name)
    return platform


def read_run_request(arguments: argparse.Namespace) -> RunCommandRequest:
    """
    Collect and validate the action inputs. Nothing here talks to AWS.
    """
    request = RunCommandRequest(
        instance_id=get_input(ActionInput.INSTANCE_ID.value, required=True, override=arguments.instance_id),
        region=get_input(ActionInput.REGION.value, required=True, override=arguments.region),
        command=get_input(ActionInput.COMMAND.value, required=True, override=arguments.command),
        working_directory=get_input(
            ActionInput.WORKING_DIRECTORY.value, override=arguments.working_directory) or None,
        timeout_seconds=parse_timeout(
            get_input(ActionInput.TIMEOUT_SECONDS.value, override=arguments.timeout_seconds)),
        platform=parse_platform(get_input(ActionInput.PLATFORM.value, override=arguments.platform)),
    )
    logger.debug('Inputs: %s', request.dict())
    return request


def read_credentials(arguments: argparse.Namespace, region: str) -> AWSCredentials:
    if arguments.key_id and not arguments.secret_key:
        raise InputValidationError('--secret-key is required with --key-id', input_name='secret-key')
    return AWSCredentials(
        region_name=region,
        access_key_id=arguments.key_id,
        secret_access_key=arguments.secret_key,
        session_token=arguments.token,
    )
