import logging
import time

from botocore.exceptions import BotoCoreError, ClientError

from ssm_runner.constants.statuses import TERMINAL_STATUSES, POLL_INTERVAL_SECONDS, MAX_POLL_ATTEMPTS, \
    CommandStatus
from ssm_runner.exceptions import CommandSubmissionError, CommandPollingError, PollingTimeoutError
from ssm_runner.runner.records.run_request import RunCommandRequest
from ssm_runner.typing import T_COMMAND_ID, T_INSTANCE_ID, T_INVOCATION_RESPONSE

logger = logging.getLogger(__name__)


def send_shell_command(ssm_client, request: RunCommandRequest) -> T_COMMAND_ID:
    """
    Submit the command through SendCommand. Rejections are not retried.
    :param ssm_client: The ssm (Systems manager) client associated with the required region and account.
    :param request: The validated run request.
    :return: The command id assigned by Systems Manager.
    """
    logger.info('Sending command to SSM...')
    try:
        response = ssm_client.send_command(**request.send_command_kwargs())
    except (ClientError, BotoCoreError) as e:
        raise CommandSubmissionError(str(e)) from e
    command_id = response['Command']['CommandId']
    logger.info('Command sent with ID: %s', command_id)
    return command_id


def wait_for_command_invocation(ssm_client, command_id: T_COMMAND_ID, instance_id: T_INSTANCE_ID,
                                interval: float = POLL_INTERVAL_SECONDS,
                                max_attempts: int = MAX_POLL_ATTEMPTS,
                                sleep=time.sleep) -> T_INVOCATION_RESPONSE:
    """
    Poll GetCommandInvocation until the command reaches a terminal state.

    :param ssm_client: The ssm (Systems manager) client associated with the required region and account.
    :param command_id: The id of the command to check invocation results for.
    :param instance_id: The id of the instance on which the command was run.
    :param interval: Seconds to wait before each check.
    :param max_attempts: Checks allowed before giving up, independent of the remote timeout.
    :param sleep: Blocking wait function.
    :return: The first GetCommandInvocation response with a terminal status.
    """
    logger.info('Waiting for command to complete...')
    status = CommandStatus.IN_PROGRESS.value
    attempts = 0
    result = None
    while status not in TERMINAL_STATUSES:
        if attempts >= max_attempts:
            raise PollingTimeoutError(command_id=command_id, last_response=result, attempts=attempts)

        sleep(interval)

        try:
            result = ssm_client.get_command_invocation(CommandId=command_id, InstanceId=instance_id)
        except (ClientError, BotoCoreError) as e:
            raise CommandPollingError(str(e), command_id=command_id, last_response=result) from e

        status = result.get('Status', '')
        logger.info('Command status: %s', status)
        attempts += 1

    logger.debug('Command %s finished after %d checks', command_id, attempts)
    return result
