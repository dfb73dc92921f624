import logging
import time

from ssm_runner.constants.outputs import ActionOutput
from ssm_runner.constants.platforms import PlatformTypes
from ssm_runner.constants.statuses import CommandStatus, POLL_INTERVAL_SECONDS, MAX_POLL_ATTEMPTS
from ssm_runner.exceptions import CommandPollingError
from ssm_runner.helpers import workflow
from ssm_runner.helpers.commands import send_shell_command, wait_for_command_invocation
from ssm_runner.runner.platform_mapping import PLATFORM_MAPPING
from ssm_runner.runner.records.command_invocations import CommandInvocation
from ssm_runner.runner.records.run_request import RunCommandRequest
from ssm_runner.runner.ssm_runner_core import SSMRunnerCore

logger = logging.getLogger(__name__)


class SSMRunner(SSMRunnerCore):

    def __init__(self, *args,
                 publish=workflow.set_output,
                 sleep=time.sleep,
                 poll_interval: float = POLL_INTERVAL_SECONDS,
                 max_attempts: int = MAX_POLL_ATTEMPTS,
                 **kwargs):
        super().__init__(*args, **kwargs)
        self.publish = publish
        self.sleep = sleep
        self.poll_interval = poll_interval
        self.max_attempts = max_attempts

    def run(self, request: RunCommandRequest) -> CommandInvocation:
        """
        Submit the command and wait for it to finish.
        The command id is published as soon as it is known, the other outputs once a response exists,
        so they are available to later steps even when this raises.
        :param request: The validated run request.
        :return: The terminal invocation record.
        """
        handler = PLATFORM_MAPPING[PlatformTypes(request.platform)]
        logger.info('Running command on instance %s in region %s', request.instance_id, request.region)
        logger.info('Command (%s): %s', handler.shell, request.command)
        if request.working_directory:
            logger.info('Working directory: %s', request.working_directory)

        ssm_client = self.ssm_client()
        command_id = send_shell_command(ssm_client, request)
        self.publish(ActionOutput.COMMAND_ID.value, command_id)

        try:
            response = wait_for_command_invocation(
                ssm_client, command_id, request.instance_id,
                interval=self.poll_interval,
                max_attempts=self.max_attempts,
                sleep=self.sleep,
            )
        except CommandPollingError as e:
            if e.last_response:
                self._record(CommandInvocation.from_response(
                    e.last_response, command_id=command_id, region=request.region))
            raise

        invocation = self._record(CommandInvocation.from_response(
            response, command_id=command_id, region=request.region))
        if invocation.stdout:
            with workflow.group('stdout'):
                logger.info(invocation.stdout)
        if invocation.stderr:
            logger.warning(invocation.stderr)
        return invocation

    def _record(self, invocation: CommandInvocation) -> CommandInvocation:
        for name, value in invocation.outputs().items():
            # published right after submission
            if name == ActionOutput.COMMAND_ID.value:
                continue
            self.publish(name, value)
        return invocation

    @staticmethod
    def evaluate(invocation: CommandInvocation) -> list[str]:
        """
        Map a terminal invocation onto failure messages. An empty list means success:
        status Success, exit code 0 and nothing on stderr.
        """
        failures = []
        if invocation.stderr:
            failures.append('Stderr detected')

        status = invocation.status
        if status == CommandStatus.FAILED.value:
            failures.append(f'Command execution failed with status: {status}')
        elif status == CommandStatus.TIMED_OUT.value:
            failures.append('Command execution timed out')
        elif status == CommandStatus.CANCELLED.value:
            failures.append('Command execution was cancelled')
        elif invocation.status_code != 0:
            failures.append(
                f'Command exited with non-zero status code: {invocation.status_code}, status: {status}')
        return failures
