#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import signal
import sys

from ssm_runner.arguments import parse_arguments
from ssm_runner.exceptions import SSMRunnerError
from ssm_runner.helpers import workflow
from ssm_runner.helpers.inputs import read_run_request, read_credentials
from ssm_runner.helpers.print_output import print_table
from ssm_runner.runner.records.command_invocations import CommandInvocation
from ssm_runner.runner.ssm_runner import SSMRunner


def setup_logging(log_file: str | None = None) -> logging.Logger:
    logger = logging.getLogger('ssm_runner')
    logger.setLevel(logging.DEBUG if workflow.is_debug() else logging.INFO)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(workflow.WorkflowCommandHandler())
    if log_file:
        ch = logging.FileHandler(log_file)
        ch.setFormatter(logging.Formatter('%(asctime)s: %(message)s'))
        logger.addHandler(ch)
    logger.propagate = False
    return logger


def show_invocation(invocation: CommandInvocation) -> None:
    print_table(
        columns_names=['Command ID', 'Instance ID', 'Region', 'Status', 'Status code'],
        table_data=[[invocation.id, invocation.instance_id, invocation.region,
                     invocation.status, invocation.status_code]],
        title='[*] Command invocation:',
    )


def start(argv: list[str] | None = None, runner_factory=SSMRunner) -> int:
    """
        Run the action: read inputs, dispatch the command, publish outputs.
        :return: The process exit code.
    """
    workflow.reset_exit_code()
    arguments = parse_arguments(argv)
    logger = setup_logging(arguments.log_file)
    signal.signal(signal.SIGINT, signal.default_int_handler)

    try:
        request = read_run_request(arguments)
        credentials = read_credentials(arguments, region=request.region)
        runner = runner_factory.from_credentials(credentials)
        invocation = runner.run(request)
    except SSMRunnerError as e:
        logger.debug('Run aborted', exc_info=True)
        workflow.set_failed(e.message)
        return workflow.get_exit_code()
    except KeyboardInterrupt:
        workflow.set_failed('Interrupted')
        return workflow.get_exit_code()

    show_invocation(invocation)
    failures = runner.evaluate(invocation)
    for message in failures:
        workflow.set_failed(message)
    if not failures:
        logger.info('Command completed successfully with status: %s', invocation.status)
    return workflow.get_exit_code()


def main() -> None:
    sys.exit(start())


if __name__ == "__main__":
    main()
