import argparse

from ssm_runner.constants.platforms import PLATFORM_OPTIONS
from ssm_runner.typing import T_REGION_NAME, T_SECRET_KEY, T_ACCESS_KEY_ID, T_TOKEN, T_INSTANCE_ID


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Run a shell command on an EC2 instance through AWS Systems Manager. '
                    'Options left unset are read from the INPUT_* variables of the GitHub Actions runner.')
    parser.add_argument('-i', '--instance-id', type=T_INSTANCE_ID, default=None,
                        help="The id of the target EC2 instance")
    parser.add_argument('-r', '--region', type=T_REGION_NAME, default=None,
                        help="Region of the target instance")
    parser.add_argument('-c', '--command', type=str, default=None,
                        help="The shell command to run")
    parser.add_argument('-w', '--working-directory', type=str, default=None,
                        help="Working directory of the command on the instance")
    parser.add_argument('-T', '--timeout-seconds', type=str, default=None,
                        help="Remote execution timeout in seconds. Default: 3600")
    parser.add_argument('-p', '--platform', type=str, choices=PLATFORM_OPTIONS, default=None,
                        help="Platform of the target instance. Default: linux")
    parser.add_argument('-k', '--key-id', type=T_ACCESS_KEY_ID, default=None,
                        help="The AWS access key id. Default credential chain is used when unset")
    parser.add_argument('-s', '--secret-key', type=T_SECRET_KEY, default=None,
                        help="The AWS secret access key. (--key-id must be set)")
    parser.add_argument('-t', '--token', type=T_TOKEN, default=None,
                        help="The AWS session token to use. (--key-id must be set)")
    parser.add_argument('-l', '--log-file', type=str, default=None,
                        help="Also write log records to this file")
    return parser


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    return create_parser().parse_args(argv)
