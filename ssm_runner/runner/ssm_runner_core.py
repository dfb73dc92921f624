import logging

import boto3
from botocore.exceptions import BotoCoreError

from ssm_runner.exceptions import CommandSubmissionError
from ssm_runner.runner.records.aws_credentials import AWSCredentials
from ssm_runner.typing import T_TOKEN, T_ACCESS_KEY_ID, T_SECRET_KEY, T_REGION_NAME

logger = logging.getLogger(__name__)


class SSMRunnerCore:
    def __init__(self,
                 region_name: T_REGION_NAME,
                 access_key_id: T_ACCESS_KEY_ID = None,
                 secret_access_key: T_SECRET_KEY = None,
                 session_token: T_TOKEN = None,
                 ):
        self.aws_creds: AWSCredentials = AWSCredentials(
            session_token=session_token,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            region_name=region_name,
        )
        self.session: boto3.session.Session | None = None

    @classmethod
    def from_credentials(cls, credentials: AWSCredentials, **kwargs):
        return cls(
            region_name=credentials.region_name,
            access_key_id=credentials.access_key_id,
            secret_access_key=credentials.secret_access_key,
            session_token=credentials.session_token,
            **kwargs,
        )

    def init_aws_session(self) -> boto3.session.Session:
        """
        Initialize the session. Unset keys fall through to the default credential chain.
        """
        self.session = boto3.session.Session(aws_access_key_id=self.aws_creds.access_key_id,
                                             aws_secret_access_key=self.aws_creds.secret_access_key,
                                             region_name=self.aws_creds.region_name,
                                             aws_session_token=self.aws_creds.session_token)
        logger.debug('AWS session initialized for region %s', self.aws_creds.region_name)
        return self.session

    def ssm_client(self):
        """
        Build the SSM client. A malformed region or missing configuration is reported as a submission error.
        """
        try:
            if self.session is None:
                self.init_aws_session()
            return self.session.client('ssm')
        except BotoCoreError as e:
            raise CommandSubmissionError(str(e)) from e
