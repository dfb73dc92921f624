"""Shared fixtures for runner tests."""

import os

import boto3
import pytest
from botocore.stub import Stubber

from ssm_runner.helpers import workflow

INSTANCE_ID = "i-0123456789abcdef0"
REGION = "us-east-1"
COMMAND_ID = "11111111-2222-3333-4444-555555555555"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop runner variables leaking in from the host."""
    for name in list(os.environ):
        if name.startswith("INPUT_") or name in {"GITHUB_OUTPUT", "RUNNER_DEBUG"}:
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    workflow.reset_exit_code()


@pytest.fixture
def github_output(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Point GITHUB_OUTPUT at a temporary file."""
    path = tmp_path / "github_output"
    path.write_text("")
    monkeypatch.setenv("GITHUB_OUTPUT", str(path))
    return path


@pytest.fixture
def ssm_client():
    return boto3.client(
        "ssm",
        region_name=REGION,
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(ssm_client):
    with Stubber(ssm_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


def invocation_response(
    status: str,
    response_code: int = 0,
    stdout: str = "",
    stderr: str = "",
) -> dict:
    return {
        "CommandId": COMMAND_ID,
        "InstanceId": INSTANCE_ID,
        "Status": status,
        "StatusDetails": status,
        "ResponseCode": response_code,
        "StandardOutputContent": stdout,
        "StandardErrorContent": stderr,
    }


def invocation_params() -> dict:
    return {"CommandId": COMMAND_ID, "InstanceId": INSTANCE_ID}


def parse_github_output(text: str) -> dict[str, str]:
    """Parse the heredoc records written to GITHUB_OUTPUT."""
    outputs = {}
    lines = text.splitlines()
    index = 0
    while index < len(lines):
        name, delimiter = lines[index].split("<<", 1)
        index += 1
        value_lines = []
        while lines[index] != delimiter:
            value_lines.append(lines[index])
            index += 1
        outputs[name] = "\n".join(value_lines)
        index += 1
    return outputs
