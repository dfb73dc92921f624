"""Tests for the runner output protocol."""

import io
import logging

import pytest

from conftest import parse_github_output
from ssm_runner.exceptions import OutputError
from ssm_runner.helpers import workflow


def test_set_output_appends_heredoc(github_output) -> None:
    workflow.set_output("stdout", "line one\nline two")
    workflow.set_output("status-code", 0)

    assert parse_github_output(github_output.read_text()) == {
        "stdout": "line one\nline two",
        "status-code": "0",
    }


def test_set_output_none_is_empty(github_output) -> None:
    workflow.set_output("stderr", None)

    assert parse_github_output(github_output.read_text()) == {"stderr": ""}


def test_set_output_without_output_file(capsys) -> None:
    workflow.set_output("status", "Success")

    assert capsys.readouterr().out == "::set-output name=status::Success\n"


def test_format_command_escapes_message_and_properties() -> None:
    line = workflow.format_command("error", "50% done\r\nnext", title="a:b,c")

    assert line == "::error title=a%3Ab%2Cc::50%25 done%0D%0Anext"


def test_set_failed_marks_exit_code(capsys) -> None:
    assert workflow.get_exit_code() == workflow.EXIT_SUCCESS

    workflow.set_failed("Stderr detected")

    assert workflow.get_exit_code() == workflow.EXIT_FAILURE
    assert capsys.readouterr().out == "::error::Stderr detected\n"


def test_group_wraps_output(capsys) -> None:
    with workflow.group("stdout"):
        print("hello")

    assert capsys.readouterr().out == "::group::stdout\nhello\n::endgroup::\n"


def test_is_debug(monkeypatch) -> None:
    assert not workflow.is_debug()
    monkeypatch.setenv("RUNNER_DEBUG", "1")
    assert workflow.is_debug()


def test_handler_maps_levels_to_commands() -> None:
    stream = io.StringIO()
    logger = logging.getLogger("ssm_runner.tests.workflow")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    handler = workflow.WorkflowCommandHandler(stream=stream)
    logger.addHandler(handler)
    try:
        logger.debug("polling")
        logger.info("Command status: InProgress")
        logger.warning("something on stderr")
        logger.error("boom")
    finally:
        logger.removeHandler(handler)

    assert stream.getvalue().splitlines() == [
        "::debug::polling",
        "Command status: InProgress",
        "::warning::something on stderr",
        "::error::boom",
    ]


def test_set_output_delimiter_collision(github_output, monkeypatch) -> None:
    monkeypatch.setattr(workflow.uuid, "uuid4", lambda: "fixed")

    with pytest.raises(OutputError):
        workflow.set_output("stdout", "before ghadelimiter_fixed after")

    assert github_output.read_text() == ""


def test_set_output_unwritable_file(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_OUTPUT", str(tmp_path))

    with pytest.raises(OutputError) as exc_info:
        workflow.set_output("status", "Success")

    assert "Unable to write output 'status'" in exc_info.value.message
