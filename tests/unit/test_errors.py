"""Unit tests for the structured error types."""

from sway_scratch.core.errors import (
    ErrorCode,
    FocusedWorkspaceNotFound,
    ScratchContainerNotFound,
    ScratchError,
    SpawnFailed,
    SwayConnectionError,
)


def test_to_dict_includes_suggestion_and_context():
    error = ScratchContainerNotFound("__i3")

    result = error.to_dict()

    assert result["code"] == 1500
    assert result["message"] == "scratch container not found: __i3"
    assert "suggestion" in result
    assert result["context"] == {"container": "__i3"}


def test_minimal_error_dict():
    error = ScratchError(ErrorCode.SWAY_IPC_FAILED, "boom")
    assert error.to_dict() == {"code": 1401, "message": "boom"}
    assert str(error) == "boom"


def test_all_fatal_errors_share_base():
    for error in (
        ScratchContainerNotFound("__i3_scratch"),
        FocusedWorkspaceNotFound(),
        SwayConnectionError("GET_TREE", "broken pipe"),
        SpawnFailed("foot", "not found"),
    ):
        assert isinstance(error, ScratchError)


def test_connection_error_codes():
    assert SwayConnectionError("connect", "x", not_running=True).code == ErrorCode.SWAY_NOT_RUNNING
    assert SwayConnectionError("RUN_COMMAND", "x").code == ErrorCode.SWAY_IPC_FAILED
