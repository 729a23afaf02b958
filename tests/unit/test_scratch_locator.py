"""Unit tests for locating the scratch output and workspace."""

import pytest

from sway_scratch.core.errors import ErrorCode, ScratchContainerNotFound
from sway_scratch.services.scratch_locator import locate_scratch

from tests.fixtures.sway_trees import make_tree, output, scratch_output, window, workspace


def test_locates_scratch_output_and_workspace():
    tree = make_tree(
        output(10, "DP-1", [workspace(11, "1", focused=True)]),
        scratch_output(hidden=[window(50, app_id="term")], focus=[50]),
    )

    scratch = locate_scratch(tree)

    assert scratch.output.name == "__i3"
    assert scratch.workspace.name == "__i3_scratch"
    assert scratch.workspace.focus == [50]


def test_scratch_output_need_not_be_last():
    tree = make_tree(scratch_output(), output(10, "DP-1", [workspace(11, "1")]))
    assert locate_scratch(tree).output.id == 2


def test_missing_scratch_output_is_fatal():
    tree = make_tree(output(10, "DP-1", [workspace(11, "1", focused=True)]))

    with pytest.raises(ScratchContainerNotFound) as exc_info:
        locate_scratch(tree)

    assert exc_info.value.code == ErrorCode.SCRATCH_CONTAINER_NOT_FOUND
    assert exc_info.value.context["container"] == "__i3"


def test_missing_scratch_workspace_is_fatal():
    tree = make_tree(
        output(10, "DP-1", [workspace(11, "1", focused=True)]),
        output(2, "__i3", [workspace(3, "not-scratch")]),
    )

    with pytest.raises(ScratchContainerNotFound) as exc_info:
        locate_scratch(tree)

    assert exc_info.value.context["container"] == "__i3_scratch"
