"""End-to-end toggle scenarios against a mocked sway connection.

Each test drives ToggleOrchestrator through one path of the state machine:
toggle, reparent, spawn, or failure.
"""

import pytest

from sway_scratch.core.config import SpawnStrategy, ToggleConfig
from sway_scratch.core.errors import FocusedWorkspaceNotFound, ScratchContainerNotFound, SpawnFailed
from sway_scratch.models.criteria import Criteria
from sway_scratch.models.toggle_state import ToggleAction, ToggleState
from sway_scratch.services.process_launcher import SwayExecLauncher
from sway_scratch.services.toggle_orchestrator import ToggleOrchestrator

from tests.fixtures.ipc_replies import con_for, rejected, reply
from tests.fixtures.sway_trees import make_tree, output, scratch_output, window, workspace


EXEC = "foot --app-id term"
RESIZE = "set 90 ppt 90 ppt"


def sent_commands(conn) -> list[str]:
    return [call.args[0] for call in conn.command.await_args_list]


@pytest.fixture
def orchestrator(sway_client, mock_launcher):
    return ToggleOrchestrator(sway_client, launcher=mock_launcher)


class TestFirstUse:
    """Scenario A: the scratchpad has never been created."""

    @pytest.mark.asyncio
    async def test_spawns_when_nothing_matches(
        self, orchestrator, mock_sway_connection, mock_launcher, empty_scratch_tree
    ):
        mock_sway_connection.get_tree.return_value = con_for(empty_scratch_tree)
        mock_sway_connection.command.side_effect = [[rejected()], [rejected()]]

        result = await orchestrator.toggle(Criteria.for_app_id("term"), EXEC, RESIZE)

        assert sent_commands(mock_sway_connection) == [
            f"[app_id=term] scratchpad show,resize {RESIZE},move position center",
            "[app_id=term] move scratchpad",
        ]
        mock_launcher.spawn.assert_awaited_once_with(EXEC)
        assert result.state == ToggleState.SATISFIED
        assert result.action == ToggleAction.SPAWNED
        assert result.history == (
            ToggleState.PLANNED,
            ToggleState.SUBMITTED,
            ToggleState.RECOVERING_REPARENT,
            ToggleState.RECOVERING_SPAWN,
            ToggleState.SATISFIED,
        )

    @pytest.mark.asyncio
    async def test_spawn_failure_fails(
        self, orchestrator, mock_sway_connection, mock_launcher, empty_scratch_tree
    ):
        mock_sway_connection.get_tree.return_value = con_for(empty_scratch_tree)
        mock_sway_connection.command.side_effect = [[rejected()], [rejected()]]
        mock_launcher.spawn.side_effect = SpawnFailed(EXEC, "No such file or directory")

        result = await orchestrator.toggle(Criteria.for_app_id("term"), EXEC)

        assert result.state == ToggleState.FAILED
        assert result.action == ToggleAction.NONE
        assert isinstance(result.error, SpawnFailed)
        with pytest.raises(SpawnFailed):
            result.raise_for_failure()

    @pytest.mark.asyncio
    async def test_empty_reply_counts_as_rejection(
        self, orchestrator, mock_sway_connection, mock_launcher, empty_scratch_tree
    ):
        mock_sway_connection.get_tree.return_value = con_for(empty_scratch_tree)
        mock_sway_connection.command.side_effect = [[], []]

        result = await orchestrator.toggle(Criteria.for_app_id("term"), EXEC)

        assert result.action == ToggleAction.SPAWNED
        mock_launcher.spawn.assert_awaited_once()


class TestToggleHide:
    """Scenario B: the target is showing on the focused workspace."""

    @pytest.mark.asyncio
    async def test_hides_without_resize(self, orchestrator, mock_sway_connection, mock_launcher):
        tree = make_tree(
            output(10, "DP-1", [workspace(11, "1", floating=[window(50, app_id="term", focused=True)])]),
            scratch_output(focus=[50]),
        )
        mock_sway_connection.get_tree.return_value = con_for(tree)
        mock_sway_connection.command.return_value = [reply()]

        result = await orchestrator.toggle(Criteria.for_app_id("term"), EXEC, RESIZE)

        assert sent_commands(mock_sway_connection) == ["[app_id=term] scratchpad show"]
        assert result.action == ToggleAction.TOGGLED
        assert result.history == (ToggleState.PLANNED, ToggleState.SUBMITTED, ToggleState.SATISFIED)
        mock_launcher.spawn.assert_not_awaited()


class TestConflictSwap:
    """Scenario C: B is showing on the focused workspace, A is requested."""

    @pytest.mark.asyncio
    async def test_hides_b_then_shows_a(self, orchestrator, mock_sway_connection, mock_launcher):
        tree = make_tree(
            output(10, "DP-1", [
                workspace(11, "1",
                          nodes=[window(70, app_id="firefox")],
                          floating=[window(60, app_id="b", focused=True)]),
            ]),
            scratch_output(hidden=[window(50, app_id="a")], focus=[50, 60]),
        )
        mock_sway_connection.get_tree.return_value = con_for(tree)
        mock_sway_connection.command.return_value = [reply(), reply()]

        result = await orchestrator.toggle(Criteria.for_app_id("a"), EXEC, RESIZE)

        assert sent_commands(mock_sway_connection) == [
            f"[con_id=60] scratchpad show;[app_id=a] scratchpad show,resize {RESIZE},move position center"
        ]
        assert result.action == ToggleAction.TOGGLED
        assert len(result.outcomes) == 2
        mock_launcher.spawn.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_only_target_result_decides(self, orchestrator, mock_sway_connection):
        tree = make_tree(
            output(10, "DP-1", [workspace(11, "1", floating=[window(60, app_id="b", focused=True)])]),
            scratch_output(hidden=[window(50, app_id="a")], focus=[50, 60]),
        )
        mock_sway_connection.get_tree.return_value = con_for(tree)
        mock_sway_connection.command.return_value = [rejected("hide failed"), reply()]

        result = await orchestrator.toggle(Criteria.for_app_id("a"), EXEC)

        assert result.action == ToggleAction.TOGGLED
        assert mock_sway_connection.command.await_count == 1


class TestReparent:
    """The window exists but has left the scratchpad."""

    @pytest.mark.asyncio
    async def test_move_scratchpad_recovers(
        self, orchestrator, mock_sway_connection, mock_launcher, empty_scratch_tree
    ):
        mock_sway_connection.get_tree.return_value = con_for(empty_scratch_tree)
        mock_sway_connection.command.side_effect = [[rejected()], [reply()]]

        result = await orchestrator.toggle(Criteria.for_class("Spotify"), "spotify")

        assert sent_commands(mock_sway_connection) == [
            "[class=Spotify] scratchpad show",
            "[class=Spotify] move scratchpad",
        ]
        assert result.action == ToggleAction.REPARENTED
        mock_launcher.spawn.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_reparent_disabled_goes_straight_to_spawn(
        self, sway_client, mock_sway_connection, mock_launcher, empty_scratch_tree
    ):
        orchestrator = ToggleOrchestrator(
            sway_client, launcher=mock_launcher, config=ToggleConfig(reparent_on_failure=False)
        )
        mock_sway_connection.get_tree.return_value = con_for(empty_scratch_tree)
        mock_sway_connection.command.return_value = [rejected()]

        result = await orchestrator.toggle(Criteria.for_app_id("term"), EXEC)

        assert sent_commands(mock_sway_connection) == ["[app_id=term] scratchpad show"]
        assert ToggleState.RECOVERING_REPARENT not in result.history
        assert result.action == ToggleAction.SPAWNED


class TestSwayExecStrategy:

    @pytest.mark.asyncio
    async def test_spawn_through_ipc(self, sway_client, mock_sway_connection, empty_scratch_tree):
        orchestrator = ToggleOrchestrator(
            sway_client, config=ToggleConfig(spawn_strategy=SpawnStrategy.SWAY)
        )
        assert isinstance(orchestrator.launcher, SwayExecLauncher)
        mock_sway_connection.get_tree.return_value = con_for(empty_scratch_tree)
        mock_sway_connection.command.side_effect = [[rejected()], [rejected()], [reply()]]

        result = await orchestrator.toggle(Criteria.for_app_id("term"), EXEC)

        assert sent_commands(mock_sway_connection)[-1] == f"exec {EXEC}"
        assert result.action == ToggleAction.SPAWNED

    @pytest.mark.asyncio
    async def test_rejected_exec_fails(self, sway_client, mock_sway_connection, empty_scratch_tree):
        orchestrator = ToggleOrchestrator(
            sway_client, config=ToggleConfig(spawn_strategy=SpawnStrategy.SWAY)
        )
        mock_sway_connection.get_tree.return_value = con_for(empty_scratch_tree)
        mock_sway_connection.command.side_effect = [[rejected()], [rejected()], [rejected("bad exec")]]

        result = await orchestrator.toggle(Criteria.for_app_id("term"), EXEC)

        assert result.state == ToggleState.FAILED
        assert "bad exec" in str(result.error)


class TestFatalSnapshots:

    @pytest.mark.asyncio
    async def test_missing_scratch_sends_nothing(self, orchestrator, mock_sway_connection):
        tree = make_tree(output(10, "DP-1", [workspace(11, "1", focused=True)]))
        mock_sway_connection.get_tree.return_value = con_for(tree)

        with pytest.raises(ScratchContainerNotFound):
            await orchestrator.toggle(Criteria.for_app_id("term"), EXEC)

        mock_sway_connection.command.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_focused_workspace_sends_nothing(self, orchestrator, mock_sway_connection):
        tree = make_tree(
            output(10, "DP-1", [workspace(11, "1", floating=[window(60, app_id="b")])]),
            scratch_output(focus=[60]),
        )
        mock_sway_connection.get_tree.return_value = con_for(tree)

        with pytest.raises(FocusedWorkspaceNotFound):
            await orchestrator.toggle(Criteria.for_app_id("term"), EXEC)

        mock_sway_connection.command.assert_not_awaited()
