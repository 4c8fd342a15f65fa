import pytest

from swaywsr.config import Configuration
from swaywsr.events import dispatch_event, handle_window_event, handle_workspace_event
from swaywsr.models import ShutdownEvent, WindowChange, WindowEvent, WorkspaceChange, WorkspaceEvent

TRIGGERING_WINDOW = {WindowChange.NEW, WindowChange.CLOSE, WindowChange.MOVE, WindowChange.FOCUS}
TRIGGERING_WORKSPACE = {WorkspaceChange.EMPTY, WorkspaceChange.FOCUS}


@pytest.mark.asyncio
@pytest.mark.parametrize("change", list(WindowChange))
async def test_window_events(change, connection, mock_logger):
    updated = await handle_window_event(WindowEvent(change), connection, Configuration(), mock_logger)
    assert updated is (change in TRIGGERING_WINDOW)
    assert connection.get_tree.await_count == (1 if updated else 0)


@pytest.mark.asyncio
@pytest.mark.parametrize("change", list(WorkspaceChange))
async def test_workspace_events(change, connection, mock_logger):
    updated = await handle_workspace_event(WorkspaceEvent(change), connection, Configuration(), mock_logger)
    assert updated is (change in TRIGGERING_WORKSPACE)
    assert connection.get_tree.await_count == (1 if updated else 0)


def test_unknown_change_kinds():
    assert WindowChange("something_new") is WindowChange.UNKNOWN
    assert WorkspaceChange(None) is WorkspaceChange.UNKNOWN


@pytest.mark.asyncio
async def test_dispatch(connection, sample_config, mock_logger):
    assert await dispatch_event(WindowEvent(WindowChange.NEW), connection, sample_config, mock_logger) is True
    assert await dispatch_event(WorkspaceEvent(WorkspaceChange.RENAME), connection, sample_config, mock_logger) is False
    assert await dispatch_event(ShutdownEvent(), connection, sample_config, mock_logger) is False
    assert connection.get_tree.await_count == 1
    assert connection.run_command.await_count == 3


@pytest.mark.asyncio
async def test_dispatch_unsupported(connection, mock_logger):
    with pytest.raises(TypeError):
        await dispatch_event("window", connection, Configuration(), mock_logger)
