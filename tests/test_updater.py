import pytest

from swaywsr.config import Configuration
from swaywsr.models import IpcError, SceneNode, WorkspaceName
from swaywsr.updater import compute_workspace_name, rename_command, update_tree

from .testtools import make_connection, output, tree, window, workspace


def commands(connection):
    return [c.args[0] for c in connection.run_command.call_args_list]


@pytest.mark.asyncio
async def test_update_tree(connection, sample_config, mock_logger):
    assert await update_tree(connection, sample_config, mock_logger) == 3
    assert commands(connection) == [
        'rename workspace "1" to "1 F firefox | K term"',
        'rename workspace "2 old | names" to "2"',
        'rename workspace "3" to "3 Gimp | pavucontrol"',
    ]


@pytest.mark.asyncio
async def test_rename_single_window(mock_logger):
    connection = make_connection(tree(output("DP-1", workspace("2", window(app_id="firefox")))))
    await update_tree(connection, Configuration(), mock_logger)
    connection.run_command.assert_awaited_once_with('rename workspace "2" to "2 firefox"')


@pytest.mark.asyncio
async def test_no_rename_when_unchanged(mock_logger):
    connection = make_connection(tree(output("DP-1", workspace("3 AA | BB", window(app_id="AA"), window(app_id="BB")))))
    assert await update_tree(connection, Configuration(), mock_logger) == 0
    connection.run_command.assert_not_awaited()


@pytest.mark.asyncio
async def test_idempotent(mock_logger):
    config = Configuration(icons={"firefox": "F"})
    before = tree(output("DP-1", workspace("1", window(app_id="firefox"), window(app_id="kitty"))))
    after = tree(output("DP-1", workspace("1 F firefox | kitty", window(app_id="firefox"), window(app_id="kitty"))))
    connection = make_connection(before, after)

    assert await update_tree(connection, config, mock_logger) == 1
    assert await update_tree(connection, config, mock_logger) == 0
    assert connection.run_command.await_count == 1


@pytest.mark.asyncio
async def test_workspace_without_name(mock_logger):
    connection = make_connection(
        tree(output("DP-1", workspace(None, window(app_id="kitty")), workspace("2", window(app_id="kitty"))))
    )
    assert await update_tree(connection, Configuration(), mock_logger) == 1
    assert commands(connection) == ['rename workspace "2" to "2 kitty"']
    mock_logger.error.assert_called_once()


def test_compute_workspace_name_without_name(mock_logger):
    with pytest.raises(WorkspaceName):
        compute_workspace_name(SceneNode.from_json(workspace(None)), Configuration(), mock_logger)


@pytest.mark.asyncio
async def test_broken_window_does_not_block_siblings(mock_logger):
    connection = make_connection(tree(output("DP-1", workspace("1", window(properties={}), window(app_id="kitty")))))
    await update_tree(connection, Configuration(), mock_logger)
    assert commands(connection) == ['rename workspace "1" to "1 kitty"']
    mock_logger.warning.assert_called_once()


@pytest.mark.asyncio
async def test_tree_error_propagates(mock_logger):
    connection = make_connection()
    connection.get_tree.side_effect = IpcError("IPC connection closed")
    with pytest.raises(IpcError):
        await update_tree(connection, Configuration(), mock_logger)
    connection.run_command.assert_not_awaited()


@pytest.mark.asyncio
async def test_command_error_propagates(mock_logger):
    connection = make_connection(tree(output("DP-1", workspace("1", window(app_id="a")), workspace("2", window(app_id="b")))))
    connection.run_command.side_effect = ConnectionResetError
    with pytest.raises(ConnectionResetError):
        await update_tree(connection, Configuration(), mock_logger)
    connection.run_command.assert_awaited_once()


def test_rename_command_quotes():
    assert rename_command('1 "x"', '1 "y"') == 'rename workspace "1 \\"x\\"" to "1 \\"y\\""'


def test_rename_command_backslashes():
    assert rename_command("1", "1 dir\\") == r'rename workspace "1" to "1 dir\\"'
    assert rename_command('1 a\\"b', "1") == r'rename workspace "1 a\\\"b" to "1"'


@pytest.mark.asyncio
async def test_alias_ending_with_backslash(mock_logger):
    connection = make_connection(tree(output("DP-1", workspace("1", window(app_id="term")))))
    await update_tree(connection, Configuration(aliases={"term": "C:\\"}), mock_logger)
    connection.run_command.assert_awaited_once_with(r'rename workspace "1" to "1 C:\\"')
