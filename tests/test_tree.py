import pytest

from swaywsr.config import Configuration
from swaywsr.models import MissingVisibility, SceneNode
from swaywsr.tree import get_classes, get_window_nodes, get_workspaces, is_hidden_by_focus_filter, iter_window_nodes

from .testtools import container, output, tree, window, workspace

FOCUSED_ONLY = Configuration(options={"focused_only": True})


def names(nodes):
    return [n.name for n in nodes]


def test_get_workspaces(sample_tree):
    assert names(get_workspaces(sample_tree)) == ["__i3_scratch", "1", "2 old | names", "3"]


def test_get_workspaces_only_direct_children():
    root = tree(output("DP-1", workspace("1", container(workspace("nested"))), {"type": "con", "name": "dock", "nodes": []}))
    assert names(get_workspaces(root)) == ["__i3_scratch", "1"]


def test_window_nodes_pre_order():
    ws = SceneNode.from_json(
        workspace(
            "1",
            container(window(app_id="a"), container(window(app_id="b"), window(app_id="c"))),
            window(app_id="d"),
        )
    )
    assert names(iter_window_nodes(ws.nodes)) == ["a", "b", "c", "d"]


def test_window_children_are_walked():
    # a window is yielded before the windows below it
    ws = SceneNode.from_json(workspace("1", window(app_id="parent", nodes=[window(app_id="child")])))
    assert names(iter_window_nodes(ws.nodes)) == ["parent", "child"]


def test_containers_are_not_collected():
    ws = SceneNode.from_json(workspace("1", container(container()), container(window(cls="Gimp"))))
    assert names(get_window_nodes(ws)) == ["Gimp"]


def test_floating_after_tiled():
    ws = SceneNode.from_json(
        workspace(
            "1",
            window(app_id="tiled1"),
            window(app_id="tiled2"),
            floating=[window(app_id="float1"), container(window(app_id="float2"))],
        )
    )
    assert names(get_window_nodes(ws)) == ["tiled1", "tiled2", "float1", "float2"]


def test_window_handle_without_app_id():
    ws = SceneNode.from_json(workspace("1", window(properties={"class": "XTerm"})))
    assert len(get_window_nodes(ws)) == 1


@pytest.mark.parametrize(
    ("visible", "focused", "hidden"),
    [
        (True, False, True),
        (False, False, False),
        (True, True, False),
        (False, True, False),
    ],
)
def test_focus_filter(visible, focused, hidden):
    node = SceneNode.from_json(window(app_id="a", visible=visible, focused=focused))
    assert is_hidden_by_focus_filter(node, FOCUSED_ONLY) is hidden


def test_focus_filter_disabled():
    node = SceneNode.from_json(window(app_id="a", visible=True, focused=False))
    assert is_hidden_by_focus_filter(node, Configuration()) is False


def test_focus_filter_missing_visibility():
    node = SceneNode.from_json(window(app_id="a", visible=None))
    with pytest.raises(MissingVisibility):
        is_hidden_by_focus_filter(node, FOCUSED_ONLY)
    with pytest.raises(MissingVisibility):
        is_hidden_by_focus_filter(node, Configuration())


def test_get_classes_drops_window_without_visibility(mock_logger):
    ws = SceneNode.from_json(workspace("1", window(app_id="a"), window(app_id="novis", visible=None)))
    assert get_classes(ws, Configuration(), mock_logger) == ["a"]
    mock_logger.warning.assert_called_once()
    assert "visibility" in str(mock_logger.warning.call_args[0][1])


def test_get_classes(sample_config, mock_logger):
    ws = SceneNode.from_json(workspace("1", window(app_id="firefox"), window(app_id="kitty"), window(cls="Gimp")))
    assert get_classes(ws, sample_config, mock_logger) == ["F firefox", "K term", "Gimp"]
    mock_logger.warning.assert_not_called()


def test_get_classes_skips_broken_window(sample_config, mock_logger):
    ws = SceneNode.from_json(workspace("1", window(app_id="firefox"), window(properties={}), window(app_id="kitty")))
    assert get_classes(ws, sample_config, mock_logger) == ["F firefox", "K term"]
    mock_logger.warning.assert_called_once()
    assert "app_id or window_properties" in str(mock_logger.warning.call_args[0][1])


def test_get_classes_focused_only(mock_logger):
    ws = SceneNode.from_json(
        workspace(
            "1",
            window(app_id="shown", visible=True, focused=False),
            window(app_id="hidden", visible=False, focused=False),
            window(app_id="focused", visible=True, focused=True),
            window(app_id="unknown", visible=None),
        )
    )
    assert get_classes(ws, FOCUSED_ONLY, mock_logger) == ["hidden", "focused"]
    mock_logger.warning.assert_called_once()
