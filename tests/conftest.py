" generic fixtures "
from unittest.mock import Mock

import pytest

from swaywsr.config import Configuration
from .testtools import make_connection, output, tree, window, workspace


def pytest_configure():
    "Runs once before all"
    from swaywsr.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def test_logger():
    "A real logger"
    from swaywsr.logging_setup import get_logger

    return get_logger("tests")


@pytest.fixture
def mock_logger():
    "A logger recording its calls"
    return Mock()


@pytest.fixture
def empty_config():
    return Configuration()


@pytest.fixture
def sample_config():
    "Icons for firefox & kitty, an alias for kitty"
    return Configuration(
        icons={"firefox": "F", "kitty": "K"},
        aliases={"kitty": "term"},
        general={"separator": " | "},
        options={},
    )


@pytest.fixture
def sample_tree():
    "Two outputs, three workspaces"
    return tree(
        output(
            "DP-1",
            workspace("1", window(app_id="firefox"), window(app_id="kitty", focused=True)),
            workspace("2 old | names"),
        ),
        output(
            "HDMI-A-1",
            workspace("3", window(cls="Gimp"), floating=[window(app_id="pavucontrol")]),
        ),
    )


@pytest.fixture
def connection(sample_tree):
    "A connection serving `sample_tree`"
    return make_connection(sample_tree)
