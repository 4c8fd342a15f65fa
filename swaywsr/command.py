"""Swaywsr - sway workspace renamer (command line entry point)."""

import asyncio
import sys

from .config_loader import ConfigLoader
from .constants import CONFIG_FILE, DEFAULT_ICON_SET
from .icons import ICON_SETS
from .ipc import init as ipc_init
from .logging_setup import get_logger, init_logger
from .manager import Swaywsr, get_event_stream_with_retry
from .models import ExitCode, IpcError, SwaywsrError
from .version import VERSION

__all__ = ["main", "run_daemon", "use_flag", "use_param"]

USAGE = f"""Syntax: swaywsr [options]

Renames sway workspaces after the applications they contain.

Options:
 --config FILE            Configuration file (default: {CONFIG_FILE})
 --icons NAME             Built-in icon set: {", ".join(ICON_SETS)} (default: {DEFAULT_ICON_SET})
 --no-names               Only display icons when available
 --remove-duplicates      Display each application once per workspace
 --focused-only           Skip visible windows which are not focused
 --debug FILE             Verbose logging, also written to FILE
 --version                Show the version
 --help                   Show this help

Send SIGHUP to reload the configuration.
"""

# command line flag -> option name
FLAG_OPTIONS = {
    "--no-names": "no_names",
    "--remove-duplicates": "remove_duplicates",
    "--focused-only": "focused_only",
}


def use_param(txt: str) -> str:
    """Check if parameter `txt` is in sys.argv.

    if found, removes it from sys.argv & returns the argument value
    """
    v = ""
    if txt in sys.argv:
        i = sys.argv.index(txt)
        v = sys.argv[i + 1]
        del sys.argv[i : i + 2]
    return v


def use_flag(txt: str) -> bool:
    """Check if flag `txt` is in sys.argv, removing it."""
    if txt in sys.argv:
        sys.argv.remove(txt)
        return True
    return False


async def run_daemon(loader: ConfigLoader) -> None:
    """Run the daemon until sway exits."""
    manager = Swaywsr(loader)
    await manager.initialize()

    manager.event_stream = await get_event_stream_with_retry()
    if manager.event_stream is None:
        msg = "Failed to open the sway event stream"
        raise IpcError(msg)

    manager.install_signal_handlers()
    manager.log.debug("[ initialized ]".center(80, "="))
    try:
        await manager.run()
    except asyncio.CancelledError:
        manager.log.critical("cancelled")
    finally:
        await manager.close()


def main() -> None:
    """Run the command."""
    if use_flag("--help") or use_flag("-h"):
        print(USAGE)
        return
    if use_flag("--version"):
        print(VERSION)
        return

    try:
        debug_flag = use_param("--debug")
        config_filename = use_param("--config")
        icon_set = use_param("--icons") or DEFAULT_ICON_SET
    except IndexError:
        print(USAGE)
        sys.exit(ExitCode.USAGE_ERROR)
    forced_options = {option: True for flag, option in FLAG_OPTIONS.items() if use_flag(flag)}

    if debug_flag:
        init_logger(filename=debug_flag, force_debug=True)
    else:
        init_logger()
    ipc_init()
    log = get_logger("startup")

    if len(sys.argv) > 1:
        log.critical("Unknown arguments: %s", " ".join(sys.argv[1:]))
        print(USAGE)
        sys.exit(ExitCode.USAGE_ERROR)

    loader = ConfigLoader(get_logger("config"), config_filename, icon_set, forced_options)
    exit_code = ExitCode.SUCCESS
    try:
        asyncio.run(run_daemon(loader))
    except KeyboardInterrupt:
        pass
    except SwaywsrError:
        log.critical("Command failed.")
        exit_code = ExitCode.CONFIG_ERROR
    except IpcError as e:
        log.critical("Can't talk to sway: %s", e)
        exit_code = ExitCode.CONNECTION_ERROR
    except Exception:  # pylint: disable=W0718
        log.critical("Unhandled exception:", exc_info=True)
        exit_code = ExitCode.FAILURE
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
