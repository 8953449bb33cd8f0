# src/taskman/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import UserCommand, parse_command
from ..cli.commands import registry as command_registry
from ..cli.render import render_banner, render_menu
from ..core.errors import TaskError
from ..core.models import ServiceStatus
from ..core.state import AppState

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND_TEXT = "Unknown command. Type 'help' for a list of commands."


def read_stdin_line(prompt: str) -> str | None:
    """input() with end of input mapped to None."""
    try:
        return input(prompt)
    except EOFError:
        return None


def format_error(error: TaskError) -> str:
    # Reads the reason from the error itself, never from service.status.
    return f"Error: {error.message}"


def describe_status(status: ServiceStatus) -> str:
    if status.is_error:
        return f"{status.kind.value} ({status.reason})"
    return status.kind.value


def dispatch(state: AppState, command: UserCommand) -> None:
    """Run one command. Never raises: every failure is reported through state.emit."""
    try:
        if not command_registry.handle(state, command):
            state.emit(UNKNOWN_COMMAND_TEXT)
    except TaskError as e:
        logger.info("Command %s failed: %r", command.value, e)
        state.emit(format_error(e))
    except Exception as e:
        logger.exception("Command handler crashed (command=%s).", command.value)
        state.emit(f"Unexpected error: {e}")
    finally:
        logger.debug("After %s: service status=%s", command.value, describe_status(state.service.status))


def run_console_loop(state: AppState) -> None:
    logger.info("Console loop started.")
    state.emit(render_banner(state.settings.app_name))

    while state.running:
        state.emit(render_menu())
        try:
            line = state.read_line("\nEnter command: ")
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            state.emit("")
            break

        if line is None:
            if state.settings.exit_on_eof:
                logger.info("Console EOF received, exiting.")
                break
            # Keep looping on a closed stream; only an explicit exit stops us.
            continue

        command = parse_command(line)
        logger.debug("Parsed %r as %s", line, command.value)

        try:
            dispatch(state, command)
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt inside a command, exiting.")
            state.emit("")
            break

    state.stop()
    state.emit(f"\nGoodbye! Thanks for using {state.settings.app_name}!")
    logger.info("Console loop finished.")
