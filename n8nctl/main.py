#!/usr/bin/env python3
"""n8nctl - Main entry point"""

import functools
import os
import sys
from pathlib import Path
from typing import Dict

# Rich-Click: CLI help with colors
import rich_click as click
from click.exceptions import NoSuchOption, UsageError

from n8nctl import __version__
from n8nctl.base import StackContext
from n8nctl.commands import (
    backup,
    check,
    logs,
    restart,
    scale,
    secrets,
    start,
    status,
    stop,
    update,
)
from n8nctl.logger import StackLogger

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.USE_MARKDOWN = False
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.MAX_WIDTH = 100

# COMMANDS: Bold cyan
click.rich_click.STYLE_COMMAND = "bold cyan"

# OPTIONS: Bold magenta
click.rich_click.STYLE_OPTION = "bold magenta"
click.rich_click.STYLE_SWITCH = "bold green"
click.rich_click.STYLE_ARGUMENT = "bold yellow"

# HEADERS: Bold cyan
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_USAGE = "bold yellow"
click.rich_click.STYLE_USAGE_COMMAND = "bold cyan"

# HELP TEXT
click.rich_click.STYLE_HELPTEXT_FIRST_LINE = "bold white"
click.rich_click.STYLE_HELPTEXT = ""
click.rich_click.STYLE_OPTION_HELP = ""

# METAVARS: Yellow
click.rich_click.STYLE_METAVAR = "bold yellow"

# PANEL BORDERS: Cyan
click.rich_click.STYLE_OPTIONS_PANEL_BORDER = "cyan"
click.rich_click.STYLE_COMMANDS_PANEL_BORDER = "cyan"

# ALIGNMENT
click.rich_click.ALIGN_OPTIONS_PANEL = "left"
click.rich_click.ALIGN_ERRORS_PANEL = "left"
click.rich_click.ERRORS_EPILOGUE = ""

logger = StackLogger("n8nctl")


def handle_cli_errors(func):
    """Decorator to handle errors that escape click gracefully."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            logger.warning("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error(f"Unexpected error: {e}")

            # Show traceback if DEBUG env var is set
            if os.environ.get("DEBUG"):
                import traceback

                traceback.print_exc()
            sys.exit(1)

    return wrapper


@click.command("help")
@click.pass_context
def help_command(ctx: click.Context) -> None:
    """Show this help message"""
    click.echo(ctx.parent.get_help())


# Command name -> handler. Built once; the dispatcher consults nothing else.
COMMANDS: Dict[str, click.Command] = {
    command.name: command
    for command in (
        start.start,
        stop.stop,
        restart.restart,
        status.status,
        logs.logs,
        backup.backup,
        update.update,
        scale.scale,
        secrets.secrets,
        check.check,
        help_command,
    )
}


class CommandTableGroup(click.RichGroup):
    """Click group that dispatches through COMMANDS, case-insensitively."""

    def get_command(self, ctx, cmd_name):
        return COMMANDS.get(cmd_name.lower())

    def list_commands(self, ctx):
        return list(COMMANDS)

    def _usage_failure(self, ctx, message, help_ctx=None):
        logger.error(message)
        click.echo((help_ctx or ctx).get_help())
        ctx.exit(1)

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except NoSuchOption as e:
            self._usage_failure(ctx, f"Unknown command: {e.option_name}")
        except UsageError as e:
            self._usage_failure(ctx, e.format_message())

    def invoke(self, ctx):
        # Usage errors raised while a subcommand parses its own arguments
        try:
            return super().invoke(ctx)
        except UsageError as e:
            self._usage_failure(ctx, e.format_message(), help_ctx=e.ctx)

    def resolve_command(self, ctx, args):
        cmd_name = args[0]
        command = self.get_command(ctx, cmd_name)

        if command is None and not ctx.resilient_parsing:
            self._usage_failure(ctx, f"Unknown command: {cmd_name}")

        return (command.name if command else None), command, args[1:]


@click.group(
    cls=CommandTableGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "-d",
    "--dir",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    help="Deployment directory (default: $N8NCTL_DIR or current directory)",
)
@click.option("-v", "--verbose", is_flag=True, help="Show engine commands and output")
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context, directory, verbose) -> None:
    """
    n8n Docker Compose management

    \b
    Examples:
      n8nctl start                 # Start all services
      n8nctl logs n8n              # Show n8n logs
      n8nctl logs -f               # Follow all logs
      n8nctl scale 3               # Scale to 3 worker nodes
      n8nctl backup                # Create backup
    """
    ctx.obj = StackContext(directory=directory, verbose=verbose)

    if ctx.invoked_subcommand is None:
        logger.error("No command specified")
        click.echo(ctx.get_help())
        ctx.exit(1)


@handle_cli_errors
def main():
    """Main entry point with error handling."""
    cli(prog_name="n8nctl")


if __name__ == "__main__":
    main()
