"""
Command Groups.

Click group used for the top-level command and every command family.
Adds abbreviations and turns every usage error into exit status 1.
"""

from typing import Any

import click

from appmgr.cli.context import RequestContext
from appmgr.core.exceptions import ApplicationError
from appmgr.core.logging import get_logger

logger = get_logger(__name__)

pass_request = click.make_pass_decorator(RequestContext)


class AppMgrGroup(click.Group):
    """
    Group with command abbreviations and uniform failure handling.

    - ``aliases`` maps an abbreviation to the full command name.
    - Click usage errors (unknown command or option, missing or extra
      argument, bad value) exit with status 1 instead of 2.
    - An ApplicationError escaping a command prints ``Error: <message>``
      and exits with status 1.
    """

    def __init__(self, *args: Any, aliases: dict[str, str] | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("no_args_is_help", False)
        super().__init__(*args, **kwargs)
        self.aliases = dict(aliases or {})

    def canonical_name(self, cmd_name: str) -> str:
        return self.aliases.get(cmd_name, cmd_name)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.canonical_name(cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str],
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name, cmd, rest = super().resolve_command(ctx, args)
        if cmd is not None:
            cmd_name = cmd.name
        return cmd_name, cmd, rest

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = 1
            raise
        except ApplicationError as e:
            logger.debug("Command failed", code=e.code, error=e.message)
            click.echo(f"Error: {e.message}", err=True)
            ctx.exit(1)
