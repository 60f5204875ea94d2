"""
xApp Manager CLI.

Top-level command: global options, command resolution, and the
request context handed to every command.

Usage:
    appmgrcli [-h host] [-p port] [-v] [-c httpclient] <command> [args...]
"""

from enum import Enum

import click
import structlog

from appmgr import __version__
from appmgr.cli.commands import config, deploy, health, status, subscriptions, undeploy
from appmgr.cli.context import build_request_context
from appmgr.cli.group import AppMgrGroup
from appmgr.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


class CommandKind(str, Enum):
    """Every top-level command, with its accepted abbreviation."""

    DEPLOY = "deploy"
    UNDEPLOY = "undeploy"
    STATUS = "status"
    SUBSCRIPTIONS = "subscriptions"
    HEALTH = "health"
    CONFIG = "config"
    HELP = "help"

    @property
    def abbreviation(self) -> str | None:
        return _ABBREVIATIONS.get(self)

    @classmethod
    def resolve(cls, name: str) -> "CommandKind | None":
        """Map a full command name or its abbreviation to a kind."""
        for kind in cls:
            if name == kind.value or name == kind.abbreviation:
                return kind
        return None


_ABBREVIATIONS = {
    CommandKind.DEPLOY: "dep",
    CommandKind.UNDEPLOY: "undep",
    CommandKind.STATUS: "stat",
    CommandKind.SUBSCRIPTIONS: "subs",
    CommandKind.HEALTH: "heal",
}


class RootGroup(AppMgrGroup):
    """Resolves the command name through CommandKind."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        kind = CommandKind.resolve(cmd_name)
        if kind is None:
            return None
        return super().get_command(ctx, kind.value)


@click.group(
    name="appmgrcli",
    cls=RootGroup,
    context_settings={"help_option_names": ["--help"]},
)
@click.option(
    "--host", "-h",
    default=None,
    help="xApp manager host. Defaults to APPMGR_HOST, then application.yaml.",
)
@click.option(
    "--port", "-p",
    default=None,
    type=click.IntRange(1, 65535),
    help="xApp manager port. Defaults to APPMGR_PORT, then application.yaml.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show each request and response status (INFO level logging).",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
@click.option(
    "--http-client", "-c",
    default=None,
    metavar="PROGRAM",
    help="Send requests with this curl-compatible program instead of the built-in client.",
)
@click.version_option(version=__version__, prog_name="appmgrcli")
@click.pass_context
def main(
    ctx: click.Context,
    host: str | None,
    port: int | None,
    verbose: bool,
    debug: bool,
    http_client: str | None,
) -> None:
    """
    Command-line client for the xApp manager.

    Deploys, undeploys and monitors xApps, and manages event
    subscriptions and xApp configurations. Exits 0 on success, 1 on
    any failure.

    \b
    Commands may be abbreviated:
        deploy (dep), undeploy (undep), status (stat),
        subscriptions (subs), health (heal)

    \b
    Examples:
        appmgrcli status
        appmgrcli -h appmgr.example -p 8080 deploy ueec
        appmgrcli subs add http://10.0.0.5:8080/cb all 3 10
        appmgrcli health ready
    """
    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = None

    try:
        setup_logging(level=log_level)
        ctx.obj = build_request_context(host, port, verbose, http_client)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: could not load configuration: {e}", fg="red"), err=True)
        ctx.exit(1)

    structlog.contextvars.bind_contextvars(source="cli")

    logger.debug(
        "CLI invoked",
        command=ctx.invoked_subcommand,
        base_url=ctx.obj.base_url,
        http_client=ctx.obj.http_client,
    )


@click.command(name="help")
@click.pass_context
def help_command(ctx: click.Context) -> None:
    """Show usage and exit."""
    click.echo(ctx.find_root().get_help())


main.add_command(deploy)
main.add_command(undeploy)
main.add_command(status)
main.add_command(subscriptions)
main.add_command(health)
main.add_command(config)
main.add_command(help_command)


if __name__ == "__main__":
    main()
