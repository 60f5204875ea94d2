"""
Response Reporting.

Maps an HTTP status to a fixed outcome per command and prints it:
pretty-printed JSON, a literal message, or both.
"""

import json
from dataclasses import dataclass, field

import click
from rich.console import Console

from appmgr.cli.client import RestResult
from appmgr.core.logging import get_logger

logger = get_logger(__name__)
console = Console()

INVALID_PARAMETERS = "INVALID PARAMETERS"
INTERNAL_ERROR = "INTERNAL ERROR"
SUCCESSFUL_DELETION = "SUCCESSFUL DELETION"


@dataclass(frozen=True)
class Outcome:
    """What to print for one status, and the exit status that follows."""

    message: str | None = None
    show_body: bool = False
    exit_code: int = 0


BODY = Outcome(show_body=True)
BODY_WITH_FAILURE = Outcome(show_body=True, exit_code=1)


def failure(message: str) -> Outcome:
    return Outcome(message=message, exit_code=1)


def success(message: str) -> Outcome:
    return Outcome(message=message)


@dataclass(frozen=True)
class StatusTable:
    """
    Fixed status-to-outcome mapping for one command.

    ``default`` applies to every status not listed; when unset, an
    unlisted status reports ``UNKNOWN STATUS <code>`` and fails.
    """

    outcomes: dict[int, Outcome] = field(default_factory=dict)
    default: Outcome | None = None

    def resolve(self, status: int) -> Outcome:
        if status in self.outcomes:
            return self.outcomes[status]
        if self.default is not None:
            return self.default
        return failure(f"UNKNOWN STATUS {status}")


def print_json(body: str) -> None:
    """Pretty-print a response body. Non-JSON bodies are shown as-is."""
    if not body.strip():
        return
    try:
        console.print_json(body)
    except json.JSONDecodeError as e:
        logger.debug("Response body is not JSON", error=str(e))
        click.echo("Warning: response is not valid JSON, showing it unformatted", err=True)
        click.echo(body)


def report(result: RestResult, table: StatusTable) -> int:
    """
    Print the outcome of a REST call.

    Returns:
        Exit status for the invocation: 0 on success, 1 otherwise.
    """
    if not result.ok or result.status is None:
        return 1

    outcome = table.resolve(result.status)
    logger.debug("Resolved outcome", status=result.status, exit_code=outcome.exit_code)

    if outcome.show_body:
        print_json(result.body)
    if outcome.message:
        click.echo(outcome.message)
    return outcome.exit_code
