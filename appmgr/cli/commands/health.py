"""
Health Check Commands.

Liveness and readiness probes of the xApp manager.
"""

import sys

import click

from appmgr.cli.client import call
from appmgr.cli.context import RequestContext
from appmgr.cli.group import AppMgrGroup, pass_request
from appmgr.cli.output import INTERNAL_ERROR, Outcome, StatusTable, failure, report, success

# Any HTTP response at all means the service is up.
ALIVE_OUTCOMES = StatusTable(default=Outcome(message="ALIVE"))

READY_OUTCOMES = StatusTable({
    200: success("READY"),
    503: failure("NOT READY"),
    500: failure(INTERNAL_ERROR),
})


@click.group(cls=AppMgrGroup)
def health() -> None:
    """Check xApp manager health."""


@health.command()
@pass_request
def alive(request: RequestContext) -> None:
    """Check that the xApp manager answers at all."""
    result = call(request, "GET", request.api_path("health", "alive"))
    sys.exit(report(result, ALIVE_OUTCOMES))


@health.command()
@pass_request
def ready(request: RequestContext) -> None:
    """Check that the xApp manager is ready to serve requests."""
    result = call(request, "GET", request.api_path("health", "ready"))
    sys.exit(report(result, READY_OUTCOMES))
