"""
xApp Configuration Commands.

List, add, modify and delete xApp configuration objects.
"""

import sys

import click

from appmgr.cli.client import call
from appmgr.cli.context import RequestContext
from appmgr.cli.group import AppMgrGroup, pass_request
from appmgr.cli.output import (
    BODY,
    BODY_WITH_FAILURE,
    INTERNAL_ERROR,
    INVALID_PARAMETERS,
    SUCCESSFUL_DELETION,
    StatusTable,
    failure,
    report,
    success,
)
from appmgr.cli.validators import build_config_body, build_config_delete_body

LIST_OUTCOMES = StatusTable({
    200: BODY,
    500: failure(INTERNAL_ERROR),
})

# 422 carries the server's validation errors; show them, but fail.
ADD_OUTCOMES = StatusTable({
    201: BODY,
    422: BODY_WITH_FAILURE,
    400: failure(INVALID_PARAMETERS),
    500: failure(INTERNAL_ERROR),
})

MODIFY_OUTCOMES = StatusTable({
    200: BODY,
    422: BODY_WITH_FAILURE,
    400: failure(INVALID_PARAMETERS),
    500: failure(INTERNAL_ERROR),
})

DELETE_OUTCOMES = StatusTable({
    204: success(SUCCESSFUL_DELETION),
    400: failure(INVALID_PARAMETERS),
    500: failure(INTERNAL_ERROR),
})


@click.group(cls=AppMgrGroup, aliases={"del": "delete", "mod": "modify"})
def config() -> None:
    """
    Manage xApp configuration objects.

    Names (XAPP_NAME, CONFIG_NAME, NAMESPACE) must start with a lowercase
    letter followed by lowercase letters, digits, '-' or '.'.
    """


@config.command(name="list")
@pass_request
def list_configs(request: RequestContext) -> None:
    """List all xApp configurations."""
    result = call(request, "GET", request.api_path("config"))
    sys.exit(report(result, LIST_OUTCOMES))


@config.command()
@click.argument("args", nargs=-1, metavar="FILE | XAPP_NAME CONFIG_NAME NAMESPACE SCHEMA_FILE DATA_FILE")
@pass_request
def add(request: RequestContext, args: tuple[str, ...]) -> None:
    """
    Add an xApp configuration.

    Give either one JSON file holding the complete request, or the three
    names followed by a JSON schema file and a JSON data file.
    """
    body = build_config_body(args)
    result = call(request, "POST", request.api_path("config"), body)
    sys.exit(report(result, ADD_OUTCOMES))


@config.command()
@click.argument("args", nargs=-1, metavar="FILE | XAPP_NAME CONFIG_NAME NAMESPACE SCHEMA_FILE DATA_FILE")
@pass_request
def modify(request: RequestContext, args: tuple[str, ...]) -> None:
    """Replace an xApp configuration. Arguments as for add."""
    body = build_config_body(args)
    result = call(request, "PUT", request.api_path("config"), body)
    sys.exit(report(result, MODIFY_OUTCOMES))


@config.command()
@click.argument("args", nargs=-1, metavar="FILE | XAPP_NAME CONFIG_NAME NAMESPACE")
@pass_request
def delete(request: RequestContext, args: tuple[str, ...]) -> None:
    """Delete an xApp configuration, given a JSON file or the three names."""
    body = build_config_delete_body(args)
    result = call(request, "DELETE", request.api_path("config"), body)
    sys.exit(report(result, DELETE_OUTCOMES))
