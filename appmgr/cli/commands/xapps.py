"""
xApp Lifecycle Commands.

Deploy, undeploy and query the status of xApps.
"""

import sys

import click

from appmgr.cli.client import call
from appmgr.cli.context import RequestContext
from appmgr.cli.group import pass_request
from appmgr.cli.output import (
    BODY,
    INTERNAL_ERROR,
    INVALID_PARAMETERS,
    SUCCESSFUL_DELETION,
    StatusTable,
    failure,
    report,
    success,
)
from appmgr.cli.validators import build_deploy_body, require

DEPLOY_OUTCOMES = StatusTable({
    201: BODY,
    400: failure(INVALID_PARAMETERS),
    500: failure(INTERNAL_ERROR),
})

UNDEPLOY_OUTCOMES = StatusTable({
    204: success(SUCCESSFUL_DELETION),
    400: failure(INVALID_PARAMETERS),
    500: failure(INTERNAL_ERROR),
})

STATUS_OUTCOMES = StatusTable({
    200: BODY,
    400: failure(INVALID_PARAMETERS),
    404: failure("XAPP NOT FOUND"),
    500: failure(INTERNAL_ERROR),
})

INSTANCE_STATUS_OUTCOMES = StatusTable({
    200: BODY,
    400: failure(INVALID_PARAMETERS),
    404: failure("XAPP OR INSTANCE NOT FOUND"),
    500: failure(INTERNAL_ERROR),
})


@click.command()
@click.argument("name", required=False)
@click.option("--helm-version", default=None, help="Chart version to deploy.")
@click.option("--release-name", default=None, help="Helm release name.")
@click.option("--namespace", default=None, help="Target namespace.")
@click.option(
    "--overrides",
    "overrides_file",
    default=None,
    metavar="FILE",
    help="YAML or JSON file with chart value overrides.",
)
@click.option("--target-host", default=None, help="Host to deploy onto.")
@pass_request
def deploy(
    request: RequestContext,
    name: str | None,
    helm_version: str | None,
    release_name: str | None,
    namespace: str | None,
    overrides_file: str | None,
    target_host: str | None,
) -> None:
    """
    Deploy an xApp.

    \b
    Examples:
        appmgrcli deploy ueec
        appmgrcli deploy ueec --helm-version 1.0.2 --namespace ricxapp
    """
    body = build_deploy_body(
        name,
        helm_version=helm_version,
        release_name=release_name,
        namespace=namespace,
        overrides_file=overrides_file,
        target_host=target_host,
    )
    result = call(request, "POST", request.api_path("xapps"), body)
    sys.exit(report(result, DEPLOY_OUTCOMES))


@click.command()
@click.argument("name", required=False)
@pass_request
def undeploy(request: RequestContext, name: str | None) -> None:
    """Undeploy an xApp."""
    name = require(name, "xapp name")
    result = call(request, "DELETE", request.api_path("xapps", name))
    sys.exit(report(result, UNDEPLOY_OUTCOMES))


@click.command()
@click.argument("name", required=False)
@click.argument("instance", required=False)
@pass_request
def status(request: RequestContext, name: str | None, instance: str | None) -> None:
    """
    Show the status of all xApps, one xApp, or one xApp instance.

    \b
    Examples:
        appmgrcli status
        appmgrcli status ueec
        appmgrcli status ueec ueec-6675694b6b-x6zmz
    """
    if instance:
        path = request.api_path("xapps", require(name, "xapp name"), "instances", instance)
        table = INSTANCE_STATUS_OUTCOMES
    elif name:
        path = request.api_path("xapps", name)
        table = STATUS_OUTCOMES
    else:
        path = request.api_path("xapps")
        table = STATUS_OUTCOMES

    result = call(request, "GET", path)
    sys.exit(report(result, table))
