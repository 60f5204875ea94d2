"""
Subscription Commands.

Register, change, list and remove callbacks for xApp lifecycle events.
"""

import sys

import click

from appmgr.cli.client import call
from appmgr.cli.context import RequestContext
from appmgr.cli.group import AppMgrGroup, pass_request
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
from appmgr.cli.validators import build_subscription_body, require

LIST_OUTCOMES = StatusTable({
    200: BODY,
    400: failure(INVALID_PARAMETERS),
    404: failure("SUBSCRIPTION NOT FOUND"),
    500: failure(INTERNAL_ERROR),
})

ADD_OUTCOMES = StatusTable({
    201: BODY,
    400: failure(INVALID_PARAMETERS),
    500: failure(INTERNAL_ERROR),
})

MODIFY_OUTCOMES = StatusTable({
    200: BODY,
    400: failure(INVALID_PARAMETERS),
    500: failure(INTERNAL_ERROR),
})

DELETE_OUTCOMES = StatusTable({
    204: success(SUCCESSFUL_DELETION),
    400: failure(INVALID_PARAMETERS),
    500: failure(INTERNAL_ERROR),
})

_subscription_arguments = [
    click.argument("url", required=False),
    click.argument("event_type", required=False, metavar="EVENT_TYPE"),
    click.argument("max_retries", required=False),
    click.argument("retry_timer", required=False),
]


def subscription_arguments(func):
    for decorator in reversed(_subscription_arguments):
        func = decorator(func)
    return func


@click.group(cls=AppMgrGroup, aliases={"del": "delete", "mod": "modify"})
def subscriptions() -> None:
    """
    Manage event subscriptions.

    EVENT_TYPE is one of created, deleted, all. MAX_RETRIES and
    RETRY_TIMER are non-negative integers.
    """


@subscriptions.command(name="list")
@click.argument("subscription_id", required=False)
@pass_request
def list_subscriptions(request: RequestContext, subscription_id: str | None) -> None:
    """List all subscriptions, or show one."""
    if subscription_id:
        path = request.api_path("subscriptions", subscription_id)
    else:
        path = request.api_path("subscriptions")
    result = call(request, "GET", path)
    sys.exit(report(result, LIST_OUTCOMES))


@subscriptions.command()
@subscription_arguments
@pass_request
def add(
    request: RequestContext,
    url: str | None,
    event_type: str | None,
    max_retries: str | None,
    retry_timer: str | None,
) -> None:
    """
    Add a subscription.

    \b
    Example:
        appmgrcli subscriptions add http://10.0.0.5:8080/cb all 3 10
    """
    body = build_subscription_body(url, event_type, max_retries, retry_timer)
    result = call(request, "POST", request.api_path("subscriptions"), body)
    sys.exit(report(result, ADD_OUTCOMES))


@subscriptions.command()
@click.argument("subscription_id", required=False)
@subscription_arguments
@pass_request
def modify(
    request: RequestContext,
    subscription_id: str | None,
    url: str | None,
    event_type: str | None,
    max_retries: str | None,
    retry_timer: str | None,
) -> None:
    """Replace an existing subscription."""
    subscription_id = require(subscription_id, "subscription id")
    body = build_subscription_body(url, event_type, max_retries, retry_timer)
    result = call(request, "PUT", request.api_path("subscriptions", subscription_id), body)
    sys.exit(report(result, MODIFY_OUTCOMES))


@subscriptions.command()
@click.argument("subscription_id", required=False)
@pass_request
def delete(request: RequestContext, subscription_id: str | None) -> None:
    """Delete a subscription."""
    subscription_id = require(subscription_id, "subscription id")
    result = call(request, "DELETE", request.api_path("subscriptions", subscription_id))
    sys.exit(report(result, DELETE_OUTCOMES))
