"""
Argument Validators.

Checks run before any request is built. Every failure raises
ValidationError so that no network call is attempted.
"""

import json
import re
from pathlib import Path
from typing import Any

import yaml

from appmgr.cli.schemas import (
    ConfigMetadata,
    SubscriptionData,
    SubscriptionRequest,
    XappConfig,
    XappDescriptor,
)
from appmgr.core.exceptions import ValidationError

EVENT_TYPES = ("created", "deleted", "all")

_DIGITS = re.compile(r"^[0-9]+$")
_OBJECT_NAME = re.compile(r"^[a-z][-a-z0-9.]*$")


def require(value: str | None, what: str) -> str:
    """Return value, or fail if it is missing or empty."""
    if not value:
        raise ValidationError(f"Missing {what}")
    return value


def validate_subscription(
    url: str | None,
    event_type: str | None,
    max_retries: str | None,
    retry_timer: str | None,
) -> SubscriptionData:
    """
    Validate subscription arguments as given on the command line.

    Args:
        url: Callback URL, must start with http:// or https://
        event_type: One of created, deleted, all
        max_retries: Non-negative integer
        retry_timer: Non-negative integer (seconds)

    Returns:
        SubscriptionData ready to be sent.

    Raises:
        ValidationError: On the first argument that does not pass.
    """
    url = require(url, "target URL")
    if not url.startswith(("http://", "https://")):
        raise ValidationError(f"Target URL must start with http:// or https://, got: {url}")

    event_type = require(event_type, "event type")
    if event_type not in EVENT_TYPES:
        raise ValidationError(
            f"Event type must be one of {', '.join(EVENT_TYPES)}, got: {event_type}"
        )

    max_retries = require(max_retries, "max retries")
    if not _DIGITS.match(max_retries):
        raise ValidationError(f"Max retries must be a non-negative integer, got: {max_retries}")

    retry_timer = require(retry_timer, "retry timer")
    if not _DIGITS.match(retry_timer):
        raise ValidationError(f"Retry timer must be a non-negative integer, got: {retry_timer}")

    return SubscriptionData(
        target_url=url,
        event_type=event_type,
        max_retries=int(max_retries),
        retry_timer=int(retry_timer),
    )


def build_subscription_body(*args: str | None) -> str:
    return SubscriptionRequest(data=validate_subscription(*args)).to_json()


def validate_config_names(name: str, config_name: str, namespace: str) -> ConfigMetadata:
    """Check xApp name, config-map name and namespace against the object-name pattern."""
    for label, value in (
        ("xapp name", name),
        ("config name", config_name),
        ("namespace", namespace),
    ):
        if not _OBJECT_NAME.match(value):
            raise ValidationError(
                f"Invalid {label} '{value}': must match {_OBJECT_NAME.pattern}"
            )
    return ConfigMetadata(name=name, config_name=config_name, namespace=namespace)


def read_text_file(path: str, what: str = "file") -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ValidationError(f"Cannot read {what} {path}: {e.strerror or e}") from e


def read_json_file(path: str, what: str = "JSON file") -> tuple[str, Any]:
    """
    Read a JSON document from disk.

    Returns:
        Tuple of (raw text, parsed document).
    """
    text = read_text_file(path, what)
    try:
        return text, json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"{what.capitalize()} {path} is not valid JSON: {e}") from e


def build_config_body(args: tuple[str, ...]) -> str:
    """
    Build the body of a config add or modify request.

    Accepts either one argument (a JSON file holding the whole body) or
    five: xapp name, config name, namespace, schema file, data file.
    """
    if len(args) == 1:
        text, _ = read_json_file(args[0], "config file")
        return text
    if len(args) == 5:
        name, config_name, namespace, schema_file, data_file = args
        metadata = validate_config_names(name, config_name, namespace)
        _, descriptor = read_json_file(schema_file, "schema file")
        _, config = read_json_file(data_file, "data file")
        return XappConfig(metadata=metadata, descriptor=descriptor, config=config).to_json()
    raise ValidationError(
        "Expected a config file, or: xapp-name config-name namespace schema-file data-file"
    )


def build_config_delete_body(args: tuple[str, ...]) -> str:
    """
    Build the body of a config delete request.

    Accepts either one argument (a JSON file holding the whole body) or
    three: xapp name, config name, namespace.
    """
    if len(args) == 1:
        text, _ = read_json_file(args[0], "config file")
        return text
    if len(args) == 3:
        return validate_config_names(*args).to_json()
    raise ValidationError("Expected a config file, or: xapp-name config-name namespace")


def read_overrides_file(path: str) -> dict[str, Any]:
    """Load a values-override file. JSON or YAML, must hold a mapping."""
    text = read_text_file(path, "overrides file")
    try:
        overrides = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValidationError(f"Overrides file {path} could not be parsed: {e}") from e
    if not isinstance(overrides, dict):
        raise ValidationError(f"Overrides file {path} must contain a mapping")
    return overrides


def build_deploy_body(
    name: str | None,
    helm_version: str | None = None,
    release_name: str | None = None,
    namespace: str | None = None,
    overrides_file: str | None = None,
    target_host: str | None = None,
) -> str:
    fields: dict[str, Any] = {
        "xapp_name": require(name, "xapp name"),
        "helm_version": helm_version,
        "release_name": release_name,
        "namespace": namespace,
        "target_host": target_host,
    }
    if overrides_file:
        fields["overrides"] = read_overrides_file(overrides_file)
    return XappDescriptor(**{k: v for k, v in fields.items() if v is not None}).to_json()
