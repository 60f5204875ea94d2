"""
Request Context.

Per-invocation settings shared by every command handler. Built once by
the top-level command group and handed to handlers through Click's
context object.
"""

from dataclasses import dataclass

from appmgr.core.config import get_app_config, get_server_address


@dataclass(frozen=True)
class RequestContext:
    """Where and how to reach the xApp manager for one invocation."""

    host: str
    port: int
    verbose: bool = False
    http_client: str | None = None
    connect_timeout: float = 20.0
    api_prefix: str = "/ric/v1"

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def api_path(self, *segments: str) -> str:
        """Join segments under the API prefix, e.g. ``/ric/v1/xapps/foo``."""
        return "/".join([self.api_prefix.rstrip("/"), *segments])


def build_request_context(
    host: str | None = None,
    port: int | None = None,
    verbose: bool = False,
    http_client: str | None = None,
) -> RequestContext:
    """Resolve flags against environment and YAML defaults."""
    app = get_app_config().application
    resolved_host, resolved_port = get_server_address(host, port)
    return RequestContext(
        host=resolved_host,
        port=resolved_port,
        verbose=verbose,
        http_client=http_client or None,
        connect_timeout=float(app.timeouts.connect),
        api_prefix=app.api_prefix,
    )
