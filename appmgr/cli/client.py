"""
HTTP Client for CLI.

Issues the single REST call an invocation makes to the xApp manager.
Two transports share one interface:

- APIClient: httpx, the default
- CommandClient: an external curl-compatible program selected with -c

Transport failures never raise out of call(); they print a diagnostic
and come back as RestResult(ok=False).
"""

import shlex
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click
import httpx

from appmgr.cli.context import RequestContext
from appmgr.core.exceptions import ProcessLaunchError
from appmgr.core.logging import get_logger, log_with_source
from appmgr.core.process import run_process

logger = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class RestResult:
    """Outcome of one REST call."""

    ok: bool
    status: int | None = None
    body: str = ""


def _transport_failure(method: str, url: str, reason: str) -> RestResult:
    log_with_source(logger, "cli", "error", "API request failed", method=method, url=url, error=reason)
    click.echo(f"Error: {method} {url} failed: {reason}", err=True)
    return RestResult(ok=False)


class APIClient:
    """
    httpx-based client for the xApp manager API.

    Usage:
        with APIClient(context) as client:
            result = client.call("GET", "/ric/v1/xapps")
    """

    def __init__(
        self,
        context: RequestContext,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            context: Host, port and timeouts for this invocation.
            transport: httpx transport override, used by tests.
        """
        self.context = context
        self.base_url = context.base_url
        self.timeout = httpx.Timeout(None, connect=context.connect_timeout)
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=JSON_HEADERS,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def call(self, method: str, path: str, body: str | None = None) -> RestResult:
        """
        Make one HTTP request to the xApp manager.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path (e.g., /ric/v1/xapps)
            body: JSON request body, already serialized

        Returns:
            RestResult with the status code and response text
        """
        client = self._get_client()
        url = self.context.url(path)

        log_with_source(logger, "cli", "info", "API request", method=method, url=url, body=body)

        try:
            response = client.request(method, path, content=body)
        except httpx.HTTPError as e:
            return _transport_failure(method, url, str(e) or type(e).__name__)

        log_with_source(
            logger,
            "cli",
            "info",
            "API response",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        return RestResult(ok=True, status=response.status_code, body=response.text)


class CommandClient:
    """
    Client that runs an external curl-compatible program per request.

    The response body is written to a temporary file inside a private
    temporary directory; the status code is read from stdout.
    """

    def __init__(self, context: RequestContext) -> None:
        self.context = context
        self.command = shlex.split(context.http_client or "curl")

    def __enter__(self) -> "CommandClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        """Nothing to release: each call cleans up its own temporary directory."""

    def build_argv(self, method: str, url: str, output: Path, with_body: bool) -> list[str]:
        argv = [
            *self.command,
            "--silent",
            "--show-error",
            "--connect-timeout", str(int(self.context.connect_timeout)),
            "-X", method,
            "-H", "Content-Type: application/json",
            "-o", str(output),
            "-w", "%{http_code}",
        ]
        if with_body:
            argv += ["--data-binary", "@-"]
        argv.append(url)
        return argv

    def call(self, method: str, path: str, body: str | None = None) -> RestResult:
        """Run the external client once and collect status and body."""
        url = self.context.url(path)

        with tempfile.TemporaryDirectory(prefix="appmgrcli-") as tmpdir:
            output = Path(tmpdir) / "response.json"
            argv = self.build_argv(method, url, output, body is not None)

            log_with_source(logger, "cli", "info", "API request", method=method, url=url, argv=argv, body=body)

            try:
                result = run_process(argv, input_text=body)
            except ProcessLaunchError as e:
                return _transport_failure(method, url, e.message)

            if not result.ok:
                reason = result.stderr.strip() or f"{self.command[0]} exited with status {result.returncode}"
                return _transport_failure(method, url, reason)

            code = result.stdout.strip()
            if not code.isdigit() or int(code) == 0:
                return _transport_failure(method, url, f"no HTTP status received (got {code!r})")

            response_body = output.read_text(encoding="utf-8") if output.exists() else ""

        log_with_source(logger, "cli", "info", "API response", method=method, url=url, status_code=int(code))
        return RestResult(ok=True, status=int(code), body=response_body)


def create_api_client(context: RequestContext) -> APIClient | CommandClient:
    """Pick the transport for this invocation."""
    if context.http_client:
        return CommandClient(context)
    return APIClient(context)


def call(context: RequestContext, method: str, path: str, body: str | None = None) -> RestResult:
    """Issue one REST call to the xApp manager. Never retries."""
    with create_api_client(context) as client:
        return client.call(method, path, body)
