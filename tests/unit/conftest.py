"""
Unit Test Fixtures.

Fixtures for unit tests - the xApp manager is never contacted.
REST calls are intercepted at APIClient.call and answered with a
canned RestResult.
"""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from appmgr.cli.client import APIClient, RestResult
from appmgr.cli.context import RequestContext


@pytest.fixture
def runner() -> CliRunner:
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def request_context() -> RequestContext:
    """Request context pointing at a test host."""
    return RequestContext(host="appmgr.test", port=8080)


@pytest.fixture
def api_call():
    """
    Patch the REST call made by every command.

    The mock is called as (client, method, path, body). Set the answer
    with ``api_call.return_value = RestResult(...)``.

    Usage:
        def test_undeploy(runner, api_call):
            api_call.return_value = RestResult(ok=True, status=204)
            result = runner.invoke(main, ["undeploy", "ueec"])
            assert api_call.call_args.args[1:3] == ("DELETE", "/ric/v1/xapps/ueec")
    """
    with patch.object(APIClient, "call", autospec=True) as mock_call:
        mock_call.return_value = RestResult(ok=True, status=200, body="{}")
        yield mock_call
