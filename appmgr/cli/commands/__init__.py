"""
CLI Commands.

Organized by xApp manager resource.
"""

from appmgr.cli.commands.configs import config
from appmgr.cli.commands.health import health
from appmgr.cli.commands.subscriptions import subscriptions
from appmgr.cli.commands.xapps import deploy, status, undeploy

__all__ = [
    "config",
    "deploy",
    "health",
    "status",
    "subscriptions",
    "undeploy",
]
