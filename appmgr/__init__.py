"""
xApp Manager CLI.

- core/: Configuration, logging, exceptions, subprocess runner
- cli/: Command-line client for the xApp manager REST API (Click + Rich)
"""

__version__ = "0.1.0"
