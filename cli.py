#!/usr/bin/env python3
"""
xApp Manager CLI.

Entry script for running from a source checkout.

Usage:
    python cli.py --help
    python cli.py status
    python cli.py -h appmgr.example -p 8080 deploy ueec
    python cli.py -v subscriptions list
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from appmgr.cli.app import main

if __name__ == "__main__":
    main()
