"""Entry point: python -m appmgr <command> [args...]"""

from appmgr.cli.app import main

if __name__ == "__main__":
    main()
