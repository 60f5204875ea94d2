"""
CLI Client Module.

Command-line client built with Click for the xApp manager REST API.

Architecture:
- CLI is a thin presentation layer over the remote service
- One HTTP call per invocation (httpx, or an external curl-compatible program)
- Status codes map to fixed per-command outcomes
- Exit status 0 on success, 1 on any failure

Usage:
    appmgrcli --help
    appmgrcli status
    appmgrcli -h appmgr.example -p 8080 health ready
"""
