# vtcli/__init__.py
"""
vt — Vulnerable Target CLI
Spin up intentionally vulnerable stacks from your terminal.
"""

APP_NAME = "vt"
APP_VERSION = "v0.0.1"

__all__ = ["APP_NAME", "APP_VERSION"]
