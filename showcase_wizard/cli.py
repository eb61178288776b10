"""Thin CLI router — dispatches to commands."""
from __future__ import annotations

import sys

USAGE = """\
showcase-wizard — step navigation for showcase payment forms

Usage:
  showcase-wizard inspect <file>   Parse a showcase document, list fields and payment parameters
  showcase-wizard mcp-server       Start MCP Server (one wizard session per process)
"""


def main():
    args = sys.argv[1:]
    command = args[0] if args else None

    if command == "inspect":
        if len(args) < 2:
            print("Usage: showcase-wizard inspect <file>", file=sys.stderr)
            sys.exit(1)
        from showcase_wizard.commands.inspect import cmd_inspect
        cmd_inspect(args[1])

    elif command == "mcp-server":
        from showcase_wizard.integrations.mcp_server import run_server
        run_server()

    elif command in ("help", "--help", "-h", None):
        print(USAGE)

    else:
        print(f"Unknown command: {command}", file=sys.stderr)
        print(USAGE)
        sys.exit(1)


if __name__ == "__main__":
    main()
