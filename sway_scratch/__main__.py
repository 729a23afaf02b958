"""Entry point for sway-scratch when run as a module."""

import sys

from .cli.commands import cli_main

if __name__ == "__main__":
    sys.exit(cli_main())
