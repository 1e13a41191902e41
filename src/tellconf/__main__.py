# topmark:header:start
#
#   project      : TellConf
#   file         : __main__.py
#   file_relpath : src/tellconf/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TellConf via ``python -m tellconf``.

Delegates to `tellconf.cli.main.cli`, the single CLI entry point.
"""

from __future__ import annotations

from tellconf.cli.main import cli

if __name__ == "__main__":
    cli()
