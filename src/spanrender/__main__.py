# spanrender:header:start
#
#   project      : SpanRender
#   file         : __main__.py
#   file_relpath : src/spanrender/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Module entry point for running SpanRender via ``python -m spanrender``.

Delegates to `spanrender.cli.main.cli`, the same group the ``spanrender``
console script runs.
"""

from __future__ import annotations

from spanrender.cli.main import cli

if __name__ == "__main__":
    cli()
