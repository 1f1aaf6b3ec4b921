# spanrender:header:start
#
#   project      : SpanRender
#   file         : __init__.py
#   file_relpath : src/spanrender/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""Click command line for SpanRender.

The ``spanrender`` group sets up logging, color and the console once, in
``ctx.obj``; subcommands read them from there.
"""
