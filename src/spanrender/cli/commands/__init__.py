# spanrender:header:start
#
#   project      : SpanRender
#   file         : __init__.py
#   file_relpath : src/spanrender/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# spanrender:header:end

"""SpanRender CLI subcommands."""
