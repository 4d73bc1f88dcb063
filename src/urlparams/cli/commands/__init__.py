# topmark:header:start
#
#   project      : UrlParams
#   file         : __init__.py
#   file_relpath : src/urlparams/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UrlParams CLI subcommands."""
