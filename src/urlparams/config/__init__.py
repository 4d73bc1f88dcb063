# topmark:header:start
#
#   project      : UrlParams
#   file         : __init__.py
#   file_relpath : src/urlparams/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for UrlParams (logging setup and environment lookups)."""
