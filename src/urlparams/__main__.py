# topmark:header:start
#
#   project      : UrlParams
#   file         : __main__.py
#   file_relpath : src/urlparams/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running UrlParams via ``python -m urlparams``.

It delegates directly to :func:`urlparams.cli.main.cli`, so the module form and
the ``urlparams`` console script share a single entry point.

Examples:
    Encode a JSON document read from STDIN::

        echo '{"id": "x"}' | python -m urlparams encode -
"""

from __future__ import annotations

from urlparams.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
