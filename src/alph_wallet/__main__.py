"""Allow ``python -m alph_wallet`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m alph_wallet`` behaves identically to the
``alph-wallet`` console script.
"""

from __future__ import annotations

from alph_wallet.cli.app import cli

if __name__ == "__main__":
    cli()
