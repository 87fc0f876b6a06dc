"""Rich consoles shared by the CLI layer.

Results go to stdout; errors, usage text, and log records go to
stderr.  Soft wrapping is on so long hashes and URLs stay on one line
and remain copy-pasteable.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def configure_logging(verbose: bool) -> None:
    """Route ``alph_wallet`` log records to stderr through Rich.

    Only WARNING and above are shown unless *verbose* is set.  Safe to
    call more than once.
    """
    package_logger = logging.getLogger("alph_wallet")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=err_console, show_path=False, markup=False),
        )
