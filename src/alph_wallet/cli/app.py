"""CLI application entry point and command routing for alph-wallet.

This module is the **sole error boundary** for the entire application.
It catches :class:`~alph_wallet.exceptions.AlephiumError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering a
single labelled line on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the library
  facade and the core services behind it.
* Output goes through the Rich consoles in :mod:`alph_wallet.cli.console`.
* This module is the only place that inspects error kinds to choose a
  user-facing label.
"""

from __future__ import annotations

import argparse
import sys

from dotenv import find_dotenv, load_dotenv
from rich.markup import escape

from alph_wallet.cli import exit_codes
from alph_wallet.cli.console import configure_logging, console, err_console
from alph_wallet.core.models import DryRunResult, Wallet
from alph_wallet.core.units import alph_to_atto, format_alph
from alph_wallet.exceptions import (
    AlephiumError,
    InvalidAddressError,
    InvalidAmountError,
    NetworkError,
    TransactionError,
)
from alph_wallet.version import __version__

SEND_USAGE = (
    "Usage: alph-wallet send <private-key> <destination-address> <amount-in-alph> [--dry-run]",
    "",
    "Arguments:",
    "  private-key         - The sender's private key (hex string)",
    "  destination-address - The recipient's Alephium address",
    "  amount-in-alph      - Amount to send in ALPH (e.g., 1.5)",
)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Positional arguments are optional at the argparse level so that a
    missing argument produces our own usage message and exit code 1
    rather than argparse's exit code 2.
    """
    parser = argparse.ArgumentParser(
        prog="alph-wallet",
        description="Check ALPH balances and send ALPH on the Alephium network.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each step to stderr.",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    balance = commands.add_parser("balance", help="Show the mainnet ALPH balance of an address.")
    balance.add_argument("address", nargs="?", default=None)

    send = commands.add_parser(
        "send",
        help="Send ALPH on testnet. Do not use mainnet private keys.",
    )
    send.add_argument("private_key", nargs="?", default=None, metavar="private-key")
    send.add_argument("destination", nargs="?", default=None, metavar="destination-address")
    send.add_argument("amount", nargs="?", default=None, metavar="amount-in-alph")
    send.add_argument(
        "--dry-run",
        action="store_true",
        help="Build the transaction and show it without signing or submitting.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_balance(address: str | None) -> int:
    """Print the balance of *address* in ALPH."""
    from alph_wallet.api import get_alph_balance

    if not address:
        err_console.print("Error: Please provide an Alephium address")
        return exit_codes.GENERAL_ERROR

    balance = get_alph_balance(address)
    console.print(f"{format_alph(balance)} ALPH")
    return exit_codes.SUCCESS


def _handle_send(
    private_key: str | None,
    destination: str | None,
    amount_text: str | None,
    *,
    dry_run: bool,
) -> int:
    """Send ALPH on testnet, or preview the transfer with *dry_run*.

    Flow:
    1. Check argument presence and parse the ALPH amount.
    2. Delegate to :func:`~alph_wallet.api.send_alph`.
    3. Render the tx id and explorer link, or the dry-run preview.
    """
    from alph_wallet.api import send_alph
    from alph_wallet.config import load_config

    if not private_key or not destination or not amount_text:
        err_console.print("Error: Missing required arguments")
        err_console.print()
        for line in SEND_USAGE:
            err_console.print(escape(line))
        return exit_codes.GENERAL_ERROR

    try:
        amount = alph_to_atto(amount_text)
    except InvalidAmountError as exc:
        err_console.print(f"Error: Invalid amount. {escape(exc.hint or str(exc))}")
        return exit_codes.GENERAL_ERROR

    config = load_config()
    console.print(f"Sending {format_alph(amount)} ALPH to {escape(destination)}...")

    result = send_alph(
        Wallet(private_key=private_key),
        destination,
        amount,
        dry_run=dry_run,
        config=config,
    )

    if isinstance(result, DryRunResult):
        _print_dry_run(result)
        return exit_codes.SUCCESS

    console.print("Transaction submitted successfully!")
    console.print(f"Transaction hash: {result}")
    console.print(f"View on explorer: {config.explorer_tx_url(result)}")
    return exit_codes.SUCCESS


def _print_dry_run(result: DryRunResult) -> None:
    """Render a :class:`DryRunResult`, one copy-pasteable field per line."""
    console.print("[bold yellow]Dry run:[/bold yellow] transaction built, not signed or submitted.")
    console.print(f"Transaction id: {result.tx_id}")
    console.print(f"Sender: {result.sender_address}")
    console.print(f"Destination: {result.destination_address}")
    console.print(f"Amount: {format_alph(result.amount)} ALPH")
    console.print(f"Unsigned tx: {result.unsigned_tx}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the alph-wallet CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "balance":
        return _handle_balance(args.address)

    if args.command == "send":
        return _handle_send(
            args.private_key,
            args.destination,
            args.amount,
            dry_run=args.dry_run,
        )

    parser.print_help()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _cause_suffix(exc: AlephiumError) -> str:
    if exc.cause is None or not str(exc.cause):
        return ""
    return f" ({exc.cause})"


def describe_error(exc: AlephiumError) -> str:
    """Return the single labelled line shown for a domain error."""
    if isinstance(exc, InvalidAddressError):
        # The message already starts with "Invalid <field>:".
        return str(exc)
    if isinstance(exc, InvalidAmountError):
        return f"Invalid amount: {exc}"
    if isinstance(exc, NetworkError):
        return f"Network error: {exc}{_cause_suffix(exc)}"
    if isinstance(exc, TransactionError):
        return f"Transaction error: {exc}{_cause_suffix(exc)}"
    return f"Error: {exc}"


def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    load_dotenv(find_dotenv(usecwd=True))
    try:
        code = main(argv)
        sys.exit(code)
    except AlephiumError as exc:
        err_console.print(f"[bold red]{escape(describe_error(exc))}[/bold red]")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            f"[bold red]Unexpected error:[/bold red] {escape(f'{type(exc).__name__}: {exc}')}",
        )
        sys.exit(exit_codes.GENERAL_ERROR)
