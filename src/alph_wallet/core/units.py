"""Conversion between display ALPH and atomic atto-ALPH units.

Pure functions only.  Raw amounts are always Python ``int`` and display
amounts go through :class:`~decimal.Decimal`, so no float ever sits
between a user-typed amount and the integer that gets transferred.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal, InvalidOperation, localcontext

from alph_wallet.exceptions import InvalidAmountError

ONE_ALPH: int = 10**18
"""Atto-ALPH per ALPH."""

ALPH_DECIMALS: int = 18

MAX_ATTO_AMOUNT: int = 2**256 - 1
"""Largest amount the network's U256 amount field can carry."""

_MAX_ATTO_DIGITS: int = len(str(MAX_ATTO_AMOUNT))


def alph_to_atto(amount: str | Decimal) -> int:
    """Convert a display amount such as ``"1.5"`` to atto-ALPH.

    The amount is multiplied by :data:`ONE_ALPH` and floored, so digits
    beyond the 18th decimal place are dropped.

    Raises
    ------
    InvalidAmountError
        If *amount* is not a finite positive number, or does not fit
        in a U256.
    """
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(amount.strip())
    except (InvalidOperation, AttributeError) as exc:
        raise InvalidAmountError(
            f"'{amount}' is not a number.",
            hint="Please provide a positive number.",
        ) from exc

    if not value.is_finite() or value <= 0:
        raise InvalidAmountError(
            f"'{amount}' is not a positive number.",
            hint="Please provide a positive number.",
        )

    # Magnitude is checked before multiplying so a huge exponent cannot
    # overflow the decimal context.
    if value.adjusted() + ALPH_DECIMALS < _MAX_ATTO_DIGITS:
        with localcontext() as ctx:
            ctx.prec = max(_MAX_ATTO_DIGITS, len(value.as_tuple().digits))
            atto = int((value * ONE_ALPH).to_integral_value(rounding=ROUND_FLOOR))
        if atto <= MAX_ATTO_AMOUNT:
            return atto

    raise InvalidAmountError(
        f"'{amount}' ALPH is too large.",
        hint=f"The largest amount is {format_alph(MAX_ATTO_AMOUNT)} ALPH.",
    )


def format_alph(atto: int) -> str:
    """Render an atto-ALPH amount as an exact ALPH string.

    Trailing zeros are trimmed: ``10**18`` gives ``"1"``, ``15 * 10**17``
    gives ``"1.5"``.
    """
    sign = "-" if atto < 0 else ""
    whole, fraction = divmod(abs(atto), ONE_ALPH)
    if not fraction:
        return f"{sign}{whole}"
    digits = str(fraction).rjust(ALPH_DECIMALS, "0").rstrip("0")
    return f"{sign}{whole}.{digits}"
