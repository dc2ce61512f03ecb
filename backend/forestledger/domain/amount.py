from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from forestledger.domain.errors import ValidationError

AmountLike = Decimal | int | float | str

_QUANT = Decimal("0.01")

# 15 chiffres entiers + 2 décimales : une balance reste exacte dans le
# contexte Decimal par défaut (28 chiffres significatifs)
MAX_AMOUNT = Decimal("1E15")


def to_decimal(value: AmountLike) -> Decimal:
    """
    Parse robuste vers Decimal, sans arrondi.
    Accepte Decimal, int, float (via str) et "12.34" / "12,34" / " 12 ".
    """
    if isinstance(value, bool):
        raise ValidationError("Amount must be a number, not a boolean")

    if isinstance(value, Decimal):
        dec = value
    elif isinstance(value, int):
        dec = Decimal(value)
    elif isinstance(value, float):
        dec = Decimal(str(value))
    elif isinstance(value, str):
        raw = value.strip()
        if raw == "":
            raise ValidationError("Amount cannot be empty")
        raw = raw.replace(",", ".")
        try:
            dec = Decimal(raw)
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid decimal amount: {value!r}") from exc
    else:
        raise ValidationError(f"Unsupported amount type: {type(value).__name__}")

    if not dec.is_finite():
        raise ValidationError(f"Amount must be finite (got {value!r})")
    return dec


def _quantize_money(amount: Decimal) -> Decimal:
    q = amount.quantize(_QUANT, rounding=ROUND_HALF_UP)
    # pas de "-0.00"
    return q.copy_abs() if q == 0 else q


def parse_amount(value: AmountLike) -> Decimal:
    """
    Montant au centime (ROUND_HALF_UP), borné par MAX_AMOUNT.
    Ne vérifie pas le signe : c'est le rôle de is_valid_amount.
    """
    dec = to_decimal(value)
    if abs(dec) < MAX_AMOUNT:
        q = _quantize_money(dec)
        if abs(q) < MAX_AMOUNT:
            return q
    raise ValidationError(f"Amount too large (must be below {MAX_AMOUNT:f}): {value!r}")


def format_amount(amount: Decimal) -> str:
    """Render without trailing zeros: 50, 12.5, -7.25."""
    if amount == 0:
        return "0"
    return format(amount.normalize(), "f")
