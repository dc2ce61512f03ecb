from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from forestledger.domain.amount import AmountLike, format_amount, parse_amount, to_decimal
from forestledger.domain.errors import ValidationError


class Direction(str, Enum):
    DEBIT = "D"
    CREDIT = "C"

    @property
    def label(self) -> str:
        return "Debit" if self is Direction.DEBIT else "Credit"


def is_valid_account_number(account_number: object) -> bool:
    return (
        isinstance(account_number, str)
        and account_number != ""
        and all(c in "0123456789" for c in account_number)
    )


def is_valid_amount(amount: object) -> bool:
    try:
        raw = to_decimal(amount)  # type: ignore[arg-type]
        parse_amount(raw)
    except ValidationError:
        return False
    # signe testé avant l'arrondi : "-0.001" reste invalide
    return raw >= 0


def is_valid_direction(direction: object) -> bool:
    if isinstance(direction, Direction):
        return True
    return isinstance(direction, str) and direction in ("D", "C")


@dataclass(frozen=True)
class Transaction:
    """
    Un mouvement (débit ou crédit) sur un compte.
    Immuable : tout est validé dans __post_init__, une Transaction
    invalide n'existe jamais.
    """
    account_number: str
    amount: Decimal
    direction: Direction

    def __post_init__(self) -> None:
        if not is_valid_account_number(self.account_number):
            raise ValidationError(
                "Invalid account number. Must contain only numeric characters."
            )

        if not is_valid_amount(self.amount):
            raise ValidationError("Transaction amount must be non-negative.")

        if not is_valid_direction(self.direction):
            raise ValidationError(
                "Invalid transaction type. Use 'D' for Debit or 'C' for Credit."
            )

        # normalisation
        object.__setattr__(self, "amount", parse_amount(self.amount))
        object.__setattr__(self, "direction", Direction(self.direction))

    @staticmethod
    def create(
        account_number: str,
        amount: AmountLike,
        direction: Direction | str,
    ) -> "Transaction":
        return Transaction(
            account_number=account_number,
            amount=amount,  # type: ignore[arg-type]
            direction=direction,  # type: ignore[arg-type]
        )

    @property
    def signed_amount(self) -> Decimal:
        return self.amount if self.direction is Direction.DEBIT else -self.amount

    def describe(self) -> str:
        return (
            f"Account: {self.account_number}, "
            f"Amount: {format_amount(self.amount)}, "
            f"Type: {self.direction.label}"
        )

    def __str__(self) -> str:
        return self.describe()
