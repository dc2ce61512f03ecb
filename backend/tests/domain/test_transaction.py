import pytest
from decimal import Decimal

from forestledger.domain.errors import ValidationError
from forestledger.domain.transaction import (
    Direction,
    Transaction,
    is_valid_account_number,
    is_valid_amount,
    is_valid_direction,
)


def test_transaction_create_ok_debit():
    tx = Transaction.create("100", "50", "D")

    assert tx.account_number == "100"
    assert tx.amount == Decimal("50")
    assert tx.direction is Direction.DEBIT
    assert tx.signed_amount == Decimal("50")


def test_transaction_create_ok_credit():
    tx = Transaction.create("200", Decimal("12.50"), Direction.CREDIT)

    assert tx.direction is Direction.CREDIT
    assert tx.signed_amount == Decimal("-12.50")


def test_transaction_accepts_zero_amount():
    tx = Transaction.create("1", 0, "C")
    assert tx.amount == 0


def test_transaction_float_amount_goes_through_str():
    tx = Transaction.create("1", 0.1, "D")
    assert tx.amount == Decimal("0.1")


@pytest.mark.parametrize("number", ["", "12a", " 12", "1.5", "-3", "١٢"])
def test_transaction_rejects_invalid_account_number(number):
    with pytest.raises(ValidationError):
        Transaction.create(number, "10", "D")


def test_transaction_rejects_negative_amount():
    with pytest.raises(ValidationError, match="non-negative"):
        Transaction.create("100", "-0.01", "D")


def test_transaction_rejects_non_numeric_amount():
    with pytest.raises(ValidationError):
        Transaction.create("100", "abc", "D")


@pytest.mark.parametrize("direction", ["X", "d", "", "Debit", None])
def test_transaction_rejects_invalid_direction(direction):
    with pytest.raises(ValidationError):
        Transaction.create("100", "10", direction)


def test_transaction_is_immutable():
    tx = Transaction.create("100", "10", "D")
    with pytest.raises(AttributeError):
        tx.amount = Decimal("20")  # type: ignore[misc]


def test_describe_spells_out_direction():
    assert Transaction.create("100", "50", "D").describe() == "Account: 100, Amount: 50, Type: Debit"
    assert Transaction.create("7", "12.50", "C").describe() == "Account: 7, Amount: 12.5, Type: Credit"
    assert str(Transaction.create("7", "3", "C")) == "Account: 7, Amount: 3, Type: Credit"


def test_validation_predicates():
    assert is_valid_account_number("0123")
    assert not is_valid_account_number("")
    assert not is_valid_account_number(123)

    assert is_valid_amount(0)
    assert is_valid_amount("1,5")
    assert not is_valid_amount(-1)
    assert not is_valid_amount("nan")
    assert not is_valid_amount(True)
    assert not is_valid_amount("-0.001")
    assert not is_valid_amount("1E+30")

    assert is_valid_direction("D")
    assert is_valid_direction(Direction.CREDIT)
    assert not is_valid_direction("Z")


def test_transaction_amount_is_rounded_to_cents():
    tx = Transaction.create("100", "0.1234567890123456789012345678901", "D")

    assert tx.amount == Decimal("0.12")
    assert tx.describe() == "Account: 100, Amount: 0.12, Type: Debit"


def test_transaction_rejects_amount_too_large():
    with pytest.raises(ValidationError):
        Transaction.create("100", Decimal("1E+30"), "D")
