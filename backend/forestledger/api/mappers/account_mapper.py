from __future__ import annotations

from forestledger.api.schemas.accounts import AccountDetailResponse, AccountResponse
from forestledger.api.schemas.transactions import TransactionResponse
from forestledger.domain.account import Account
from forestledger.domain.amount import format_amount
from forestledger.domain.transaction import Transaction


def tx_to_response(tx: Transaction, index: int) -> TransactionResponse:
    return TransactionResponse(
        index=index,
        account_number=tx.account_number,
        amount=format_amount(tx.amount),
        direction=tx.direction,
        type=tx.direction.label,
    )


def account_to_response(acc: Account) -> AccountResponse:
    parent = acc.parent
    return AccountResponse(
        number=acc.number,
        description=acc.description,
        balance=format_amount(acc.balance),
        parent=parent.number if parent is not None else None,
        children=[c.number for c in acc.children],
        transactions_count=len(acc.transactions),
    )


def account_to_detail_response(acc: Account) -> AccountDetailResponse:
    base = account_to_response(acc)
    return AccountDetailResponse(
        **base.model_dump(),
        transactions=[tx_to_response(t, i) for i, t in enumerate(acc.transactions)],
    )
