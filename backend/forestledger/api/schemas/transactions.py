from __future__ import annotations

from pydantic import BaseModel, Field

from forestledger.domain.transaction import Direction


class TransactionCreateRequest(BaseModel):
    amount: str = Field(
        ...,
        min_length=1,
        examples=["50", "12.34"],
        description="Non-negative amount as string, e.g. '50' or '12.34'",
    )
    direction: Direction = Field(description="'D' for Debit, 'C' for Credit")


class TransactionResponse(BaseModel):
    index: int
    account_number: str
    amount: str
    direction: Direction
    type: str
