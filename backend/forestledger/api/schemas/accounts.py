from __future__ import annotations

from pydantic import BaseModel, Field

from forestledger.api.schemas.transactions import TransactionResponse


class AccountCreateRequest(BaseModel):
    number: str = Field(examples=["100"])
    description: str = Field(examples=["Cash"])


class AccountResponse(BaseModel):
    number: str
    description: str
    balance: str
    parent: str | None
    children: list[str]
    transactions_count: int


class AccountDetailResponse(AccountResponse):
    transactions: list[TransactionResponse]
