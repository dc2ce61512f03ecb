from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from forestledger.api.deps import forest_lock, get_forest
from forestledger.api.mappers.account_mapper import account_to_detail_response, account_to_response
from forestledger.api.mappers.result_mapper import raise_for_result
from forestledger.api.schemas.accounts import AccountCreateRequest, AccountDetailResponse, AccountResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("", status_code=201, response_model=AccountResponse)
def create_account(req: AccountCreateRequest) -> AccountResponse:
    with forest_lock():
        result = get_forest().add_account(req.number, req.description)
        raise_for_result(result)
        return account_to_response(result.value)


@router.post("/{parent_number}/children", status_code=201, response_model=AccountResponse)
def create_child_account(parent_number: str, req: AccountCreateRequest) -> AccountResponse:
    with forest_lock():
        result = get_forest().add_child_account(parent_number, req.number, req.description)
        raise_for_result(result)
        return account_to_response(result.value)


@router.get("", response_model=list[AccountResponse])
def list_accounts(roots_only: bool = False) -> list[AccountResponse]:
    with forest_lock():
        forest = get_forest()
        accounts = forest.roots() if roots_only else sorted(forest.accounts(), key=lambda a: a.number)
        return [account_to_response(a) for a in accounts]


@router.get("/{number}", response_model=AccountDetailResponse)
def get_account(number: str) -> AccountDetailResponse:
    with forest_lock():
        acc = get_forest().search_account(number)
        if acc is None:
            raise HTTPException(status_code=404, detail="Account not found.")
        return account_to_detail_response(acc)
