from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response

from forestledger.api.deps import forest_lock, get_forest
from forestledger.api.mappers.account_mapper import tx_to_response
from forestledger.api.mappers.result_mapper import raise_for_result
from forestledger.api.schemas.transactions import TransactionCreateRequest, TransactionResponse
from forestledger.domain.errors import ValidationError
from forestledger.domain.amount import parse_amount

router = APIRouter(prefix="/accounts", tags=["transactions"])


@router.post("/{number}/transactions", response_model=TransactionResponse, status_code=201)
def create_account_transaction(number: str, payload: TransactionCreateRequest) -> TransactionResponse:
    try:
        amount = parse_amount(payload.amount)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    with forest_lock():
        forest = get_forest()
        result = forest.add_transaction(number, amount, payload.direction)
        raise_for_result(result)
        acc = forest.get_account(number)
        return tx_to_response(result.value, len(acc.transactions) - 1)


@router.get("/{number}/transactions", response_model=list[TransactionResponse])
def list_account_transactions(number: str) -> list[TransactionResponse]:
    with forest_lock():
        acc = get_forest().get_account(number)
        if acc is None:
            raise HTTPException(status_code=404, detail="Account not found.")
        return [tx_to_response(t, i) for i, t in enumerate(acc.transactions)]


@router.delete("/{number}/transactions/{index}", status_code=204)
def delete_account_transaction(number: str, index: int) -> Response:
    with forest_lock():
        raise_for_result(get_forest().delete_transaction(number, index))
    return Response(status_code=204)
