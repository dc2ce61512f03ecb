from __future__ import annotations

from fastapi import HTTPException

from forestledger.domain.errors import (
    DuplicateAccountError,
    NotFoundError,
    TransactionIndexError,
    ValidationError,
)
from forestledger.domain.result import OperationResult


def status_for(error: Exception | None) -> int:
    if isinstance(error, DuplicateAccountError):
        return 409
    if isinstance(error, (NotFoundError, TransactionIndexError)):
        return 404
    if isinstance(error, ValidationError):
        return 422
    # ReportIOError et erreurs inattendues
    return 500


def raise_for_result(result: OperationResult) -> None:
    if result.ok:
        return
    raise HTTPException(status_code=status_for(result.error), detail=str(result.error))
