from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from forestledger.api.deps import forest_lock, get_forest
from forestledger.api.mappers.result_mapper import raise_for_result
from forestledger.api.schemas.reports import ReportFileRequest, ReportFileResponse

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/forest", response_class=PlainTextResponse)
def forest_report() -> str:
    with forest_lock():
        return get_forest().render_forest_tree()


@router.get("/accounts/{number}", response_class=PlainTextResponse)
def account_report(number: str) -> str:
    with forest_lock():
        text = get_forest().render_account_details(number)
    if text is None:
        raise HTTPException(status_code=404, detail="Account not found.")
    return text


@router.post("/forest/file", response_model=ReportFileResponse, status_code=201)
def write_forest_report(payload: ReportFileRequest) -> ReportFileResponse:
    """Écrit l'arbre complet dans un fichier (relatif à FORESTLEDGER_REPORTS_DIR)."""
    with forest_lock():
        result = get_forest().print_forest_tree(payload.filename)
    raise_for_result(result)
    return ReportFileResponse(path=str(result.value), message=result.message)


@router.post("/accounts/{number}/file", response_model=ReportFileResponse, status_code=201)
def write_account_report(number: str, payload: ReportFileRequest) -> ReportFileResponse:
    with forest_lock():
        result = get_forest().print_account_details(number, payload.filename)
    raise_for_result(result)
    return ReportFileResponse(path=str(result.value), message=result.message)
