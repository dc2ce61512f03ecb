from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from forestledger.domain.errors import LedgerError


@dataclass(frozen=True)
class OperationResult:
    """Issue d'une opération de la Forest (succès, ou erreur + message)."""
    ok: bool
    message: str = ""
    error: Optional[LedgerError] = None
    value: Any = None

    @classmethod
    def success(cls, message: str = "", value: Any = None) -> "OperationResult":
        return cls(ok=True, message=message, value=value)

    @classmethod
    def failure(cls, error: LedgerError) -> "OperationResult":
        return cls(ok=False, message=f"Error: {error}", error=error)

    def __bool__(self) -> bool:
        return self.ok
