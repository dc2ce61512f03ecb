from __future__ import annotations


class LedgerError(Exception):
    """Base class for every failure raised or reported by the ledger."""


class ValidationError(LedgerError, ValueError):
    pass


class NotFoundError(LedgerError, KeyError):
    # KeyError quotes its argument in str(); keep the plain message
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ReportIOError(LedgerError, OSError):
    pass


class TransactionIndexError(LedgerError, IndexError):
    pass


class DuplicateAccountError(ValidationError):
    pass
