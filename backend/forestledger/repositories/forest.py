from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from forestledger.domain.account import Account
from forestledger.domain.amount import AmountLike
from forestledger.domain.errors import (
    DuplicateAccountError,
    LedgerError,
    NotFoundError,
    ValidationError,
)
from forestledger.domain.result import OperationResult
from forestledger.domain.transaction import (
    Direction,
    Transaction,
    is_valid_account_number,
    is_valid_amount,
    is_valid_direction,
)
from forestledger.services import report_writer

logger = logging.getLogger(__name__)

ACCOUNT_NOT_FOUND_REPORT = "Error: Account not found.\n"


def _trim(value: object) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip(" \t")


@dataclass
class Forest:
    """
    Forêt de comptes en mémoire.
    - _roots possède les comptes racines (clé = numéro de compte)
    - chaque Account possède ses enfants
    - _index est une vue non propriétaire de tous les comptes : unicité
      des numéros sur toute la forêt + recherche des comptes enfants

    Chaque point d'entrée valide avant de modifier et retourne un
    OperationResult ; l'état n'est jamais modifié en cas d'erreur.
    """
    reports_dir: Path | None = None
    _roots: dict[str, Account] = field(default_factory=dict, init=False, repr=False)
    _index: dict[str, Account] = field(default_factory=dict, init=False, repr=False)

    # ---------- validation ----------
    is_valid_account_number = staticmethod(is_valid_account_number)
    is_valid_amount = staticmethod(is_valid_amount)
    is_valid_direction = staticmethod(is_valid_direction)
    is_valid_filename = staticmethod(report_writer.is_valid_filename)

    def _require_account_number(self, number: object) -> str:
        if not is_valid_account_number(number):
            raise ValidationError("Invalid account number. Must be numeric.")
        return number  # type: ignore[return-value]

    def _require_account(self, number: str) -> Account:
        account = self._index.get(number)
        if account is None:
            raise NotFoundError("Account not found.")
        return account

    def _prepare_new_account(self, number: object, description: object) -> tuple[str, str]:
        trimmed_number = self._require_account_number(_trim(number))
        trimmed_description = _trim(description)

        if not trimmed_description:
            raise ValidationError("Description cannot be empty.")
        if trimmed_number in self._index:
            raise DuplicateAccountError("Account already exists.")
        return trimmed_number, trimmed_description

    @staticmethod
    def _fail(operation: str, error: LedgerError) -> OperationResult:
        logger.warning("%s rejected: %s", operation, error)
        return OperationResult.failure(error)

    # ---------- accounts ----------
    def add_account(self, number: str, description: str) -> OperationResult:
        try:
            num, desc = self._prepare_new_account(number, description)
        except LedgerError as e:
            return self._fail("add_account", e)

        account = Account(number=num, description=desc)
        self._roots[num] = account
        self._index[num] = account
        logger.info("Account %s (%s) added", num, desc)
        return OperationResult.success(f"Account {num} added.", value=account)

    def add_child_account(self, parent_number: str, number: str, description: str) -> OperationResult:
        try:
            parent = self._require_account(self._require_account_number(_trim(parent_number)))
            num, desc = self._prepare_new_account(number, description)
            child = parent.create_child(num, desc)
        except LedgerError as e:
            return self._fail("add_child_account", e)

        self._index[num] = child
        logger.info("Account %s (%s) added under %s", num, desc, parent.number)
        return OperationResult.success(f"Account {num} added under {parent.number}.", value=child)

    def search_account(self, number: str) -> Account | None:
        trimmed = _trim(number)
        if not is_valid_account_number(trimmed):
            logger.warning("search_account rejected: invalid account number %r", number)
            return None
        return self._index.get(trimmed)

    def get_account(self, number: str) -> Account | None:
        return self._index.get(number)

    def roots(self) -> list[Account]:
        return [self._roots[k] for k in sorted(self._roots)]

    def accounts(self) -> list[Account]:
        return list(self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, number: object) -> bool:
        return number in self._index

    # ---------- transactions ----------
    def add_transaction(
        self,
        account_number: str,
        amount: AmountLike,
        direction: Direction | str,
    ) -> OperationResult:
        try:
            self._require_account_number(account_number)
            if not is_valid_amount(amount):
                raise ValidationError("Transaction amount must be non-negative.")
            if not is_valid_direction(direction):
                raise ValidationError(
                    "Invalid transaction type. Use 'D' for Debit or 'C' for Credit."
                )
            account = self._require_account(account_number)
        except LedgerError as e:
            return self._fail("add_transaction", e)

        transaction = Transaction.create(account_number, amount, direction)
        account.add_transaction(transaction)
        logger.info("Transaction added: %s", transaction)
        return OperationResult.success("Transaction added.", value=transaction)

    def delete_transaction(self, account_number: str, index: int) -> OperationResult:
        try:
            self._require_account_number(account_number)
            account = self._require_account(account_number)
            if isinstance(index, bool) or not isinstance(index, int):
                raise ValidationError("Invalid transaction index. Must be an integer.")
            # la borne est vérifiée par l'Account
            removed = account.delete_transaction(index)
        except LedgerError as e:
            return self._fail("delete_transaction", e)

        logger.info("Transaction %d deleted from account %s: %s", index, account_number, removed)
        return OperationResult.success("Transaction successfully deleted.", value=removed)

    # ---------- reports ----------
    def _write_account_details(self, number: str, sink: TextIO) -> None:
        account = self._index.get(number)
        if account is None:
            sink.write(ACCOUNT_NOT_FOUND_REPORT)
        else:
            account.print_details(sink)

    def _write_forest(self, sink: TextIO) -> None:
        for account in self.roots():
            if account.is_root():
                account.print_hierarchy(sink, 0)

    def print_account_details(self, number: str, filename: str) -> OperationResult:
        try:
            self._require_account_number(number)
            path = report_writer.resolve_destination(filename, self.reports_dir)
            report_writer.write_report(path, lambda fh: self._write_account_details(number, fh))
        except LedgerError as e:
            return self._fail("print_account_details", e)

        logger.info("Account %s details written to %s", number, path)
        return OperationResult.success(f"Account details written to {path}.", value=path)

    def print_forest_tree(self, filename: str) -> OperationResult:
        try:
            path = report_writer.resolve_destination(filename, self.reports_dir)
            report_writer.write_report(path, self._write_forest)
        except LedgerError as e:
            return self._fail("print_forest_tree", e)

        logger.info("Forest tree written to %s", path)
        return OperationResult.success(f"Forest tree written to {path}.", value=path)

    def render_account_details(self, number: str) -> str | None:
        account = self._index.get(number)
        if account is None:
            return None
        buf = io.StringIO()
        account.print_details(buf)
        return buf.getvalue()

    def render_forest_tree(self) -> str:
        buf = io.StringIO()
        self._write_forest(buf)
        return buf.getvalue()
