from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from forestledger.domain.amount import parse_amount
from forestledger.domain.errors import ValidationError
from forestledger.domain.result import OperationResult
from forestledger.repositories.forest import Forest
from forestledger.services.account_loader import load_accounts_from_file
from forestledger.settings import get_settings

logger = logging.getLogger(__name__)

MENU = (
    "\n=== Forest Tree Management ===\n"
    "1. Add Account\n"
    "2. Add Transaction\n"
    "3. Delete Transaction\n"
    "4. Search Account\n"
    "5. Print Account Details\n"
    "6. Print Forest Tree\n"
    "7. Exit\n"
    "Choose an option: "
)

EXIT_CHOICE = "7"


class Menu:
    """Boucle interactive au-dessus d'une Forest (entrées / sorties injectables)."""

    def __init__(self, forest: Forest, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.forest = forest
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._actions = {
            "1": self.add_account,
            "2": self.add_transaction,
            "3": self.delete_transaction,
            "4": self.search_account,
            "5": self.print_account_details,
            "6": self.print_forest_tree,
        }

    # ---------- io helpers ----------
    def _say(self, text: str) -> None:
        self._out.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def _report(self, result: OperationResult) -> None:
        if result.message:
            self._say(result.message)

    # ---------- loop ----------
    def run(self) -> None:
        while True:
            try:
                choice = self._ask(MENU).strip()
            except EOFError:
                return

            if choice == EXIT_CHOICE:
                self._say("Exiting...")
                return

            action = self._actions.get(choice)
            if action is None:
                self._say("Invalid choice. Please try again.")
                continue

            try:
                action()
            except EOFError:
                return

    # ---------- actions ----------
    def add_account(self) -> None:
        number = self._ask("Enter account number: ").strip()
        description = self._ask("Enter account description: ")
        self._report(self.forest.add_account(number, description))

    def add_transaction(self) -> None:
        while True:
            account = self.forest.search_account(self._ask("Enter account number: ").strip())
            if account is not None:
                break
            self._say("Error: Account not found.")

        while True:
            raw = self._ask("Enter transaction amount: ")
            try:
                amount = parse_amount(raw)
            except ValidationError:
                self._say("Error: Invalid input. Please enter a valid transaction amount (numeric).")
                continue
            if amount >= 0:
                break
            self._say("Error: Transaction amount must be non-negative.")

        while True:
            direction = self._ask("Enter transaction type (D/C): ").strip()
            if self.forest.is_valid_direction(direction):
                break
            self._say("Error: Invalid transaction type. Use 'D' for Debit or 'C' for Credit.")

        self._report(self.forest.add_transaction(account.number, amount, direction))

    def delete_transaction(self) -> None:
        number = self._ask("Enter account number: ").strip()
        while True:
            raw = self._ask("Enter transaction index to delete: ").strip()
            try:
                index = int(raw)
            except ValueError:
                self._say("Error: Invalid input. Please enter a valid transaction index (integer).")
                continue
            break
        self._report(self.forest.delete_transaction(number, index))

    def search_account(self) -> None:
        account = self.forest.search_account(self._ask("Enter account number to search: "))
        if account is not None:
            self._say(f"Account found: {account.number} - {account.description}")
        else:
            self._say("Account not found.")

    def print_account_details(self) -> None:
        number = self._ask("Enter account number: ").strip()
        filename = self._ask("Enter filename to save details: ")
        self._report(self.forest.print_account_details(number, filename))

    def print_forest_tree(self) -> None:
        filename = self._ask("Enter filename to save forest tree: ")
        self._report(self.forest.print_forest_tree(filename))


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="forestledger", description="Interactive forest ledger")
    parser.add_argument(
        "--accounts-file",
        type=Path,
        default=settings.accounts_file,
        help="accounts to load at startup, one '<number> <description>' per line",
    )
    parser.add_argument(
        "--reports-dir",
        type=Path,
        default=settings.reports_dir,
        help="base directory for report files (default: current directory)",
    )
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    forest = Forest(reports_dir=args.reports_dir)
    load_accounts_from_file(forest, args.accounts_file)

    Menu(forest).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
