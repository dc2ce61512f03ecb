from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator, Optional, TextIO

from forestledger.domain.amount import format_amount
from forestledger.domain.errors import TransactionIndexError, ValidationError
from forestledger.domain.transaction import Transaction

logger = logging.getLogger(__name__)

INDENT = "    "
DESCRIPTION_PREVIEW = 10


@dataclass(eq=False)
class Account:
    """
    Noeud de la forêt.
    - possède ses transactions et ses comptes enfants
    - garde une référence faible (non propriétaire) vers son parent
    - balance = somme(+montant si Debit, -montant si Credit), tenue à jour
      à chaque ajout / suppression
    """
    number: str
    description: str
    _balance: Decimal = field(default=Decimal("0"), init=False, repr=False)
    _children: list["Account"] = field(default_factory=list, init=False, repr=False)
    _transactions: list[Transaction] = field(default_factory=list, init=False, repr=False)
    _parent_ref: Optional["weakref.ReferenceType[Account]"] = field(
        default=None, init=False, repr=False
    )

    # ---------- read-only views ----------
    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def parent(self) -> Account | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def children(self) -> tuple[Account, ...]:
        return tuple(self._children)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def is_root(self) -> bool:
        return self.parent is None

    # ---------- hierarchy ----------
    def ancestors(self) -> Iterator[Account]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def add_child(self, child: Account | None) -> bool:
        if child is None:
            logger.error("Attempted to add a null child to account %s", self.number)
            return False

        if child is self or any(a is child for a in self.ancestors()):
            logger.error(
                "Cannot add account %s under %s: it would create a cycle",
                child.number,
                self.number,
            )
            return False

        if child.parent is not None:
            logger.error(
                "Account %s already belongs to account %s",
                child.number,
                child.parent.number,
            )
            return False

        child._parent_ref = weakref.ref(self)
        self._children.append(child)
        return True

    def create_child(self, number: str, description: str) -> Account:
        child = Account(number=number, description=description)
        if not self.add_child(child):
            raise ValidationError(f"Cannot attach account {number} under {self.number}.")
        return child

    def walk(self, depth: int = 0) -> Iterator[tuple[Account, int]]:
        """Parcours préfixe (pre-order) itératif : pas de limite de récursion."""
        stack: list[tuple[Account, int]] = [(self, depth)]
        while stack:
            node, level = stack.pop()
            yield node, level
            for child in reversed(node._children):
                stack.append((child, level + 1))

    # ---------- transactions ----------
    def add_transaction(self, transaction: Transaction) -> None:
        # pas de validation ici : la Forest valide avant d'appeler
        self._transactions.append(transaction)
        self._balance += transaction.signed_amount

    def delete_transaction(self, index: int) -> Transaction:
        if not (0 <= index < len(self._transactions)):
            raise TransactionIndexError(
                f"Invalid transaction index for account {self.number}. Index out of range."
            )

        removed = self._transactions.pop(index)
        self._balance -= removed.signed_amount
        return removed

    # ---------- rendering ----------
    def summary_line(self) -> str:
        return f"{self.number} - {self.description} (Balance: ${format_amount(self._balance)})"

    def print_details(self, sink: TextIO) -> None:
        sink.write(f"Account Number: {self.number}\n")
        sink.write(f"Description: {self.description[:DESCRIPTION_PREVIEW]}\n")
        sink.write(f"Balance: ${format_amount(self._balance)}\n")
        sink.write("Transactions:\n")
        for i, t in enumerate(self._transactions):
            sink.write(f"Index {i}: {t.describe()}\n")

    def print_hierarchy(self, sink: TextIO, depth: int = 0) -> None:
        for node, level in self.walk(depth):
            sink.write(INDENT * level + node.summary_line() + "\n")
            if node._transactions:
                sink.write(INDENT * (level + 1) + "Transactions:\n")
                for t in node._transactions:
                    sink.write(INDENT * (level + 2) + t.describe() + "\n")
