"""Payment batch: transactions sharing one requested execution date."""

from __future__ import annotations

import copy
from datetime import date
from decimal import Decimal
from typing import Generic, Protocol, TypeVar

from sepa_writer.exceptions import NullInputError


class SepaTransaction(Protocol):
    """Transaction that can be stored in a batch."""

    amount: Decimal

    def validate(self) -> None: ...

    def copy(self): ...


T = TypeVar("T", bound=SepaTransaction)


class PaymentBatch(Generic[T]):
    """Ordered group of transactions emitted as one ``PmtInf`` block.

    Transactions are copied on insertion, so later changes to the
    caller's object never reach the batch.

    Parameters
    ----------
    requested_execution_date : date
        Execution date shared by every transaction of the batch.
    payment_info_id : str | None
        Identifier of the payment-information block. Falls back to the
        document's payment-info id, then to its message id.
    """

    def __init__(
        self,
        requested_execution_date: date,
        payment_info_id: str | None = None,
    ) -> None:
        self.requested_execution_date = requested_execution_date
        self.payment_info_id = payment_info_id
        self._transactions: list[T] = []

    def add_transaction(self, transaction: T) -> None:
        """Validate ``transaction`` and append a copy of it."""
        if transaction is None:
            raise NullInputError("transaction")
        transaction.validate()
        self._transactions.append(transaction.copy())

    @property
    def transactions(self) -> tuple[T, ...]:
        """Read-only view of the stored transactions, in insertion order."""
        return tuple(self._transactions)

    @property
    def number_of_transactions(self) -> int:
        return len(self._transactions)

    @property
    def control_sum(self) -> Decimal:
        return sum((t.amount for t in self._transactions), Decimal("0"))

    def copy(self) -> PaymentBatch[T]:
        """Return an independent deep copy of the batch."""
        return copy.deepcopy(self)

    def __len__(self) -> int:
        return len(self._transactions)

    def __repr__(self) -> str:
        return (
            f"PaymentBatch(requested_execution_date={self.requested_execution_date!r}, "
            f"transactions={len(self._transactions)})"
        )
