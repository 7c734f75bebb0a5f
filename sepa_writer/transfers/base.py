"""Shared contract and helpers for SEPA transfer documents.

A transfer document is anything implementing :class:`TransferDocument`.
Message-level identity lives in :class:`MessageInfo`, transactions and
batches in :class:`TransactionBook`; concrete documents compose both
and use the envelope and group-header builders below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Generic, Iterator, Protocol, TypeVar

from lxml import etree

from sepa_writer.builders.element import add_organisation_id, new_document, new_element
from sepa_writer.builders.formatting import format_amount, format_datetime
from sepa_writer.exceptions import (
    DuplicateTransactionError,
    MandatoryFieldMissingError,
    NullInputError,
    UnsupportedSchemaError,
)
from sepa_writer.models.enums import SepaSchema
from sepa_writer.models.payment import PaymentBatch, SepaTransaction

T = TypeVar("T", bound=SepaTransaction)


class TransferDocument(Protocol):
    """Capabilities every transfer document provides."""

    def check_mandatory_data(self) -> None:
        """Raise ``MandatoryFieldMissingError`` for the first missing field."""

    def check_schema(self, schema: SepaSchema) -> bool:
        """Whether the document can be written with ``schema``."""

    def generate(self) -> etree._ElementTree:
        """Validate and build the XML tree."""


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class MessageInfo:
    """Message-level identity shared by every payment block.

    ``payment_info_id`` defaults to ``message_id`` when unset;
    ``requested_execution_date`` applies to unbatched transactions.
    """

    message_id: str | None = None
    creation_date: datetime | None = field(default_factory=_now)
    payment_info_id: str | None = None
    initiating_party_name: str | None = None
    initiating_party_id: str | None = None
    local_instrument_code: str | None = None
    category_purpose_code: str | None = None
    requested_execution_date: date = field(default_factory=date.today)

    @property
    def has_initiating_party(self) -> bool:
        return bool(self.initiating_party_name) or self.initiating_party_id is not None

    def resolve_payment_info_id(self, batch: PaymentBatch | None = None) -> str | None:
        if batch is not None and batch.payment_info_id:
            return batch.payment_info_id
        return self.payment_info_id or self.message_id

    def check_mandatory(self, schema: SepaSchema | None) -> None:
        """Check base fields in order: message id, creation date, schema, initiating party."""
        if not self.message_id:
            raise MandatoryFieldMissingError("message_id")
        if self.creation_date is None:
            raise MandatoryFieldMissingError("creation_date")
        if schema is None:
            raise MandatoryFieldMissingError("schema")
        if not self.has_initiating_party:
            raise MandatoryFieldMissingError("initiating_party")


@dataclass(frozen=True)
class Population(Generic[T]):
    """Transactions emitted in one payment-information block."""

    transactions: tuple[T, ...]
    batch: PaymentBatch[T] | None = None

    @property
    def number_of_transactions(self) -> int:
        return len(self.transactions)

    @property
    def control_sum(self) -> Decimal:
        return sum((t.amount for t in self.transactions), Decimal("0"))


class TransactionBook(Generic[T]):
    """Unbatched transactions and payment batches of one document.

    When any batch exists, the unbatched list is ignored by generation.
    Transactions with the same requested execution date share a batch.
    """

    def __init__(self) -> None:
        self._transactions: list[T] = []
        self._batches: list[PaymentBatch[T]] = []

    @property
    def transactions(self) -> tuple[T, ...]:
        return tuple(self._transactions)

    @property
    def batches(self) -> tuple[PaymentBatch[T], ...]:
        return tuple(self._batches)

    def add(self, transaction: T, requested_execution_date: date | None = None) -> None:
        """Add a copy of ``transaction``, to a dated batch if a date is given."""
        if transaction is None:
            raise NullInputError("transaction")
        transaction.validate()
        self._check_unique_id(transaction)

        if requested_execution_date is None:
            self._transactions.append(transaction.copy())
            return

        if isinstance(requested_execution_date, datetime):
            requested_execution_date = requested_execution_date.date()
        batch = self.find_batch(requested_execution_date)
        if batch is None:
            batch = PaymentBatch(requested_execution_date)
            self._batches.append(batch)
        batch.add_transaction(transaction)

    def add_batch(self, batch: PaymentBatch[T]) -> None:
        """Add a copy of an explicit batch."""
        if batch is None:
            raise NullInputError("payment batch")
        seen = {i for i in self._all_ids() if i}
        for transaction in batch.transactions:
            transaction.validate()
            transaction_id = getattr(transaction, "id", None)
            if transaction_id:
                if transaction_id in seen:
                    raise DuplicateTransactionError(f"Transaction id {transaction_id} is already used.")
                seen.add(transaction_id)
        self._batches.append(batch.copy())

    def validate(self) -> None:
        """Validate every stored transaction again."""
        for transaction in self._transactions:
            transaction.validate()
        for batch in self._batches:
            for transaction in batch.transactions:
                transaction.validate()

    def find_batch(self, requested_execution_date: date) -> PaymentBatch[T] | None:
        for batch in self._batches:
            if batch.requested_execution_date == requested_execution_date:
                return batch
        return None

    def populations(self) -> list[Population[T]]:
        """Batches if any exist, otherwise a single unbatched population."""
        if self._batches:
            return [Population(batch.transactions, batch) for batch in self._batches]
        return [Population(tuple(self._transactions))]

    @property
    def number_of_transactions(self) -> int:
        return sum(p.number_of_transactions for p in self.populations())

    @property
    def control_sum(self) -> Decimal:
        return sum((p.control_sum for p in self.populations()), Decimal("0"))

    def __iter__(self) -> Iterator[T]:
        for population in self.populations():
            yield from population.transactions

    def _all_ids(self) -> Iterator[str]:
        for transaction in self._transactions:
            yield transaction.id
        for batch in self._batches:
            for transaction in batch.transactions:
                yield transaction.id

    def _check_unique_id(self, transaction: T) -> None:
        transaction_id = getattr(transaction, "id", None)
        if transaction_id and transaction_id in set(self._all_ids()):
            raise DuplicateTransactionError(f"Transaction id {transaction_id} is already used.")


def resolve_schema(value: SepaSchema | str) -> SepaSchema:
    """Coerce a schema name to :class:`SepaSchema`."""
    if isinstance(value, SepaSchema):
        return value
    try:
        return SepaSchema(value)
    except ValueError as e:
        raise UnsupportedSchemaError(value) from e


def build_envelope(schema: SepaSchema, message_name: str) -> tuple[etree._ElementTree, etree._Element]:
    """Build ``Document`` and its message element, returning both."""
    tree = new_document(schema.namespace)
    message = new_element(tree.getroot(), message_name)
    return tree, message


def build_group_header(
    parent: etree._Element,
    message: MessageInfo,
    number_of_transactions: int,
    control_sum: Decimal,
) -> etree._Element:
    """Append the ``GrpHdr`` block."""
    grp_hdr = new_element(parent, "GrpHdr")
    new_element(grp_hdr, "MsgId", message.message_id)
    new_element(grp_hdr, "CreDtTm", format_datetime(message.creation_date))
    new_element(grp_hdr, "NbOfTxs", number_of_transactions)
    new_element(grp_hdr, "CtrlSum", format_amount(control_sum))

    if message.has_initiating_party:
        initg_pty = new_element(grp_hdr, "InitgPty")
        if message.initiating_party_name:
            new_element(initg_pty, "Nm", message.initiating_party_name)
        if message.initiating_party_id is not None:
            add_organisation_id(initg_pty, message.initiating_party_id)

    return grp_hdr
