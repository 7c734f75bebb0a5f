"""Pytest configuration and fixtures."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from sepa_writer.models import CreditTransferTransaction, IbanData
from sepa_writer.transfers import CreditTransfer

PAIN_001_001_03_NS = "urn:iso:std:iso:20022:tech:xsd:pain.001.001.03"


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def ns() -> dict[str, str]:
    """Namespace map for pain.001.001.03 lookups."""
    return {"p": PAIN_001_001_03_NS}


@pytest.fixture
def creation_date() -> datetime:
    return datetime(2024, 3, 15, 10, 30, 0, tzinfo=timezone(timedelta(hours=1)))


@pytest.fixture
def execution_date() -> date:
    return date(2024, 3, 20)


@pytest.fixture
def debtor() -> IbanData:
    """Valid debtor with a known BIC."""
    return IbanData(
        name="Debtor Name",
        iban="FR1420041010050500013M02606",
        bic="PSSTFRPPSCE",
    )


@pytest.fixture
def creditor() -> IbanData:
    return IbanData(
        name="Creditor Name",
        iban="FR1420041010050500013M02607",
        bic="AGRIFRPP",
    )


@pytest.fixture
def make_transaction(creditor: IbanData):
    """Factory for transactions paying ``creditor``."""

    def _make(amount: str = "100.00", end_to_end_id: str = "TX1", **kwargs) -> CreditTransferTransaction:
        kwargs.setdefault("creditor", creditor)
        return CreditTransferTransaction(amount=Decimal(amount), end_to_end_id=end_to_end_id, **kwargs)

    return _make


@pytest.fixture
def credit_transfer(debtor: IbanData, creation_date: datetime, execution_date: date) -> CreditTransfer:
    """Domestic credit transfer with mandatory data set and no transactions."""
    transfer = CreditTransfer(
        message_id="MSG-001",
        creation_date=creation_date,
        initiating_party_name="Initiating Party",
        requested_execution_date=execution_date,
    )
    transfer.debtor = debtor
    return transfer
