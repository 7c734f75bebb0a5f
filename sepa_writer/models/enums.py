"""Enumeration types for SEPA documents."""

from enum import Enum


class SepaSchema(str, Enum):
    PAIN_001_001_03 = "pain.001.001.03"
    PAIN_001_001_04 = "pain.001.001.04"

    @property
    def namespace(self) -> str:
        """ISO 20022 namespace URN for this schema."""
        return f"urn:iso:std:iso:20022:tech:xsd:{self.value}"


class ChargeBearer(str, Enum):
    """Party paying the transfer charges, valued by its wire code."""

    CRED = "CRED"  # creditor
    DEBT = "DEBT"  # debtor
    SHAR = "SHAR"  # shared
    SLEV = "SLEV"  # following service level


class PaymentMethod(str, Enum):
    CREDIT_TRANSFER = "TRF"
