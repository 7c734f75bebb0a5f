"""Domain models for SEPA documents."""

from sepa_writer.models.base import PostalAddress
from sepa_writer.models.enums import ChargeBearer, PaymentMethod, SepaSchema
from sepa_writer.models.iban import IbanData
from sepa_writer.models.payment import PaymentBatch
from sepa_writer.models.transaction import CreditTransferTransaction, InstructionForCreditor

__all__ = [
    "ChargeBearer",
    "CreditTransferTransaction",
    "IbanData",
    "InstructionForCreditor",
    "PaymentBatch",
    "PaymentMethod",
    "PostalAddress",
    "SepaSchema",
]
