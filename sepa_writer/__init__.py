"""Build ISO 20022 pain.001 SEPA credit transfer documents."""

from sepa_writer.config import SepaConfig
from sepa_writer.exceptions import (
    DuplicateTransactionError,
    InvalidAmountError,
    InvalidDebtorError,
    InvalidIdentityError,
    MandatoryFieldMissingError,
    NullInputError,
    SepaError,
    SepaRuleError,
    UnsupportedSchemaError,
)
from sepa_writer.models import (
    ChargeBearer,
    CreditTransferTransaction,
    IbanData,
    InstructionForCreditor,
    PaymentBatch,
    PostalAddress,
    SepaSchema,
)
from sepa_writer.transfers import CreditTransfer

__all__ = [
    "ChargeBearer",
    "CreditTransfer",
    "CreditTransferTransaction",
    "DuplicateTransactionError",
    "IbanData",
    "InstructionForCreditor",
    "InvalidAmountError",
    "InvalidDebtorError",
    "InvalidIdentityError",
    "MandatoryFieldMissingError",
    "NullInputError",
    "PaymentBatch",
    "PostalAddress",
    "SepaConfig",
    "SepaError",
    "SepaRuleError",
    "SepaSchema",
    "UnsupportedSchemaError",
]
