"""Credit transfer transaction model."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from sepa_writer.exceptions import InvalidAmountError, MandatoryFieldMissingError
from sepa_writer.models.iban import IbanData

EURO_CURRENCY = "EUR"
NOT_PROVIDED = "NOTPROVIDED"
AMOUNT_EXPONENT = -2


@dataclass
class InstructionForCreditor:
    """Instruction for the creditor agent (``InstrForCdtrAgt``).

    Only emitted for international transfers.
    """

    code: str
    comment: str | None = None


@dataclass
class CreditTransferTransaction:
    """One credit transfer leg (``CdtTrfTxInf``).

    ``id`` is the optional instruction id; ``end_to_end_id`` is always
    emitted and falls back to ``NOTPROVIDED``.
    """

    amount: Decimal
    creditor: IbanData
    end_to_end_id: str = NOT_PROVIDED
    id: str | None = None
    currency: str = EURO_CURRENCY
    purpose: str | None = None
    remittance_information: str | None = None
    regulatory_reporting_code: str | None = None
    instruction_for_creditor: InstructionForCreditor | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            try:
                self.amount = Decimal(str(self.amount))
            except InvalidOperation as e:
                raise InvalidAmountError(f"Amount {self.amount!r} is not a number.") from e
        self.validate()

    def validate(self) -> None:
        """Check the amount, end-to-end id and creditor IBAN."""
        if not isinstance(self.amount, Decimal) or not self.amount.is_finite():
            raise InvalidAmountError(f"Amount must be a finite decimal, got {self.amount!r}.")
        if self.amount <= 0:
            raise InvalidAmountError(f"Amount must be greater than 0, got {self.amount}.")
        if self.amount.normalize().as_tuple().exponent < AMOUNT_EXPONENT:
            raise InvalidAmountError(f"Amount must have at most 2 decimals, got {self.amount}.")
        if not self.end_to_end_id:
            raise MandatoryFieldMissingError("end_to_end_id")
        if self.creditor is None or not self.creditor.iban:
            raise MandatoryFieldMissingError("creditor IBAN")

    def copy(self) -> CreditTransferTransaction:
        """Return an independent deep copy."""
        return copy.deepcopy(self)
