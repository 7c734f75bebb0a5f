"""Tests for domain models."""

from decimal import Decimal

import pytest

from sepa_writer.exceptions import InvalidAmountError, MandatoryFieldMissingError
from sepa_writer.models import (
    ChargeBearer,
    CreditTransferTransaction,
    IbanData,
    InstructionForCreditor,
    PostalAddress,
    SepaSchema,
)
from sepa_writer.models.iban import is_valid_bic, is_valid_iban, normalize_iban


class TestPostalAddress:
    """Tests for PostalAddress model."""

    def test_defaults(self) -> None:
        address = PostalAddress()

        assert address.street_name is None
        assert address.country is None
        assert address.address_lines == []

    def test_address_lines_not_shared(self) -> None:
        first = PostalAddress()
        second = PostalAddress()
        first.address_lines.append("1 rue de la Paix")

        assert second.address_lines == []


class TestEnums:
    """Tests for SEPA enums."""

    def test_schema_namespace(self) -> None:
        assert SepaSchema.PAIN_001_001_04.namespace == "urn:iso:std:iso:20022:tech:xsd:pain.001.001.04"

    def test_schema_from_value(self) -> None:
        assert SepaSchema("pain.001.001.03") is SepaSchema.PAIN_001_001_03

    def test_charge_bearer_wire_codes(self) -> None:
        assert [c.value for c in ChargeBearer] == ["CRED", "DEBT", "SHAR", "SLEV"]


class TestIbanHelpers:
    """Tests for IBAN and BIC structural checks."""

    def test_normalize_iban(self) -> None:
        assert normalize_iban("fr14 2004 1010 0505 0001 3m02 606") == "FR1420041010050500013M02606"
        assert normalize_iban(None) is None

    def test_valid_iban(self) -> None:
        assert is_valid_iban("FR1420041010050500013M02606")
        assert is_valid_iban("DE89370400440532013000")

    def test_invalid_check_digits(self) -> None:
        assert not is_valid_iban("FR1520041010050500013M02606")

    def test_invalid_structure(self) -> None:
        assert not is_valid_iban("")
        assert not is_valid_iban(None)
        assert not is_valid_iban("FR14")
        assert not is_valid_iban("1234567890123456")

    def test_bic(self) -> None:
        assert is_valid_bic("PSSTFRPPSCE")
        assert is_valid_bic("AGRIFRPP")
        assert not is_valid_bic("AGRIFRP")
        assert not is_valid_bic(None)


class TestIbanData:
    """Tests for IbanData model."""

    def test_normalizes_on_creation(self) -> None:
        data = IbanData(name="Test", iban="fr14 2004 1010 0505 0001 3m02 606", bic=" psstfrppsce ")

        assert data.iban == "FR1420041010050500013M02606"
        assert data.bic == "PSSTFRPPSCE"
        assert data.country == "FR"

    def test_valid(self, debtor: IbanData) -> None:
        assert debtor.is_valid
        assert not debtor.unknown_bic

    def test_missing_name_is_invalid(self) -> None:
        data = IbanData(iban="FR1420041010050500013M02606", bic="PSSTFRPPSCE")
        assert not data.is_valid

    def test_bad_checksum_is_invalid(self) -> None:
        data = IbanData(name="Test", iban="FR1420041010050500013M02607", bic="PSSTFRPPSCE")
        assert not data.is_valid

    def test_missing_bic_is_invalid(self) -> None:
        data = IbanData(name="Test", iban="FR1420041010050500013M02606")
        assert not data.is_valid

    def test_unknown_bic_is_valid(self) -> None:
        data = IbanData(name="Test", iban="FR1420041010050500013M02606", unknown_bic=True)
        assert data.is_valid
        assert data.unknown_bic


class TestCreditTransferTransaction:
    """Tests for CreditTransferTransaction model."""

    def test_defaults(self, creditor: IbanData) -> None:
        transaction = CreditTransferTransaction(amount=Decimal("10.00"), creditor=creditor)

        assert transaction.end_to_end_id == "NOTPROVIDED"
        assert transaction.currency == "EUR"
        assert transaction.id is None
        assert transaction.purpose is None
        assert transaction.instruction_for_creditor is None

    def test_amount_coerced_to_decimal(self, creditor: IbanData) -> None:
        transaction = CreditTransferTransaction(amount="12.5", creditor=creditor)
        assert transaction.amount == Decimal("12.5")

    @pytest.mark.parametrize("amount", ["0", "-0.01", "-100"])
    def test_non_positive_amount_rejected(self, creditor: IbanData, amount: str) -> None:
        with pytest.raises(InvalidAmountError):
            CreditTransferTransaction(amount=Decimal(amount), creditor=creditor)

    @pytest.mark.parametrize("amount", ["NaN", "sNaN", "Infinity", "-Infinity"])
    def test_non_finite_amount_rejected(self, creditor: IbanData, amount: str) -> None:
        with pytest.raises(InvalidAmountError):
            CreditTransferTransaction(amount=Decimal(amount), creditor=creditor)

    @pytest.mark.parametrize("amount", ["0.005", "10.001", "1.999"])
    def test_more_than_two_decimals_rejected(self, creditor: IbanData, amount: str) -> None:
        with pytest.raises(InvalidAmountError):
            CreditTransferTransaction(amount=Decimal(amount), creditor=creditor)

    def test_trailing_zero_decimals_accepted(self, creditor: IbanData) -> None:
        transaction = CreditTransferTransaction(amount=Decimal("10.5000"), creditor=creditor)
        assert transaction.amount == Decimal("10.50")

    def test_non_numeric_amount_rejected(self, creditor: IbanData) -> None:
        with pytest.raises(InvalidAmountError):
            CreditTransferTransaction(amount="ten", creditor=creditor)

    def test_validate_after_mutation(self, make_transaction) -> None:
        transaction = make_transaction()
        transaction.validate()

        transaction.amount = Decimal("-1.00")
        with pytest.raises(InvalidAmountError):
            transaction.validate()

        transaction.amount = Decimal("1.00")
        transaction.end_to_end_id = ""
        with pytest.raises(MandatoryFieldMissingError):
            transaction.validate()

    def test_empty_end_to_end_id_rejected(self, creditor: IbanData) -> None:
        with pytest.raises(MandatoryFieldMissingError) as exc_info:
            CreditTransferTransaction(amount=Decimal("1"), creditor=creditor, end_to_end_id="")
        assert exc_info.value.field == "end_to_end_id"

    def test_creditor_iban_required(self) -> None:
        with pytest.raises(MandatoryFieldMissingError):
            CreditTransferTransaction(amount=Decimal("1"), creditor=IbanData(name="No IBAN"))
        with pytest.raises(MandatoryFieldMissingError):
            CreditTransferTransaction(amount=Decimal("1"), creditor=None)

    def test_copy_is_independent(self, make_transaction) -> None:
        original = make_transaction(
            instruction_for_creditor=InstructionForCreditor(code="PHOB", comment="+33 1 23 45 67 89")
        )
        copied = original.copy()

        original.amount = Decimal("999.99")
        original.creditor.name = "Changed"
        original.instruction_for_creditor.code = "TELB"

        assert copied.amount == Decimal("100.00")
        assert copied.creditor.name == "Creditor Name"
        assert copied.instruction_for_creditor.code == "PHOB"
