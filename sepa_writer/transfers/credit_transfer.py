"""SEPA credit transfer initiation document (pain.001)."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Callable

from lxml import etree

from sepa_writer.builders.element import (
    add_organisation_id,
    add_postal_address,
    new_element,
    new_path,
    to_bytes,
    to_string,
)
from sepa_writer.builders.formatting import format_amount, format_date
from sepa_writer.config import SepaConfig
from sepa_writer.exceptions import (
    InvalidDebtorError,
    MandatoryFieldMissingError,
    NullInputError,
    UnsupportedSchemaError,
)
from sepa_writer.logging import get_logger
from sepa_writer.models.enums import ChargeBearer, PaymentMethod, SepaSchema
from sepa_writer.models.iban import IbanData
from sepa_writer.models.payment import PaymentBatch
from sepa_writer.models.transaction import EURO_CURRENCY, NOT_PROVIDED, CreditTransferTransaction
from sepa_writer.transfers.base import (
    MessageInfo,
    Population,
    TransactionBook,
    build_envelope,
    build_group_header,
    resolve_schema,
)

logger = get_logger(__name__)

MESSAGE_ELEMENT = "CstmrCdtTrfInitn"
SUPPORTED_SCHEMAS = frozenset({SepaSchema.PAIN_001_001_03, SepaSchema.PAIN_001_001_04})


class CreditTransfer:
    """SEPA or international credit transfer for one debtor.

    Unbatched transactions produce a single ``PmtInf`` block dated with
    ``message.requested_execution_date``. Once any batch is present,
    each batch produces its own block and unbatched transactions are
    left out.

    Parameters
    ----------
    schema : SepaSchema | str
        pain.001.001.03 (default) or pain.001.001.04.
    debtor_account_currency : str
        ISO currency of the debtor account (default ``EUR``).
    is_international : bool
        Emit ``InstrPrty`` and the configured charge bearer instead of
        the SEPA service level and ``SLEV``.
    charge_bearer : ChargeBearer
        Charge bearer used for international transfers.
    **message : Any
        :class:`MessageInfo` fields (``message_id``,
        ``initiating_party_name``, ...).
    """

    def __init__(
        self,
        schema: SepaSchema | str = SepaSchema.PAIN_001_001_03,
        debtor_account_currency: str = EURO_CURRENCY,
        is_international: bool = False,
        charge_bearer: ChargeBearer = ChargeBearer.DEBT,
        **message: Any,
    ) -> None:
        self.message = MessageInfo(**message)
        self.debtor_account_currency = debtor_account_currency
        self.is_international = is_international
        self.charge_bearer = ChargeBearer(charge_bearer)
        self.book: TransactionBook[CreditTransferTransaction] = TransactionBook()
        self._debtor: IbanData | None = None
        self._schema: SepaSchema | None = None
        self.schema = schema

    @classmethod
    def from_config(cls, config: SepaConfig, **message: Any) -> CreditTransfer:
        """Create a credit transfer with defaults taken from ``config``."""
        return cls(
            schema=config.schema,
            debtor_account_currency=config.currency,
            is_international=config.international,
            charge_bearer=config.charge_bearer,
            **message,
        )

    @property
    def schema(self) -> SepaSchema | None:
        return self._schema

    @schema.setter
    def schema(self, value: SepaSchema | str) -> None:
        schema = resolve_schema(value)
        if not self.check_schema(schema):
            raise UnsupportedSchemaError(schema.value)
        self._schema = schema

    @property
    def debtor(self) -> IbanData | None:
        return self._debtor

    @debtor.setter
    def debtor(self, value: IbanData) -> None:
        if value is None:
            raise NullInputError("debtor")
        if not value.is_valid or value.unknown_bic:
            raise InvalidDebtorError("Debtor IBAN data are invalid.")
        self._debtor = copy.deepcopy(value)

    @property
    def transactions(self) -> tuple[CreditTransferTransaction, ...]:
        """Unbatched transactions."""
        return self.book.transactions

    @property
    def payments(self) -> tuple[PaymentBatch[CreditTransferTransaction], ...]:
        return self.book.batches

    @property
    def number_of_transactions(self) -> int:
        return self.book.number_of_transactions

    @property
    def control_sum(self) -> Decimal:
        return self.book.control_sum

    def check_schema(self, schema: SepaSchema) -> bool:
        return schema in SUPPORTED_SCHEMAS

    def check_mandatory_data(self) -> None:
        """Raise ``MandatoryFieldMissingError`` for the first missing field.

        Stored transactions are validated again afterwards.
        """
        self.message.check_mandatory(self._schema)
        if self._debtor is None:
            raise MandatoryFieldMissingError("debtor")
        self.book.validate()

    def add_credit_transfer(
        self,
        transfer: CreditTransferTransaction,
        requested_execution_date: date | None = None,
    ) -> None:
        """Add a copy of ``transfer``.

        With a ``requested_execution_date`` the transfer goes to the
        batch holding that date, created if needed.
        """
        self.book.add(transfer, requested_execution_date)

    def add_payment(self, payment: PaymentBatch[CreditTransferTransaction]) -> None:
        """Add a copy of an explicit payment batch."""
        self.book.add_batch(payment)

    def generate(self) -> etree._ElementTree:
        """Validate the document and build its XML tree."""
        self.check_mandatory_data()

        tree, cstmr_cdt_trf_initn = build_envelope(self._schema, MESSAGE_ELEMENT)
        build_group_header(
            cstmr_cdt_trf_initn,
            self.message,
            self.book.number_of_transactions,
            self.book.control_sum,
        )

        populations = self.book.populations()
        for population in populations:
            self._generate_payment_information(cstmr_cdt_trf_initn, population)

        logger.debug(
            "Generated %s message %s: %d payment block(s), %d transaction(s)",
            self._schema.value,
            self.message.message_id,
            len(populations),
            self.book.number_of_transactions,
            extra={
                "message_id": self.message.message_id,
                "schema": self._schema.value,
                "payment_blocks": len(populations),
                "transactions": self.book.number_of_transactions,
                "control_sum": format_amount(self.book.control_sum),
            },
        )
        return tree

    def to_xml_bytes(self, pretty_print: bool = False) -> bytes:
        return to_bytes(self.generate(), pretty_print=pretty_print)

    def to_xml_string(self, pretty_print: bool = False) -> str:
        return to_string(self.generate(), pretty_print=pretty_print)

    def _generate_payment_information(
        self, parent: etree._Element, population: Population[CreditTransferTransaction]
    ) -> etree._Element:
        pmt_inf = new_element(parent, "PmtInf")
        context = PaymentContext(self, population)
        for step in PAYMENT_INFORMATION_STEPS:
            step(context, pmt_inf)
        for transfer in population.transactions:
            cdt_trf_tx_inf = new_element(pmt_inf, "CdtTrfTxInf")
            for step in TRANSACTION_STEPS:
                step(context, transfer, cdt_trf_tx_inf)
        return pmt_inf


@dataclass(frozen=True)
class PaymentContext:
    """Document and population one ``PmtInf`` block is built from."""

    document: CreditTransfer
    population: Population[CreditTransferTransaction]

    @property
    def is_international(self) -> bool:
        return self.document.is_international

    @property
    def debtor(self) -> IbanData:
        return self.document.debtor

    @property
    def requested_execution_date(self) -> date:
        if self.population.batch is not None:
            return self.population.batch.requested_execution_date
        return self.document.message.requested_execution_date


# Payment information steps, in document order


def payment_identification(context: PaymentContext, pmt_inf: etree._Element) -> None:
    new_element(pmt_inf, "PmtInfId", context.document.message.resolve_payment_info_id(context.population.batch))
    new_element(pmt_inf, "PmtMtd", PaymentMethod.CREDIT_TRANSFER.value)
    new_element(pmt_inf, "NbOfTxs", context.population.number_of_transactions)
    new_element(pmt_inf, "CtrlSum", format_amount(context.population.control_sum))


def payment_type(context: PaymentContext, pmt_inf: etree._Element) -> None:
    message = context.document.message
    pmt_tp_inf = new_element(pmt_inf, "PmtTpInf")
    if context.is_international:
        new_element(pmt_tp_inf, "InstrPrty", "NORM")
    else:
        new_path(pmt_tp_inf, "SvcLvl/Cd", "SEPA")
    if message.local_instrument_code is not None:
        new_path(pmt_tp_inf, "LclInstr/Cd", message.local_instrument_code)
    if message.category_purpose_code is not None:
        new_path(pmt_tp_inf, "CtgyPurp/Cd", message.category_purpose_code)


def requested_execution_date(context: PaymentContext, pmt_inf: etree._Element) -> None:
    new_element(pmt_inf, "ReqdExctnDt", format_date(context.requested_execution_date))


def debtor(context: PaymentContext, pmt_inf: etree._Element) -> None:
    dbtr = new_element(pmt_inf, "Dbtr")
    new_element(dbtr, "Nm", context.debtor.name)
    if context.debtor.address is not None:
        add_postal_address(dbtr, context.debtor.address)
    if context.document.message.initiating_party_id is not None:
        add_organisation_id(dbtr, context.document.message.initiating_party_id)


def debtor_account(context: PaymentContext, pmt_inf: etree._Element) -> None:
    dbtr_acct = new_element(pmt_inf, "DbtrAcct")
    new_path(dbtr_acct, "Id/IBAN", context.debtor.iban)
    new_element(dbtr_acct, "Ccy", context.document.debtor_account_currency)


def debtor_agent(context: PaymentContext, pmt_inf: etree._Element) -> None:
    fin_instn_id = new_path(pmt_inf, "DbtrAgt/FinInstnId")
    new_element(fin_instn_id, "BIC", context.debtor.bic)
    if context.debtor.agent_address is not None:
        add_postal_address(fin_instn_id, context.debtor.agent_address)


def charge_bearer(context: PaymentContext, pmt_inf: etree._Element) -> None:
    # Domestic SEPA transfers always share charges
    if context.is_international:
        code = context.document.charge_bearer.value
    else:
        code = ChargeBearer.SLEV.value
    new_element(pmt_inf, "ChrgBr", code)


PAYMENT_INFORMATION_STEPS: tuple[Callable[[PaymentContext, etree._Element], None], ...] = (
    payment_identification,
    payment_type,
    requested_execution_date,
    debtor,
    debtor_account,
    debtor_agent,
    charge_bearer,
)


# Credit transfer transaction steps, in document order


def payment_id(context: PaymentContext, transfer: CreditTransferTransaction, tx: etree._Element) -> None:
    pmt_id = new_element(tx, "PmtId")
    if transfer.id is not None:
        new_element(pmt_id, "InstrId", transfer.id)
    new_element(pmt_id, "EndToEndId", transfer.end_to_end_id)


def amount(context: PaymentContext, transfer: CreditTransferTransaction, tx: etree._Element) -> None:
    new_element(new_element(tx, "Amt"), "InstdAmt", format_amount(transfer.amount), Ccy=transfer.currency)


def creditor_agent(context: PaymentContext, transfer: CreditTransferTransaction, tx: etree._Element) -> None:
    fin_instn_id = new_path(tx, "CdtrAgt/FinInstnId")
    if transfer.creditor.unknown_bic or not transfer.creditor.bic:
        new_path(fin_instn_id, "Othr/Id", NOT_PROVIDED)
    else:
        new_element(fin_instn_id, "BIC", transfer.creditor.bic)


def creditor(context: PaymentContext, transfer: CreditTransferTransaction, tx: etree._Element) -> None:
    cdtr = new_element(tx, "Cdtr")
    new_element(cdtr, "Nm", transfer.creditor.name)
    if transfer.creditor.address is not None:
        add_postal_address(cdtr, transfer.creditor.address)
    new_path(tx, "CdtrAcct/Id/IBAN", transfer.creditor.iban)


def instruction_for_creditor_agent(
    context: PaymentContext, transfer: CreditTransferTransaction, tx: etree._Element
) -> None:
    instruction = transfer.instruction_for_creditor
    if not context.is_international or instruction is None:
        return
    instr = new_element(tx, "InstrForCdtrAgt")
    new_element(instr, "Cd", instruction.code)
    if instruction.comment:
        new_element(instr, "InstrInf", instruction.comment)


def purpose(context: PaymentContext, transfer: CreditTransferTransaction, tx: etree._Element) -> None:
    if transfer.purpose:
        new_path(tx, "Purp/Cd", transfer.purpose)


def regulatory_reporting(context: PaymentContext, transfer: CreditTransferTransaction, tx: etree._Element) -> None:
    if context.is_international and transfer.regulatory_reporting_code:
        new_path(tx, "RgltryRptg/Dtls/Cd", transfer.regulatory_reporting_code)


def remittance_information(context: PaymentContext, transfer: CreditTransferTransaction, tx: etree._Element) -> None:
    if transfer.remittance_information:
        new_path(tx, "RmtInf/Ustrd", transfer.remittance_information)


TRANSACTION_STEPS: tuple[
    Callable[[PaymentContext, CreditTransferTransaction, etree._Element], None], ...
] = (
    payment_id,
    amount,
    creditor_agent,
    creditor,
    instruction_for_creditor_agent,
    purpose,
    regulatory_reporting,
    remittance_information,
)
