"""Sample debtors, creditors and credit transfers."""

from datetime import date
from decimal import Decimal
from typing import Iterator

from sepa_writer.generators.base import BaseGenerator
from sepa_writer.models import (
    CreditTransferTransaction,
    IbanData,
    InstructionForCreditor,
    PaymentBatch,
    PostalAddress,
)

PURPOSE_CODES = ["SUPP", "SALA", "TAXS", "RENT", "TRAD", "GDDS"]
REGULATORY_REPORTING_CODES = ["150", "101", "999"]


class IbanDataGenerator(BaseGenerator):
    """Generate structurally valid parties."""

    def generate(self, with_address: bool = True) -> IbanData:
        """Generate a party with a valid IBAN and an 11 character BIC."""
        return IbanData(
            name=self.fake.company()[:70],
            iban=self.fake.iban(),
            bic=self.fake.swift11(),
            address=self._address() if with_address else None,
        )

    def _address(self) -> PostalAddress:
        return PostalAddress(
            street_name=self.fake.street_name(),
            building_number=self.fake.building_number(),
            postal_code=self.fake.postcode(),
            town_name=self.fake.city(),
            country=self.fake.current_country_code(),
        )


class CreditTransferGenerator(BaseGenerator):
    """Generate credit transfer transactions and batches.

    Amounts are between ``min_amount`` and ``max_amount`` with two
    decimals. About a third of the transactions carry a purpose code.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "fr_FR",
        min_amount: Decimal = Decimal("1.00"),
        max_amount: Decimal = Decimal("5000.00"),
    ) -> None:
        super().__init__(seed, locale)
        self.min_amount = min_amount
        self.max_amount = max_amount
        self.parties = IbanDataGenerator(seed, locale)
        self._sequence = 0

    def generate(self, international: bool = False) -> CreditTransferTransaction:
        """Generate a single transaction.

        Parameters
        ----------
        international : bool
            Also fill the international-only fields (creditor agent
            instruction and regulatory reporting code).
        """
        self._sequence += 1
        cents = self.random.randint(int(self.min_amount * 100), int(self.max_amount * 100))

        transaction = CreditTransferTransaction(
            id=f"INSTR-{self._sequence:06d}",
            end_to_end_id=self.fake.bothify("E2E-????-########").upper(),
            amount=Decimal(cents) / 100,
            creditor=self.parties.generate(with_address=self.random.random() < 0.5),
            remittance_information=self.fake.sentence(nb_words=6)[:140],
        )
        if self.random.random() < 0.33:
            transaction.purpose = self.random.choice(PURPOSE_CODES)
        if international:
            transaction.instruction_for_creditor = InstructionForCreditor(code="PHOB", comment=self.fake.phone_number())
            transaction.regulatory_reporting_code = self.random.choice(REGULATORY_REPORTING_CODES)
        return transaction

    def generate_many(self, count: int, international: bool = False) -> Iterator[CreditTransferTransaction]:
        for _ in range(count):
            yield self.generate(international)

    def generate_batch(
        self,
        count: int,
        requested_execution_date: date,
        international: bool = False,
    ) -> PaymentBatch[CreditTransferTransaction]:
        """Generate a batch of ``count`` transactions for one execution date."""
        batch: PaymentBatch[CreditTransferTransaction] = PaymentBatch(requested_execution_date)
        for transaction in self.generate_many(count, international):
            batch.add_transaction(transaction)
        return batch
