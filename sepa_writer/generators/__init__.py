"""Faker-backed sample data generators."""

from sepa_writer.generators.credit_transfer import CreditTransferGenerator, IbanDataGenerator

__all__ = ["CreditTransferGenerator", "IbanDataGenerator"]
