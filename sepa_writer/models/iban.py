"""IBAN data model: a party name with its account and bank identifiers."""

import re
from dataclasses import dataclass

from sepa_writer.models.base import PostalAddress

IBAN_PATTERN = re.compile(r"^[A-Z]{2}[0-9]{2}[A-Z0-9]{10,30}$")
BIC_PATTERN = re.compile(r"^[A-Z]{6}[A-Z0-9]{2}([A-Z0-9]{3})?$")


def normalize_iban(value: str | None) -> str | None:
    """Strip spaces and upper-case an IBAN."""
    if value is None:
        return None
    return re.sub(r"\s+", "", value).upper()


def is_valid_iban(iban: str | None) -> bool:
    """Check IBAN structure and its ISO 7064 mod 97-10 check digits."""
    if not iban or not IBAN_PATTERN.match(iban):
        return False
    rearranged = iban[4:] + iban[:4]
    digits = "".join(str(int(char, 36)) for char in rearranged)
    return int(digits) % 97 == 1


def is_valid_bic(bic: str | None) -> bool:
    """Check BIC8/BIC11 structure."""
    return bool(bic) and BIC_PATTERN.match(bic) is not None


@dataclass
class IbanData:
    """Account identity of a debtor or a creditor.

    ``unknown_bic`` marks a party whose bank identifier is not provided;
    such a party is valid as a creditor but never as a debtor.
    """

    name: str | None = None
    iban: str | None = None
    bic: str | None = None
    unknown_bic: bool = False
    address: PostalAddress | None = None
    agent_address: PostalAddress | None = None

    def __post_init__(self) -> None:
        self.iban = normalize_iban(self.iban)
        if self.bic is not None:
            self.bic = self.bic.strip().upper()

    @property
    def is_valid(self) -> bool:
        """Whether name, IBAN and BIC (unless unknown) are structurally valid."""
        if not self.name or not is_valid_iban(self.iban):
            return False
        if self.unknown_bic:
            return True
        return is_valid_bic(self.bic)

    @property
    def country(self) -> str | None:
        """Country code carried by the IBAN."""
        return self.iban[:2] if self.iban else None
