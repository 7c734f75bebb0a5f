"""Base models shared across SEPA documents."""

from dataclasses import dataclass, field


@dataclass
class PostalAddress:
    """Postal address of a party or a financial institution.

    Every field is optional. Fields map to the ISO 20022
    ``PostalAddress6`` components:

    - address_type: ``AdrTp`` code (ADDR, PBOX, HOME, BIZZ, MLTO, DLVY)
    - country: ISO 3166-1 alpha-2 code
    - address_lines: free-form lines, at most two are emitted
    """

    address_type: str | None = None
    department: str | None = None
    sub_department: str | None = None
    street_name: str | None = None
    building_number: str | None = None
    postal_code: str | None = None
    town_name: str | None = None
    country_sub_division: str | None = None
    country: str | None = None
    address_lines: list[str] = field(default_factory=list)

    MAX_ADDRESS_LINES = 2
