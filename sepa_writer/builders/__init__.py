"""XML element builders and formatting primitives."""

from sepa_writer.builders.element import (
    add_organisation_id,
    add_postal_address,
    new_document,
    new_element,
    new_path,
    to_bytes,
    to_string,
)
from sepa_writer.builders.formatting import format_amount, format_date, format_datetime

__all__ = [
    "add_organisation_id",
    "add_postal_address",
    "format_amount",
    "format_date",
    "format_datetime",
    "new_document",
    "new_element",
    "new_path",
    "to_bytes",
    "to_string",
]
