"""Tests for XML element builders and formatting primitives."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from lxml import etree

from sepa_writer.builders import (
    add_organisation_id,
    add_postal_address,
    format_amount,
    format_date,
    format_datetime,
    new_document,
    new_element,
    new_path,
    to_bytes,
    to_string,
)
from sepa_writer.models import PostalAddress

NS = "urn:iso:std:iso:20022:tech:xsd:pain.001.001.03"


def _local_names(element: etree._Element) -> list[str]:
    return [etree.QName(child).localname for child in element]


class TestFormatAmount:
    """Tests for format_amount."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (Decimal("100"), "100.00"),
            (Decimal("100.5"), "100.50"),
            (Decimal("0.005"), "0.01"),
            (Decimal("1234567.891"), "1234567.89"),
            (Decimal("1E+3"), "1000.00"),
        ],
    )
    def test_two_decimals(self, amount: Decimal, expected: str) -> None:
        assert format_amount(amount) == expected

    def test_accepts_int(self) -> None:
        assert format_amount(30) == "30.00"


class TestFormatDates:
    """Tests for date and date-time formatting."""

    def test_format_date(self) -> None:
        assert format_date(date(2024, 3, 5)) == "2024-03-05"

    def test_format_date_truncates_datetime(self) -> None:
        assert format_date(datetime(2024, 3, 5, 23, 59)) == "2024-03-05"

    def test_format_datetime_with_offset(self) -> None:
        value = datetime(2024, 3, 15, 10, 30, 15, 123456, tzinfo=timezone(timedelta(hours=1)))
        assert format_datetime(value) == "2024-03-15T10:30:15+01:00"

    def test_format_datetime_utc(self) -> None:
        value = datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)
        assert format_datetime(value) == "2024-03-15T10:30:00+00:00"

    def test_naive_datetime_gets_local_offset(self) -> None:
        formatted = format_datetime(datetime(2024, 3, 15, 10, 30))
        assert formatted.startswith("2024-03-15T10:30:00")
        assert formatted[19] in "+-"


class TestElementBuilder:
    """Tests for element creation helpers."""

    def test_new_document_namespaces(self) -> None:
        tree = new_document(NS)
        root = tree.getroot()

        assert root.tag == f"{{{NS}}}Document"
        assert root.nsmap[None] == NS
        assert root.nsmap["xsi"] == "http://www.w3.org/2001/XMLSchema-instance"

    def test_new_element_inherits_namespace(self) -> None:
        root = new_document(NS).getroot()
        child = new_element(root, "MsgId", "MSG-1")

        assert child.tag == f"{{{NS}}}MsgId"
        assert child.text == "MSG-1"

    def test_new_element_without_namespace(self) -> None:
        root = etree.Element("Root")
        assert new_element(root, "Child").tag == "Child"

    def test_new_element_text_and_attributes(self) -> None:
        root = new_document(NS).getroot()
        child = new_element(root, "InstdAmt", "10.00", Ccy="EUR")
        empty = new_element(root, "Empty")

        assert child.get("Ccy") == "EUR"
        assert new_element(root, "NbOfTxs", 3).text == "3"
        assert empty.text is None

    def test_new_path(self) -> None:
        root = new_document(NS).getroot()
        leaf = new_path(root, "SvcLvl/Cd", "SEPA")

        assert leaf.text == "SEPA"
        assert root.findtext("p:SvcLvl/p:Cd", namespaces={"p": NS}) == "SEPA"

    def test_add_organisation_id(self) -> None:
        root = new_document(NS).getroot()
        add_organisation_id(root, "ORG-42")

        assert root.findtext("p:Id/p:OrgId/p:Othr/p:Id", namespaces={"p": NS}) == "ORG-42"

    def test_add_postal_address_order(self) -> None:
        root = new_document(NS).getroot()
        address = PostalAddress(
            country="FR",
            town_name="Paris",
            street_name="Rue de la Paix",
            building_number="1",
            postal_code="75002",
            address_type="ADDR",
            address_lines=["Line 1", "Line 2", "Line 3"],
        )

        pstl_adr = add_postal_address(root, address)

        assert etree.QName(pstl_adr).localname == "PstlAdr"
        assert _local_names(pstl_adr) == [
            "AdrTp",
            "StrtNm",
            "BldgNb",
            "PstCd",
            "TwnNm",
            "Ctry",
            "AdrLine",
            "AdrLine",
        ]

    def test_add_postal_address_skips_unset(self) -> None:
        root = new_document(NS).getroot()
        pstl_adr = add_postal_address(root, PostalAddress(country="DE"))

        assert _local_names(pstl_adr) == ["Ctry"]


class TestSerialization:
    """Tests for to_bytes and to_string."""

    def test_declaration_and_namespace(self) -> None:
        tree = new_document(NS)
        new_element(tree.getroot(), "CstmrCdtTrfInitn")

        output = to_bytes(tree)

        assert output.startswith(b"<?xml version='1.0' encoding='UTF-8' standalone='yes'?>")
        assert f'xmlns="{NS}"'.encode() in output
        assert b"<CstmrCdtTrfInitn/>" in output

    def test_to_string_keeps_non_ascii(self) -> None:
        tree = new_document(NS)
        new_element(tree.getroot(), "Nm", "Société Générale")

        assert "Société Générale" in to_string(tree)

    def test_pretty_print(self) -> None:
        tree = new_document(NS)
        new_element(tree.getroot(), "GrpHdr")

        assert "\n  <GrpHdr/>" in to_string(tree, pretty_print=True)
