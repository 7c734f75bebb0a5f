"""lxml element building and serialization for ISO 20022 documents."""

from __future__ import annotations

from lxml import etree

from sepa_writer.models.base import PostalAddress

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"


def new_element(
    parent: etree._Element,
    name: str,
    text: object | None = None,
    **attrib: str,
) -> etree._Element:
    """Append a child named ``name`` to ``parent``, in the parent's namespace."""
    namespace = etree.QName(parent).namespace
    tag = f"{{{namespace}}}{name}" if namespace else name
    element = etree.SubElement(parent, tag, attrib)
    if text is not None:
        element.text = str(text)
    return element


def new_path(parent: etree._Element, path: str, text: object | None = None) -> etree._Element:
    """Append a chain of nested children, e.g. ``"Id/OrgId/Othr/Id"``.

    ``text`` goes on the innermost element, which is returned.
    """
    names = path.split("/")
    element = parent
    for name in names[:-1]:
        element = new_element(element, name)
    return new_element(element, names[-1], text)


def new_document(namespace: str) -> etree._ElementTree:
    """Create a ``Document`` root with default and ``xsi`` namespaces."""
    root = etree.Element(
        f"{{{namespace}}}Document",
        nsmap={None: namespace, "xsi": XSI_NAMESPACE},
    )
    return etree.ElementTree(root)


def add_postal_address(parent: etree._Element, address: PostalAddress) -> etree._Element:
    """Append a ``PstlAdr`` block with the address fields that are set."""
    pstl_adr = new_element(parent, "PstlAdr")
    fields = (
        ("AdrTp", address.address_type),
        ("Dept", address.department),
        ("SubDept", address.sub_department),
        ("StrtNm", address.street_name),
        ("BldgNb", address.building_number),
        ("PstCd", address.postal_code),
        ("TwnNm", address.town_name),
        ("CtrySubDvsn", address.country_sub_division),
        ("Ctry", address.country),
    )
    for name, value in fields:
        if value:
            new_element(pstl_adr, name, value)
    for line in address.address_lines[: PostalAddress.MAX_ADDRESS_LINES]:
        new_element(pstl_adr, "AdrLine", line)
    return pstl_adr


def add_organisation_id(parent: etree._Element, identifier: str) -> etree._Element:
    """Append an organisation identifier as ``Id/OrgId/Othr/Id``."""
    return new_path(parent, "Id/OrgId/Othr/Id", identifier)


def to_bytes(tree: etree._ElementTree, pretty_print: bool = False) -> bytes:
    """Serialize to UTF-8 bytes with a standalone XML declaration."""
    return etree.tostring(
        tree,
        xml_declaration=True,
        encoding="UTF-8",
        standalone=True,
        pretty_print=pretty_print,
    )


def to_string(tree: etree._ElementTree, pretty_print: bool = False) -> str:
    """Serialize to a unicode string, declaration included."""
    return to_bytes(tree, pretty_print=pretty_print).decode("utf-8")
