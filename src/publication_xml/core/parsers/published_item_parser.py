"""PublishedItem XML reader and writer."""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Dict, Literal, Optional

from lxml import etree

from ..models import (
    Person,
    PersonGroup,
    PublishedItem,
    PublishedItemContactInformation,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_NAMESPACES = {
    "xsi": "http://www.w3.org/2001/XMLSchema-instance",
    "xsd": "http://www.w3.org/2001/XMLSchema",
}
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
INDENT = "    "

# lxml writes empty elements as <Tag/>; consumers expect <Tag />.
_EMPTY_ELEMENT = re.compile(r"<([^<>/\s]+)([^<>]*?)/>")


class PublishedItemParser:
    """Read and write ``PublishedItem`` XML documents.

    The element order is fixed::

        <PublishedItem>
            <Title/> <Countries/> <PublishedDate/>
            <ContactInformation>
                <PersonGroup sequence="1">
                    <Name/>
                    <PersonGroupMember>
                        <Person>
                            <FamilyName/> <GivenName/> <DisplayName/> <JobTitle/>
                            <ContactInfo>
                                <Phone><Number/></Phone>...
                                <Email><Address/></Email>...
                            </ContactInfo>
                        </Person>
                        ...

    Args:
        namespaces: Namespace declarations put on the root element. By default,
            the ``xsi`` and ``xsd`` prefixes; `None` declares no namespaces.
        newline: Line break used between lines of pretty printed output.
    """

    def __init__(
        self,
        namespaces: Optional[Dict[str, str] | Literal["default"]] = "default",
        newline: Literal["\n", "\r\n"] = "\n",
    ):
        self._namespaces = namespaces
        if namespaces == "default":
            self._namespaces = DEFAULT_NAMESPACES
        self._newline = newline

    def to_xml(
        self,
        item: PublishedItem,
        file_path: Optional[str | Path] = None,
        pretty_print: bool = True,
    ) -> str:
        """Render a `PublishedItem` as XML text.

        Args:
            item: The document to render.
            file_path: Optional file path to also save the XML to.
            pretty_print: Indent with four spaces, one element per line?

        Returns:
            The XML string, starting with the XML declaration.
        """
        root = etree.Element("PublishedItem", nsmap=self._namespaces)
        _append_text(root, "Title", item.title)
        _append_text(root, "Countries", item.countries)
        _append_text(root, "PublishedDate", format_timestamp(item.published_date))

        contact_information = etree.SubElement(root, "ContactInformation")
        group = item.contact_information.person_group
        person_group = etree.SubElement(contact_information, "PersonGroup")
        person_group.set("sequence", str(group.sequence))
        _append_text(person_group, "Name", group.name)

        # Always present, even without members.
        members = etree.SubElement(person_group, "PersonGroupMember")
        for person in group.members:
            _append_person(members, person)

        if pretty_print:
            etree.indent(root, space=INDENT)
        body = etree.tostring(root, encoding="unicode")
        body = _EMPTY_ELEMENT.sub(r"<\1\2 />", body)

        if pretty_print:
            xml_str = (XML_DECLARATION + "\n" + body).replace("\n", self._newline)
        else:
            xml_str = XML_DECLARATION + body

        if file_path is not None:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            # newline="" keeps the configured line breaks as they are.
            with open(file_path, "w", encoding="utf-8", newline="") as f:
                f.write(xml_str)
            _LOGGER.debug("Wrote PublishedItem XML to %s", file_path)
        return xml_str

    def from_xml(
        self,
        xml_str: Optional[str | bytes] = None,
        file_path: Optional[str | Path] = None,
    ) -> PublishedItem:
        """Parse ``PublishedItem`` XML back into the output model.

        Args:
            xml_str: XML string to parse.
            file_path: Path to an XML file, used when `xml_str` is not given.

        Returns:
            The parsed `PublishedItem`.

        Raises:
            ValueError: If no source is given or the root is not ``PublishedItem``.
        """
        if xml_str is not None:
            if isinstance(xml_str, str):
                # lxml refuses str input that carries an encoding declaration
                xml_str = xml_str.encode("utf-8")
            root = etree.fromstring(xml_str)
        elif file_path is not None:
            root = etree.parse(str(file_path)).getroot()
        else:
            raise ValueError("Either xml_str or file_path must be provided")

        tag = etree.QName(root).localname
        if tag != "PublishedItem":
            raise ValueError(f"Can only process 'PublishedItem' documents, but got '{tag}'")

        person_group = root.find("ContactInformation/PersonGroup")
        if person_group is None:
            _LOGGER.debug("PublishedItem without a PersonGroup")
            group = PersonGroup()
        else:
            group = PersonGroup(
                sequence=int(person_group.get("sequence", "1")),
                name=person_group.findtext("Name") or "",
                members=[
                    self._to_person(person)
                    for person in person_group.findall("PersonGroupMember/Person")
                ],
            )

        published_date = root.findtext("PublishedDate")
        return PublishedItem(
            title=root.findtext("Title") or "",
            countries=root.findtext("Countries") or "",
            published_date=datetime.fromisoformat(published_date)
            if published_date
            else datetime.min,
            contact_information=PublishedItemContactInformation(person_group=group),
        )

    def _to_person(self, person: etree._Element) -> Person:
        return Person(
            family_name=person.findtext("FamilyName") or "",
            given_name=person.findtext("GivenName") or "",
            display_name=person.findtext("DisplayName") or "",
            job_title=person.findtext("JobTitle") or "",
            phones=[n.text or "" for n in person.findall("ContactInfo/Phone/Number")],
            emails=[a.text or "" for a in person.findall("ContactInfo/Email/Address")],
        )


def format_timestamp(value: datetime) -> str:
    """Format a date-time as ISO-8601, e.g. ``2024-06-15T00:00:00``."""
    return value.isoformat()


def _append_text(parent: etree._Element, tag: str, text: str) -> etree._Element:
    """Append a child element; empty text leaves the element empty."""
    el = etree.SubElement(parent, tag)
    if text:
        el.text = text
    return el


def _append_person(parent: etree._Element, person: Person) -> None:
    el = etree.SubElement(parent, "Person")
    _append_text(el, "FamilyName", person.family_name)
    _append_text(el, "GivenName", person.given_name)
    _append_text(el, "DisplayName", person.display_name)
    _append_text(el, "JobTitle", person.job_title)

    contact_info = etree.SubElement(el, "ContactInfo")
    for number in person.phones:
        phone = etree.SubElement(contact_info, "Phone")
        _append_text(phone, "Number", number)
    for address in person.emails:
        email = etree.SubElement(contact_info, "Email")
        _append_text(email, "Address", address)
