"""Merge raw contact entries into one record per person."""

import logging
from typing import Dict, Iterator, List

from .models import Contact, ContactSection, Person

logger = logging.getLogger(__name__)


def iter_contacts(sections: List[ContactSection]) -> Iterator[Contact]:
    """Yield every raw contact in source order (sections, blocks, contacts)."""
    for section in sections:
        for information in section.contact_information:
            yield from information.contacts


def person_key(contact: Contact) -> str:
    """Return the grouping key of a contact: trimmed, lower-cased "first last"."""
    return f"{contact.first_name.strip().lower()} {contact.last_name.strip().lower()}"


def has_full_name(contact: Contact) -> bool:
    return bool(contact.first_name.strip()) and bool(contact.last_name.strip())


def aggregate_contacts(sections: List[ContactSection]) -> List[Person]:
    """Group raw contacts by person and merge their phone numbers and emails.

    Contacts without both a first and a last name are skipped entirely. The others
    are grouped by `person_key`; groups keep the order in which their key was first
    seen. Names and job title come from the first contact of each group, phone
    numbers and emails are collected from all of them, in order and with
    duplicates.

    Args:
        sections: The contact sections of the report metadata.

    Returns:
        One `Person` per distinct key, in first-seen order. Empty if no contact
        has a full name.
    """
    groups: Dict[str, List[Contact]] = {}
    total = 0
    for contact in iter_contacts(sections):
        total += 1
        if not has_full_name(contact):
            continue
        groups.setdefault(person_key(contact), []).append(contact)

    persons = [_to_person(contacts) for contacts in groups.values()]
    logger.debug("Aggregated %d raw contacts into %d persons", total, len(persons))
    return persons


def _to_person(contacts: List[Contact]) -> Person:
    primary = contacts[0]
    return Person(
        family_name=primary.last_name,
        given_name=primary.first_name,
        display_name=f"{primary.first_name} {primary.last_name}",
        job_title=primary.title,
        phones=[c.phone_number for c in contacts if c.phone_number],
        emails=[c.email for c in contacts if c.email],
    )
