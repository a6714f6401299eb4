"""Map a validated publication record onto the ``PublishedItem`` model."""

from typing import List

from ..config import XmlOutputSettings
from .models import (
    Person,
    PersonGroup,
    PublicationDocument,
    PublishedItem,
    PublishedItemContactInformation,
)


def map_to_published_item(
    document: PublicationDocument,
    persons: List[Person],
    group_settings: XmlOutputSettings,
) -> PublishedItem:
    """Build the output document. Country codes are joined with "," as given."""
    return PublishedItem(
        title=document.title,
        countries=",".join(document.country_ids),
        published_date=document.publish_date,
        contact_information=PublishedItemContactInformation(
            person_group=PersonGroup(
                sequence=group_settings.person_group_sequence,
                name=group_settings.person_group_name,
                members=list(persons),
            )
        ),
    )
