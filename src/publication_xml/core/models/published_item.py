"""Output data models for the ``PublishedItem`` XML document."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class Person(BaseModel):
    """A deduplicated person, merged from every raw contact sharing a name key.

    Names are copied verbatim from the first contact seen for the key, so they
    may carry the original casing and surrounding whitespace.
    """

    family_name: str = Field("", description="Last name of the first matching contact.")
    given_name: str = Field("", description="First name of the first matching contact.")
    display_name: str = Field("", description="'{given_name} {family_name}'.")
    job_title: str = Field("", description="Title of the first matching contact.")
    phones: List[str] = Field(
        default_factory=list,
        description="Every non-empty phone number of the group, in source order, duplicates kept.",
    )
    emails: List[str] = Field(
        default_factory=list,
        description="Every non-empty email address of the group, in source order, duplicates kept.",
    )


class PersonGroup(BaseModel):
    sequence: int = 1
    name: str = ""
    members: List[Person] = Field(default_factory=list)


class PublishedItemContactInformation(BaseModel):
    person_group: PersonGroup = Field(default_factory=PersonGroup)


class PublishedItem(BaseModel):
    """The document shape rendered as ``<PublishedItem>``."""

    title: str = ""
    countries: str = Field("", description="Comma-joined country codes, exactly as received.")
    published_date: datetime = datetime.min
    contact_information: PublishedItemContactInformation = Field(
        default_factory=PublishedItemContactInformation
    )

    @property
    def persons(self) -> List[Person]:
        return self.contact_information.person_group.members
