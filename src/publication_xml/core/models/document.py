"""Input data models for publication records.

The JSON wire format uses PascalCase field names (``FirstName``, ``PublishDate``);
they are declared as aliases and matched case-insensitively, while the Python
attribute names stay snake_case.
"""

from datetime import datetime
from typing import Annotated, Any, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from .validators import match_field_names, to_datetime, to_list, to_str

Text = Annotated[str, BeforeValidator(to_str)]


class _RecordModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        return match_field_names(cls, data)


class Contact(_RecordModel):
    """One contact channel for one mention of a person, not yet deduplicated."""

    first_name: Text = Field("", alias="FirstName")
    last_name: Text = Field("", alias="LastName")
    email: Text = Field("", alias="Email")
    title: Text = Field("", alias="Title", description="Job title or role of the person.")
    phone_number: Text = Field("", alias="PhoneNumber")
    accreditation: Text = Field("", alias="Accreditation")


class ContactInformation(_RecordModel):
    contact_header: Text = Field("", alias="ContactHeader")
    contacts: Annotated[List[Contact], BeforeValidator(to_list)] = Field(
        default_factory=list, alias="Contacts"
    )


class ContactSection(_RecordModel):
    contact_information: Annotated[
        List[ContactInformation], BeforeValidator(to_list)
    ] = Field(default_factory=list, alias="ContactInformation")


class ReportMetadata(_RecordModel):
    title: Text = Field("", alias="Title")
    contact_section: Annotated[List[ContactSection], BeforeValidator(to_list)] = Field(
        default_factory=list, alias="ContactSection"
    )


class PublicationDocument(_RecordModel):
    """A document-publication record as received from the publishing system."""

    id: Text = Field("", alias="Id")
    title: Text = Field("", alias="Title")
    country_ids: Annotated[List[Text], BeforeValidator(to_list)] = Field(
        default_factory=list,
        alias="CountryIds",
        description="Country codes in source order. Duplicates are kept.",
    )
    publish_date: Annotated[datetime, BeforeValidator(to_datetime)] = Field(
        datetime.min, alias="PublishDate"
    )
    status: int = Field(0, alias="Status")
    test_run: bool = Field(False, alias="TestRun")
    report_metadata: ReportMetadata = Field(
        default_factory=ReportMetadata, alias="ReportMetadata"
    )

    @classmethod
    def from_dict(cls, data: dict) -> "PublicationDocument":
        """Create a PublicationDocument from a parsed JSON object."""
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, json_str: str | bytes) -> "PublicationDocument":
        """Create a PublicationDocument from JSON text."""
        return cls.model_validate_json(json_str)
