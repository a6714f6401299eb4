"""Core data models for publication conversion."""

from .document import (
    Contact,
    ContactInformation,
    ContactSection,
    ReportMetadata,
    PublicationDocument,
)
from .published_item import (
    Person,
    PersonGroup,
    PublishedItemContactInformation,
    PublishedItem,
)
from .results import (
    ValidationResult,
    ConversionSuccess,
    ConversionFailure,
    ConversionResult,
)
from .validators import to_str, to_list, to_datetime, match_field_names

__all__ = [
    "Contact",
    "ContactInformation",
    "ContactSection",
    "ReportMetadata",
    "PublicationDocument",
    "Person",
    "PersonGroup",
    "PublishedItemContactInformation",
    "PublishedItem",
    "ValidationResult",
    "ConversionSuccess",
    "ConversionFailure",
    "ConversionResult",
    "to_str",
    "to_list",
    "to_datetime",
    "match_field_names",
]
