"""Publication XML - converts publication records into PublishedItem XML."""

from .config import Settings, XmlOutputSettings, load_settings
from .core.models import (
    PublicationDocument,
    Person,
    PublishedItem,
    ConversionSuccess,
    ConversionFailure,
    ConversionResult,
)
from .core.parsers import PublishedItemParser
from .core.validation import validate
from .core.aggregation import aggregate_contacts
from .core.mapping import map_to_published_item
from .pipelines.conversion import (
    XmlConversionService,
    convert,
    convert_json,
    convert_file,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "XmlOutputSettings",
    "load_settings",
    "PublicationDocument",
    "Person",
    "PublishedItem",
    "ConversionSuccess",
    "ConversionFailure",
    "ConversionResult",
    "PublishedItemParser",
    "validate",
    "aggregate_contacts",
    "map_to_published_item",
    "XmlConversionService",
    "convert",
    "convert_json",
    "convert_file",
]
