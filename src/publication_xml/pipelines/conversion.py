"""Pipeline converting publication records into PublishedItem XML."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from publication_xml.config import Settings
from publication_xml.core.aggregation import aggregate_contacts
from publication_xml.core.mapping import map_to_published_item
from publication_xml.core.models import (
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    PublicationDocument,
)
from publication_xml.core.parsers import PublishedItemParser
from publication_xml.core.validation import validate

logger = logging.getLogger(__name__)

CONVERSION_ERROR_MESSAGE = "An error occurred during XML conversion."
EMPTY_FILE_MESSAGE = "No file provided or file is empty."
NOT_JSON_FILE_MESSAGE = "File must be a JSON file."
INVALID_JSON_MESSAGE = "Invalid JSON format in the uploaded file."
FILE_CONVERSION_ERROR_MESSAGE = "An unexpected error occurred during file conversion."


class XmlConversionService:
    """Validate a publication record and render it as PublishedItem XML.

    Args:
        settings: Cutoff date and XML output settings. Read only.
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._parser = PublishedItemParser(newline=settings.xml_output.newline)

    @property
    def settings(self) -> Settings:
        return self._settings

    def convert(self, document: PublicationDocument) -> ConversionResult:
        """Convert a record to XML.

        Business rule violations come back as a `ConversionFailure` carrying the
        rule's message. Any other error is logged and reported with a generic
        message only.
        """
        logger.info("Starting XML conversion for document ID: %s", document.id)
        try:
            validation = validate(document, self._settings.cutoff_date)
            if not validation.is_valid:
                logger.warning(
                    "XML conversion failed for document ID: %s. Error: %s",
                    document.id,
                    validation.error_message,
                )
                return ConversionFailure(error_message=validation.error_message)

            persons = aggregate_contacts(document.report_metadata.contact_section)
            item = map_to_published_item(document, persons, self._settings.xml_output)
            xml_content = self._parser.to_xml(item)
        except Exception:
            logger.exception("Error during XML conversion for document ID: %s", document.id)
            return ConversionFailure(error_message=CONVERSION_ERROR_MESSAGE)

        logger.info("XML conversion completed successfully for document ID: %s", document.id)
        return ConversionSuccess(xml_content=xml_content)


def convert(document: PublicationDocument, settings: Settings) -> ConversionResult:
    """Convert a publication record to PublishedItem XML."""
    return XmlConversionService(settings).convert(document)


def convert_json(
    payload: str | bytes | Dict[str, Any], settings: Settings
) -> ConversionResult:
    """Deserialize a JSON record (text or already decoded object) and convert it.

    Raises:
        pydantic.ValidationError: If the payload is not a valid record.
    """
    if isinstance(payload, dict):
        document = PublicationDocument.from_dict(payload)
    else:
        document = PublicationDocument.from_json(payload)
    return convert(document, settings)


def converted_file_name(path: str | Path) -> str:
    """Name of the XML file written for a JSON input, e.g. ``report_converted.xml``."""
    return f"{Path(path).stem}_converted.xml"


def read_document(path: str | Path) -> PublicationDocument:
    """Read one publication record from a JSON file. A UTF-8 BOM is allowed.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not a JSON object holding a valid record
            (`json.JSONDecodeError`, `UnicodeDecodeError` and pydantic's
            `ValidationError` are all ValueErrors).
    """
    data = json.loads(Path(path).read_text(encoding="utf-8-sig"))
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object")
    return PublicationDocument.from_dict(data)


def convert_file(
    path: str | Path,
    settings: Settings,
    output_dir: Optional[str | Path] = None,
) -> ConversionResult:
    """Convert a JSON file holding one publication record.

    Args:
        path: The JSON file.
        settings: Conversion settings.
        output_dir: If given, a successful result is also written there as
            `converted_file_name(path)`.

    Returns:
        The conversion result. Unreadable input is reported as a failure, and
        any other error is logged and reported with a generic message.
    """
    path = Path(path)
    try:
        return _convert_file(path, settings, output_dir)
    except Exception:
        logger.exception("Unexpected error during XML file conversion for file: %s", path.name)
        return ConversionFailure(error_message=FILE_CONVERSION_ERROR_MESSAGE)


def _convert_file(
    path: Path, settings: Settings, output_dir: Optional[str | Path]
) -> ConversionResult:
    if not path.is_file() or path.stat().st_size == 0:
        return ConversionFailure(error_message=EMPTY_FILE_MESSAGE)
    if path.suffix.lower() != ".json":
        return ConversionFailure(error_message=NOT_JSON_FILE_MESSAGE)

    logger.info("Starting XML file conversion for file: %s", path.name)
    try:
        document = read_document(path)
    except (ValueError, ValidationError) as e:
        logger.warning("Could not read publication record from %s: %s", path.name, e)
        return ConversionFailure(error_message=INVALID_JSON_MESSAGE)

    result = convert(document, settings)
    if not result.success:
        return result

    if output_dir is not None:
        output_path = Path(output_dir) / converted_file_name(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(result.xml_content)
        logger.info("Converted XML saved to: %s", output_path)

    logger.info("XML file conversion completed successfully for file: %s", path.name)
    return result
