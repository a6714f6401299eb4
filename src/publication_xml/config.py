"""Settings for the conversion pipeline.

Values come from ``PUBLICATION_XML_*`` environment variables (nested fields use
``__``, e.g. ``PUBLICATION_XML_XML_OUTPUT__PERSON_GROUP_NAME``), an optional
``.env`` file, and an optional JSON settings file passed to `load_settings`.
Settings are frozen once built and passed explicitly to the pipeline.
"""

import json
from datetime import date
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PERSON_GROUP_SEQUENCE = 1
DEFAULT_PERSON_GROUP_NAME = "Analytical Contacts"


class XmlOutputSettings(BaseModel):
    """Formatting of the ``PublishedItem`` XML output."""

    model_config = ConfigDict(frozen=True)

    person_group_sequence: int = Field(
        DEFAULT_PERSON_GROUP_SEQUENCE,
        description="The sequence attribute of the person group.",
    )
    person_group_name: str = Field(
        DEFAULT_PERSON_GROUP_NAME,
        description="The name of the person group.",
    )
    newline: Literal["\n", "\r\n"] = Field(
        "\n", description="Line break written between XML lines."
    )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PUBLICATION_XML_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    cutoff_date: date = Field(
        ..., description="Publish dates before this day fail validation."
    )
    xml_output: XmlOutputSettings = Field(default_factory=XmlOutputSettings)


def load_settings(
    config_file: Optional[str | Path] = None, **overrides: Any
) -> Settings:
    """Build the settings from the environment, a JSON file and explicit overrides.

    Later sources win: environment < JSON file < `overrides`. `None` overrides are
    ignored, and an ``xml_output`` override dict is merged key by key into the
    file's ``xml_output`` section.

    Raises:
        pydantic.ValidationError: If a value is invalid or `cutoff_date` is missing.
    """
    values: dict = {}
    if config_file is not None:
        values = json.loads(Path(config_file).read_text(encoding="utf-8"))

    for key, value in overrides.items():
        if value is None:
            continue
        if key == "xml_output" and isinstance(value, dict):
            merged = dict(values.get("xml_output") or {})
            merged.update({k: v for k, v in value.items() if v is not None})
            values["xml_output"] = merged
        else:
            values[key] = value

    return Settings(**values)
