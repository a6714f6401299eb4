"""Tests for settings loading."""

import json
from datetime import date

import pytest
from pydantic import ValidationError

from publication_xml.config import Settings, XmlOutputSettings, load_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    for name in (
        "PUBLICATION_XML_CUTOFF_DATE",
        "PUBLICATION_XML_XML_OUTPUT__PERSON_GROUP_NAME",
        "PUBLICATION_XML_XML_OUTPUT__PERSON_GROUP_SEQUENCE",
    ):
        monkeypatch.delenv(name, raising=False)
    # keep a stray .env in the working directory out of the tests
    monkeypatch.chdir(tmp_path)


class TestXmlOutputSettings:
    def test_defaults(self):
        output = XmlOutputSettings()

        assert output.person_group_sequence == 1
        assert output.person_group_name == "Analytical Contacts"
        assert output.newline == "\n"

    def test_rejects_other_newlines(self):
        with pytest.raises(ValidationError):
            XmlOutputSettings(newline="\r")


class TestSettings:
    def test_cutoff_date_required(self):
        with pytest.raises(ValidationError):
            Settings()

    def test_frozen(self):
        settings = Settings(cutoff_date=date(2024, 1, 1))

        with pytest.raises(ValidationError):
            settings.cutoff_date = date(2025, 1, 1)

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("PUBLICATION_XML_CUTOFF_DATE", "2024-03-01")
        monkeypatch.setenv("PUBLICATION_XML_XML_OUTPUT__PERSON_GROUP_NAME", "Desk Contacts")

        settings = load_settings()

        assert settings.cutoff_date == date(2024, 3, 1)
        assert settings.xml_output.person_group_name == "Desk Contacts"
        assert settings.xml_output.person_group_sequence == 1


class TestLoadSettings:
    def test_json_file(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text(
            json.dumps({"cutoff_date": "2024-02-01", "xml_output": {"person_group_sequence": 5}})
        )

        settings = load_settings(config_file)

        assert settings.cutoff_date == date(2024, 2, 1)
        assert settings.xml_output.person_group_sequence == 5
        assert settings.xml_output.person_group_name == "Analytical Contacts"

    def test_overrides_win(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PUBLICATION_XML_CUTOFF_DATE", "2020-01-01")
        config_file = tmp_path / "settings.json"
        config_file.write_text(
            json.dumps({"cutoff_date": "2024-02-01", "xml_output": {"person_group_name": "Desk"}})
        )

        settings = load_settings(
            config_file,
            cutoff_date="2024-05-05",
            xml_output={"person_group_sequence": 7, "person_group_name": None},
        )

        assert settings.cutoff_date == date(2024, 5, 5)
        assert settings.xml_output.person_group_sequence == 7
        assert settings.xml_output.person_group_name == "Desk"

    def test_none_overrides_ignored(self):
        settings = load_settings(cutoff_date="2024-01-01", xml_output=None)

        assert settings.xml_output == XmlOutputSettings()

    def test_invalid_cutoff(self):
        with pytest.raises(ValidationError):
            load_settings(cutoff_date="not-a-date")
