"""Tests for contact aggregation."""

from publication_xml.core.aggregation import aggregate_contacts, iter_contacts, person_key
from publication_xml.core.models import Contact, ContactInformation, ContactSection


def make_sections(*sections):
    """Build contact sections from nested lists: sections > blocks > contact dicts."""
    return [
        ContactSection(
            contact_information=[
                ContactInformation(contacts=[Contact(**c) for c in block]) for block in blocks
            ]
        )
        for blocks in sections
    ]


class TestIterContacts:
    def test_depth_first_source_order(self):
        sections = make_sections(
            [[{"first_name": "A"}, {"first_name": "B"}], [{"first_name": "C"}]],
            [[{"first_name": "D"}]],
        )

        assert [c.first_name for c in iter_contacts(sections)] == ["A", "B", "C", "D"]

    def test_empty(self):
        assert list(iter_contacts([])) == []


class TestPersonKey:
    def test_key_is_trimmed_and_lower_cased(self):
        assert person_key(Contact(first_name="  JoHn ", last_name=" DOE")) == "john doe"


class TestAggregateContacts:
    """Test grouping and merging."""

    def test_single_contact(self):
        sections = make_sections(
            [[{"first_name": "John", "last_name": "Doe", "title": "Analyst",
               "phone_number": "+1-555-123-4567", "email": "john@example.com"}]]
        )

        persons = aggregate_contacts(sections)

        assert len(persons) == 1
        person = persons[0]
        assert person.family_name == "Doe"
        assert person.given_name == "John"
        assert person.display_name == "John Doe"
        assert person.job_title == "Analyst"
        assert person.phones == ["+1-555-123-4567"]
        assert person.emails == ["john@example.com"]

    def test_case_and_whitespace_variants_collapse(self):
        sections = make_sections(
            [[
                {"first_name": "John", "last_name": "Doe", "phone_number": "1"},
                {"first_name": "  JOHN ", "last_name": "doe  ", "phone_number": "2"},
            ]]
        )

        persons = aggregate_contacts(sections)

        assert len(persons) == 1
        assert persons[0].phones == ["1", "2"]

    def test_display_values_come_verbatim_from_first_contact(self):
        sections = make_sections(
            [[
                {"first_name": " jane", "last_name": "SMITH ", "title": "Junior"},
                {"first_name": "Jane", "last_name": "Smith", "title": "Senior"},
            ]]
        )

        person = aggregate_contacts(sections)[0]

        assert person.given_name == " jane"
        assert person.family_name == "SMITH "
        assert person.display_name == " jane SMITH "
        assert person.job_title == "Junior"

    def test_multi_channel_merge_keeps_order_and_duplicates(self):
        sections = make_sections(
            [[
                {"first_name": "John", "last_name": "Doe", "email": "work@x.com", "phone_number": "111"},
                {"first_name": "John", "last_name": "Doe", "email": "home@x.com"},
            ]],
            [[
                {"first_name": "john", "last_name": "doe", "phone_number": "222"},
                {"first_name": "John", "last_name": "Doe", "email": "work@x.com", "phone_number": "111"},
            ]],
        )

        persons = aggregate_contacts(sections)

        assert len(persons) == 1
        assert persons[0].phones == ["111", "222", "111"]
        assert persons[0].emails == ["work@x.com", "home@x.com", "work@x.com"]

    def test_first_seen_order_across_sections(self):
        sections = make_sections(
            [[
                {"first_name": "Bob", "last_name": "Wilson"},
                {"first_name": "Alice", "last_name": "Johnson"},
            ]],
            [[
                {"first_name": "Carol", "last_name": "King"},
                {"first_name": "bob", "last_name": "wilson", "phone_number": "999"},
            ]],
        )

        persons = aggregate_contacts(sections)

        assert [p.display_name for p in persons] == ["Bob Wilson", "Alice Johnson", "Carol King"]
        assert persons[0].phones == ["999"]

    def test_contacts_without_full_name_are_excluded(self):
        sections = make_sections(
            [[
                {"first_name": "", "last_name": "Doe", "phone_number": "1", "email": "a@x.com"},
                {"first_name": "John", "last_name": "   ", "phone_number": "2"},
                {"first_name": "John", "last_name": "Doe", "phone_number": "3"},
                {"first_name": " ", "last_name": "", "title": "Invalid Contact", "phone_number": "4"},
            ]]
        )

        persons = aggregate_contacts(sections)

        assert len(persons) == 1
        assert persons[0].phones == ["3"]
        assert persons[0].emails == []

    def test_empty_channels_are_skipped(self):
        sections = make_sections(
            [[
                {"first_name": "John", "last_name": "Doe", "phone_number": "", "email": ""},
                {"first_name": "John", "last_name": "Doe", "phone_number": "5", "email": ""},
            ]]
        )

        person = aggregate_contacts(sections)[0]

        assert person.phones == ["5"]
        assert person.emails == []

    def test_no_valid_contacts(self):
        sections = make_sections([[{"first_name": "", "last_name": ""}]])

        assert aggregate_contacts(sections) == []

    def test_no_sections(self):
        assert aggregate_contacts([]) == []
