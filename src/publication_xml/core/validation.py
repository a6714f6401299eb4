"""Business rules a publication record must satisfy before conversion."""

from datetime import date, datetime, time

from .models import PublicationDocument, ValidationResult

REQUIRED_STATUS = 3


def validate(document: PublicationDocument, cutoff_date: date) -> ValidationResult:
    """Check the record against the publishing rules.

    The rules are checked in order and the first failure is returned:

    1. ``status`` must be 3.
    2. ``publish_date`` must be on or after the start of `cutoff_date`.
    3. ``test_run`` must be true.

    Args:
        document: The publication record.
        cutoff_date: The earliest accepted publish day.

    Returns:
        A successful `ValidationResult`, or a failed one carrying the message of
        the first broken rule.
    """
    if document.status != REQUIRED_STATUS:
        return ValidationResult.failure(f"Status must be equal to {REQUIRED_STATUS}")

    if _wall_clock(document.publish_date) < datetime.combine(cutoff_date, time.min):
        return ValidationResult.failure(
            f"Publish date must be on or after {cutoff_date:%Y-%m-%d}"
        )

    if not document.test_run:
        return ValidationResult.failure("TestRun must be true for production processing")

    return ValidationResult.success()


def _wall_clock(value: datetime) -> datetime:
    """Drop the offset of aware date-times; the cutoff is a local calendar day."""
    if value.tzinfo is not None:
        return value.replace(tzinfo=None)
    return value
