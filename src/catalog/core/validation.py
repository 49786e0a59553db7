"""Book title rules shared by the write DTOs and the book service."""

from src.catalog.core.exceptions import FieldError

TITLE_MIN_LENGTH = 3

BLANK_TITLE_MESSAGE = "The book title must contain at least one symbol."
SHORT_TITLE_MESSAGE = "The book title cannot be shorter than three characters."
NOT_NULL_MESSAGE = "must not be null"


def title_violations(title: str | None) -> list[str]:
    """Return the messages for every title rule `title` breaks, in rule order."""
    if title is None:
        return [NOT_NULL_MESSAGE]

    violations = []
    if not title.strip():
        violations.append(BLANK_TITLE_MESSAGE)
    if len(title) < TITLE_MIN_LENGTH:
        violations.append(SHORT_TITLE_MESSAGE)
    return violations


def validate_title(title: str | None) -> list[FieldError]:
    return [FieldError(field="title", message=m) for m in title_violations(title)]
