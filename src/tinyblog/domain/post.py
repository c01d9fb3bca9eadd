"""Post domain entity."""

from dataclasses import dataclass
from datetime import datetime

from tinyblog.domain.errors import ValidationError

SUMMARY_SEPARATOR = " - "

REQUIRED_FIELDS = ("title", "description")


def missing_fields(title: str | None, description: str | None) -> list[str]:
    """Return names of required fields that are None.

    Empty strings count as present.
    """
    values = {"title": title, "description": description}
    return [name for name in REQUIRED_FIELDS if values[name] is None]


@dataclass
class Post:
    """Represents a blog post with a title and a description."""

    id: int | None
    title: str
    description: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def summary(self) -> str:
        """Return the title and description joined by " - ".

        Computed from the current field values on every call.

        Raises:
            ValidationError: If title or description is None
        """
        missing = missing_fields(self.title, self.description)
        if missing:
            raise ValidationError(
                f"Cannot summarize post without {', '.join(missing)}", fields=missing
            )
        return f"{self.title}{SUMMARY_SEPARATOR}{self.description}"
