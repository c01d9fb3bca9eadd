"""Domain exceptions."""


class DomainError(Exception):
    """Base class for tinyblog errors."""


class ValidationError(DomainError):
    """Raised when a post cannot be created from the given fields."""

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class PostNotFoundError(DomainError):
    """Raised when a post lookup by ID finds nothing."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id


class ConfigurationError(DomainError):
    """Raised when the database configuration cannot be resolved."""
