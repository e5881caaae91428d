"""Exceptions for loading declaration and description documents."""


class SchemaError(Exception):
    """Base exception for documents that cannot be turned into models."""

    pass


class SchemaLoadError(SchemaError):
    """Raised when a YAML or JSON document cannot be read or parsed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SchemaValidationError(SchemaError):
    """Raised when a parsed document does not match the expected model.

    ``errors`` holds one ``{"loc", "msg", "type"}`` dict per problem.
    """

    def __init__(
        self,
        message: str,
        errors: list[dict] | None = None,
        model: str | None = None,
    ):
        self.errors = errors or []
        self.model = model
        super().__init__(message)
