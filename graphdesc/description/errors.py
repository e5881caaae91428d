"""Exceptions raised while building a Description."""


class DescriptionError(Exception):
    """Base exception for description build failures."""

    pass


class DuplicateNode(DescriptionError):
    """Raised when a node name is declared more than once."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Node '{name}' is declared more than once")


class UnknownNode(DescriptionError):
    """Raised when a reference does not match any declared node."""

    def __init__(self, reference: str, group_name: str | None = None):
        self.reference = reference
        self.group_name = group_name
        if group_name is None:
            message = f"Node '{reference}' not found"
        else:
            message = f"Edge group '{group_name}' references undeclared node '{reference}'"
        super().__init__(message)


class DuplicateEdgeGroup(DescriptionError):
    """Raised when an edge group name is declared more than once."""

    def __init__(self, group_name: str):
        self.group_name = group_name
        super().__init__(f"Edge group '{group_name}' is declared more than once")


class InvalidName(DescriptionError):
    """Raised when a node or edge group is declared with an empty name."""

    def __init__(self, kind: str, name: str = ""):
        self.kind = kind
        self.name = name
        super().__init__(f"Invalid {kind} name: {name!r}")
