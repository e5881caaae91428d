"""YAML loading and parsing for graphdesc declarations."""

from collections.abc import Hashable
from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, ValidationError
from yaml.constructor import ConstructorError

from .errors import SchemaLoadError, SchemaValidationError
from .models import Declaration

ModelT = TypeVar("ModelT", bound=BaseModel)


class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects repeated keys instead of keeping the last one."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            self.flatten_mapping(node)
            seen = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                if not isinstance(key, Hashable):
                    continue
                if key in seen:
                    raise ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def load_yaml(path: str | Path) -> dict:
    """Load a YAML (or JSON) file and return the raw data.

    Args:
        path: Path to the file.

    Returns:
        The parsed data as a dictionary.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    return load_yaml_string(text, path=str(path))


def load_yaml_string(yaml_string: str, path: str | None = None) -> dict:
    """Parse a YAML (or JSON) string into a mapping.

    Raises:
        SchemaLoadError: If the text is not valid YAML or the root is not a mapping.
    """
    try:
        data = yaml.load(yaml_string, Loader=UniqueKeyLoader)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", path) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", path
        )

    return data


def parse_declaration(path: str | Path) -> Declaration:
    """Load and parse a declaration file.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the data fails validation.
    """
    data = load_yaml(path)
    return validate_data(Declaration, data)


def parse_declaration_from_string(yaml_string: str) -> Declaration:
    """Parse a YAML string into a Declaration.

    Raises:
        SchemaLoadError: If the YAML cannot be parsed.
        SchemaValidationError: If the data fails validation.
    """
    data = load_yaml_string(yaml_string)
    return validate_data(Declaration, data)


def validate_data(model: type[ModelT], data: dict) -> ModelT:
    """Validate raw data against a pydantic model.

    Args:
        model: The model class to validate against.
        data: The raw data.

    Returns:
        The validated model instance.

    Raises:
        SchemaValidationError: If the data fails validation.
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"{model.__name__} validation failed with {len(errors)} error(s)",
            errors,
            model=model.__name__,
        ) from e
