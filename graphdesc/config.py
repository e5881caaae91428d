"""Build settings with environment overrides."""

import os
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

ENV_DUPLICATES = "GRAPHDESC_DUPLICATES"


class DuplicatePolicy(str, Enum):
    """How repeated (source, target) pairs inside one edge group are treated."""

    ALLOW_DUPLICATES = "allow_duplicates"
    DEDUPLICATE = "deduplicate"


class BuildSettings(BaseModel):
    """Settings applied while building a Description.

    Precedence: explicit overrides, then environment, then defaults.
    """

    model_config = ConfigDict(frozen=True)

    duplicates: DuplicatePolicy = DuplicatePolicy.ALLOW_DUPLICATES

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BuildSettings":
        """Create settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            pydantic.ValidationError: If a variable holds an unrecognized value.
        """
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        duplicates = environ.get(ENV_DUPLICATES)
        if duplicates:
            values["duplicates"] = duplicates.strip().lower()

        return cls.model_validate(values)

    def with_overrides(self, **overrides: Any) -> "BuildSettings":
        """Return a copy with every non-None override applied."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return type(self).model_validate(data)
