"""Secret records and the state behind the shared create/edit form."""

from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import DecodeError

# -----------------------------------------------------------------------------
# Secret
# -----------------------------------------------------------------------------


class Secret(BaseModel):
    """A named, namespaced set of key/value pairs as returned by the store."""

    name: str
    namespace: str
    data: dict[str, str] = Field(default_factory=dict)
    labels: dict[str, str] = Field(default_factory=dict)

    @field_validator("data", "labels", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def from_json(cls, obj: Any) -> Self:
        """Validate one record of a list response."""
        if not isinstance(obj, dict):
            raise DecodeError(f"Expected a secret object, got {type(obj).__name__}")
        try:
            return cls.model_validate(obj, strict=True)
        except ValidationError as e:
            raise DecodeError(f"Invalid secret record: {e}") from e

    def to_payload(self) -> dict[str, Any]:
        """Body of a create or update call."""
        return {"name": self.name, "namespace": self.namespace, "data": dict(self.data)}


# -----------------------------------------------------------------------------
# Edit session
# -----------------------------------------------------------------------------


class Mode(Enum):
    """Which call a form submit performs."""

    CREATE = "create"
    EDIT = "edit"


@dataclass(frozen=True)
class EditSession:
    """Contents of the open form.

    The form holds a single key/value pair. Submitting an ``EDIT`` session
    replaces the secret's whole ``data`` with that pair.
    """

    mode: Mode
    name: str = ""
    key: str = ""
    value: str = ""

    @classmethod
    def create(cls) -> Self:
        return cls(Mode.CREATE)

    @classmethod
    def edit(cls, name: str, key: str, value: str) -> Self:
        return cls(Mode.EDIT, name, key, value)

    def with_fields(self, name: str, key: str, value: str) -> Self:
        """Return a copy carrying what the user typed, keeping the mode."""
        return replace(self, name=name, key=key, value=value)

    def to_secret(self, namespace: str) -> Secret:
        return Secret(name=self.name, namespace=namespace, data={self.key: self.value})

    def to_dict(self) -> dict[str, str]:
        return {**asdict(self), "mode": self.mode.value}

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> Self:
        return cls(
            Mode(data["mode"]),
            data.get("name", ""),
            data.get("key", ""),
            data.get("value", ""),
        )
