"""Generic payload validation shared by every rule set."""
from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from marzban.errors import ValidationError


class Payload(BaseModel):
    """Base for request rule sets. Undeclared keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    def to_request(self) -> dict[str, Any]:
        """Fields the caller sent plus non-null defaults, JSON ready."""
        data = self.model_dump(mode="json", exclude_unset=True)
        for name, field in type(self).model_fields.items():
            if name in data or field.is_required():
                continue
            default = field.get_default(call_default_factory=True)
            if default is not None:
                data[name] = default
        return data


P = TypeVar("P", bound=Payload)


def violations_from(exc: PydanticValidationError) -> list[tuple[str, str]]:
    return [
        (".".join(str(part) for part in err["loc"]), err["msg"])
        for err in exc.errors()
    ]


def validate_payload(schema: type[P], data: Mapping[str, Any] | P | None) -> dict[str, Any]:
    """Check ``data`` against ``schema`` and return the normalized request body.

    Raises ValidationError listing every violation, not only the first.
    """
    if isinstance(data, schema):
        return data.to_request()
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValidationError([("", f"payload must be a mapping, got {type(data).__name__}")])
    try:
        return schema.model_validate(dict(data)).to_request()
    except PydanticValidationError as exc:
        raise ValidationError(violations_from(exc)) from exc
