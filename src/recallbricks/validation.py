"""Local argument checks run before any request is attempted."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from .errors import InvalidInputError

M = TypeVar("M", bound=BaseModel)


def require_text(value: Optional[str], label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"{label} is required")
    return value


def path_segment(value: Optional[str], label: str) -> str:
    """Validate an id and percent-encode it as a single path segment."""
    return quote(require_text(value, label), safe="")


def require_int_range(value: Any, label: str, *, minimum: int, maximum: Optional[int] = None) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidInputError(f"{label} must be an integer")
    if maximum is not None and not minimum <= value <= maximum:
        raise InvalidInputError(f"{label} must be between {minimum} and {maximum}")
    if value < minimum:
        raise InvalidInputError(f"{label} must be at least {minimum}")
    return value


def optional_days(value: Optional[int], label: str = "Days") -> Optional[int]:
    if value is None:
        return None
    return require_int_range(value, label, minimum=1)


def coerce_model(model: Type[M], value: Union[M, Mapping[str, Any]]) -> M:
    """Accept a model instance or a plain mapping; report problems as InvalidInputError."""
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise InvalidInputError(
            f"Invalid {model.__name__}: {exc.error_count()} validation error(s)",
            details=exc.errors(include_url=False),
        ) from exc


def compact(**fields: Any) -> dict:
    """Drop ``None`` values so unset options stay off the wire."""
    return {key: value for key, value in fields.items() if value is not None}


__all__ = [
    "coerce_model",
    "compact",
    "optional_days",
    "path_segment",
    "require_int_range",
    "require_text",
]
