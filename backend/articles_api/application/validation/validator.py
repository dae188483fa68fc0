"""Request-scoped validation of raw input fields against declarative rule sets.

A rule set is a pydantic model: its fields and constraints declare what the
input must look like. ``Validator.validate`` never raises for bad input; it
returns a ``ValidationResult`` describing the outcome, so nothing is shared
between two validations.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import PydanticCustomError


def not_blank(value: str) -> str:
    """Reject strings made only of whitespace, reported like an empty string."""
    if not value.strip():
        raise PydanticCustomError(
            "string_too_short",
            "String should have at least {min_length} character",
            {"min_length": 1},
        )
    return value


class RuleSet(BaseModel):
    """Base class for rule sets. Unknown input fields are dropped."""

    model_config = ConfigDict(extra="ignore")


_MESSAGES: dict[str, str] = {
    "missing": "{field} is required",
    "string_type": "{field} must be a string",
    "string_too_long": "{field} must not exceed {max_length} characters",
    "too_long": "{field} must not exceed {max_length} characters",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation: either validated data or field errors."""

    data: RuleSet | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    def fails(self) -> bool:
        return bool(self.errors)

    def passes(self) -> bool:
        return not self.errors


class Validator:
    """Checks input fields against a rule set and reports per-field messages."""

    def validate(self, fields: Any, rules: type[RuleSet]) -> ValidationResult:
        if not isinstance(fields, Mapping):
            return ValidationResult(errors={"_schema": ["Input must be an object"]})

        try:
            data = rules.model_validate(dict(fields))
        except ValidationError as exc:
            return ValidationResult(errors=_collect_errors(exc, rules))
        return ValidationResult(data=data)


def _collect_errors(exc: ValidationError, rules: type[RuleSet]) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        key = str(loc[0]) if loc else "_schema"
        errors.setdefault(key, []).append(_format_message(error, _label(rules, key)))
    return errors


def _label(rules: type[RuleSet], key: str) -> str:
    info = rules.model_fields.get(key)
    if info is not None and info.title:
        return info.title
    return key.replace("_", " ").capitalize()


def _format_message(error: Any, label: str) -> str:
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type in ("string_too_short", "too_short"):
        min_length = ctx.get("min_length", 1)
        if min_length <= 1:
            return f"{label} must not be empty"
        return f"{label} must be at least {min_length} characters"

    template = _MESSAGES.get(error_type)
    if template is None:
        return str(error.get("msg", "Invalid value"))
    return template.format(field=label, **ctx)
