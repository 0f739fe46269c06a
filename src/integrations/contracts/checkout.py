"""
Checkout contract: the preference payload accepted by ``POST /preferences``
and forwarded to the provider, plus decoding and validation helpers.

Decoding is type-strict: a value of the wrong JSON type is a decode failure
(HTTP 422). Missing or zero-valued fields decode to their defaults and are
reported by ``validate_preference`` instead (HTTP 400), one line per violated
rule in field declaration order, e.g. ``items[0].unit_price: required failed``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic.fields import FieldInfo

from .errors import BodyDecodeError, PreferenceValidationError

REQUIRED = {"validate": "required"}


class _WireModel(BaseModel):
    model_config = ConfigDict(strict=True, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_zero_value(cls, value: Any, info: ValidationInfo) -> Any:
        # JSON null decodes like an absent field so `required` reports it.
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class Item(_WireModel):
    title: str = Field(default="", json_schema_extra=REQUIRED)
    description: str = ""
    picture_url: str = ""
    quantity: int = Field(default=0, json_schema_extra=REQUIRED)
    unit_price: float = Field(default=0.0, json_schema_extra=REQUIRED)


class Phone(_WireModel):
    area_code: str = ""
    number: str = Field(default="", json_schema_extra=REQUIRED)


class Address(_WireModel):
    zip_code: str = ""
    street: str = Field(default="", json_schema_extra=REQUIRED)
    number: int = Field(default=0, json_schema_extra=REQUIRED)


class Payer(_WireModel):
    name: str = Field(default="", json_schema_extra=REQUIRED)
    surname: str = ""
    email: str = Field(default="", json_schema_extra=REQUIRED)
    phone: Phone = Field(default_factory=Phone)
    address: Address = Field(default_factory=Address)
    created_at: str = Field(default="", alias="date_created", json_schema_extra=REQUIRED)


class Redirect(_WireModel):
    success: str = ""
    pending: str = ""
    failure: str = ""


class NewPreference(_WireModel):
    items: Optional[List[Item]] = Field(default=None, json_schema_extra={"validate": "required,min=1"})
    payer: Payer = Field(default_factory=Payer)
    redirect: Redirect = Field(default_factory=Redirect, alias="back_urls")
    auto_return: bool = False

    def to_payload(self) -> Dict[str, Any]:
        """Body sent to the provider, keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def decode_preference(raw: Union[bytes, str]) -> NewPreference:
    try:
        return NewPreference.model_validate_json(raw)
    except ValidationError as exc:
        raise BodyDecodeError(describe_validation_error(exc)) from exc


def describe_validation_error(exc: ValidationError) -> str:
    parts: List[str] = []
    for error in exc.errors():
        location = format_location(error.get("loc", ()))
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def format_location(loc: Sequence[Union[int, str]]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_preference(preference: NewPreference) -> List[str]:
    """
    Return the list of violations, each formatted as ``<path>: <rule> failed``.
    Empty list means the preference is valid.
    """
    violations: List[str] = []
    _collect_violations(preference, "", violations)
    return violations


def ensure_valid_preference(preference: NewPreference) -> NewPreference:
    violations = validate_preference(preference)
    if violations:
        raise PreferenceValidationError(violations)
    return preference


def _collect_violations(model: BaseModel, prefix: str, violations: List[str]) -> None:
    for name, field in type(model).model_fields.items():
        value = getattr(model, name)
        wire_name = field.alias or name
        path = f"{prefix}.{wire_name}" if prefix else wire_name

        failed_rule = _first_failed_rule(field, value)
        if failed_rule is not None:
            violations.append(f"{path}: {failed_rule} failed")
            continue

        if isinstance(value, BaseModel):
            _collect_violations(value, path, violations)
        elif isinstance(value, list):
            for index, element in enumerate(value):
                if isinstance(element, BaseModel):
                    _collect_violations(element, f"{path}[{index}]", violations)


def _first_failed_rule(field: FieldInfo, value: Any) -> Optional[str]:
    extra = field.json_schema_extra if isinstance(field.json_schema_extra, dict) else {}
    for rule in str(extra.get("validate", "")).split(","):
        if rule == "required" and _is_zero(value):
            return rule
        if rule.startswith("min=") and value is not None and len(value) < int(rule[len("min="):]):
            return rule
    return None


def _is_zero(value: Any) -> bool:
    # Nested models and lists are present once decoded; only None counts as missing.
    if value is None:
        return True
    if isinstance(value, (BaseModel, list)):
        return False
    return value == "" or value == 0
