"""
validation.py: структурный валидатор полей описания чека,
расширяемый механизм встроенных и пользовательских правил.

Field-level validation for decoded receipt JSON objects. A schema maps each
field name to a list of rules; a rule is either the name of a builtin
validator or any callable following the ``Validator`` protocol.
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Union

from thermal_receipt.errors import ValidationError


class Validator(Protocol):
    """Расширяемый протокол валидатора поля."""

    def __call__(self, value: Any, context: Mapping[str, Any]) -> Optional[str]: ...


class ValidationResult:
    """
    Результат валидации.
    errors: список ValidationError в порядке обнаружения.
    """

    def __init__(self) -> None:
        self.errors: List[ValidationError] = []

    def add(self, error: ValidationError) -> None:
        self.errors.append(error)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_first(self) -> None:
        if self.errors:
            raise self.errors[0]


def is_string(value: Any, context: Mapping[str, Any]) -> Optional[str]:
    if not isinstance(value, str):
        return f"expected a string, got {_json_type(value)}"
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        # lone surrogates from \uD800-style escapes
        return f"contains a character that cannot be encoded as UTF-8 at position {e.start}"
    return None


def is_bool(value: Any, context: Mapping[str, Any]) -> Optional[str]:
    if not isinstance(value, bool):
        return f"expected a boolean, got {_json_type(value)}"
    return None


def is_int(value: Any, context: Mapping[str, Any]) -> Optional[str]:
    if isinstance(value, bool) or not isinstance(value, int):
        return f"expected an integer, got {_json_type(value)}"
    return None


def is_positive(value: Any, context: Mapping[str, Any]) -> Optional[str]:
    if isinstance(value, int) and not isinstance(value, bool) and value <= 0:
        return f"must be > 0, got {value}"
    return None


def is_array(value: Any, context: Mapping[str, Any]) -> Optional[str]:
    if not isinstance(value, list):
        return f"expected an array, got {_json_type(value)}"
    return None


def is_object(value: Any, context: Mapping[str, Any]) -> Optional[str]:
    if not isinstance(value, dict):
        return f"expected an object, got {_json_type(value)}"
    return None


def not_empty(value: Any, context: Mapping[str, Any]) -> Optional[str]:
    if isinstance(value, str) and value == "":
        return "must not be empty"
    return None


def one_of(*choices: str) -> Validator:
    lowered = {c.lower() for c in choices}

    def validator(value: Any, context: Mapping[str, Any]) -> Optional[str]:
        if isinstance(value, str) and value.lower() not in lowered:
            return f"unknown value {value!r} (expected {', '.join(choices)})"
        return None

    return validator


# "required" is handled by ObjectValidator itself: it decides whether a missing
# field is an error before any value rule runs.
REQUIRED: str = "required"

BUILTIN_VALIDATORS: Dict[str, Validator] = {
    "string": is_string,
    "bool": is_bool,
    "int": is_int,
    "positive": is_positive,
    "array": is_array,
    "object": is_object,
    "not_empty": not_empty,
}

Rule = Union[str, Validator]


class ObjectValidator:
    """
    Валидатор JSON-объекта по схеме.

    schema: mapping field -> список имён builtin-правил или callable.
    Пример:
        {
            "text": ["required", "string"],
            "width": ["required", "int", "positive"],
            "align": ["string", one_of("left", "center", "right")],
        }

    Optional fields are validated only when present. A present ``null`` is a
    type error, not an absent field.
    """

    def __init__(
        self,
        schema: Mapping[str, Sequence[Rule]],
        allow_extra: bool = True,
        stop_on_error: bool = True,
    ) -> None:
        self.schema = schema
        self.allow_extra = allow_extra
        self.stop_on_error = stop_on_error

    def validate(self, data: Mapping[str, Any], path: str = "") -> ValidationResult:
        result = ValidationResult()
        for field, rules in self.schema.items():
            field_path = f"{path}.{field}" if path else field
            if field not in data:
                if REQUIRED in rules:
                    result.add(ValidationError(f"Missing required field '{field}'", path=field_path))
                    if self.stop_on_error:
                        return result
                continue
            value = data[field]
            for rule in rules:
                if rule == REQUIRED:
                    continue
                validator = BUILTIN_VALIDATORS[rule] if isinstance(rule, str) else rule
                msg = validator(value, data)
                if msg:
                    result.add(ValidationError(f"{field}: {msg}", path=field_path))
                    if self.stop_on_error:
                        return result
                    break
        if not self.allow_extra:
            for extra in sorted(set(data.keys()) - set(self.schema.keys())):
                field_path = f"{path}.{extra}" if path else extra
                result.add(ValidationError(f"Extra field: {extra}", path=field_path))
        return result

    def check(self, data: Mapping[str, Any], path: str = "") -> None:
        """Validate and raise the first error, if any."""
        self.validate(data, path).raise_first()


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
