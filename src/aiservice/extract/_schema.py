from __future__ import annotations

from typing import Any

from jsonschema import Draft7Validator, validate
from jsonschema.exceptions import ValidationError as _SchemaValidationError

from aiservice.llm.errors import LLMValidationError

CLICK_LOG_ENTRY_SCHEMA: dict[str, Any] = {"type": "object"}

CLICK_PARAMS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": ["string", "null"]},
        "source": {"type": ["string", "null"]},
        "price": {"type": ["number", "null"]},
    },
}

_params_validator = Draft7Validator(CLICK_PARAMS_SCHEMA)


def validate_click_entry(entry: Any) -> None:
    try:
        validate(instance=entry, schema=CLICK_LOG_ENTRY_SCHEMA)
    except _SchemaValidationError as e:
        raise LLMValidationError(f"Click log entry is not an object: {e.message}") from e


def invalid_click_fields(params: dict[str, Any]) -> set[str]:
    """Names of known click fields whose values have the wrong type."""
    return {
        str(error.path[0])
        for error in _params_validator.iter_errors(params)
        if error.path
    }
