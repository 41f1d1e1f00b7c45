#helpers/schema_validation.py

"""
JSON Schema validation utilities for the plugin config document.

The built-in ``qol_config`` schema describes ``Modloader/config/qol.json``.
"""

import logging
from typing import Any

from jsonschema import Draft7Validator

logger = logging.getLogger(__name__)

QOL_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": "qol_config",
    "title": "QoL plugin configuration",
    "description": "Feature toggles and zoom settings read once at startup",
    "type": "object",
    "properties": {
        "enable_anti_wobble": {"type": "boolean"},
        "enable_unblocked_guns": {"type": "boolean"},
        "enable_reduced_shake": {"type": "boolean"},
        "enable_arcade_zoom": {"type": "boolean"},
        "max_zoom_level": {"type": "integer", "minimum": 0},
        "min_zoom_level": {"type": "integer", "minimum": 0},
        "zoom_levels": {
            "type": "array",
            "items": {"type": "number"},
            "minItems": 1,
        },
    },
    "additionalProperties": True,
}

BUILTIN_SCHEMAS: dict[str, dict[str, Any]] = {
    "qol_config": QOL_CONFIG_SCHEMA,
}


class SchemaValidator:
    """JSON Schema validator for plugin data structures."""

    def __init__(self) -> None:
        self._validators: dict[str, Draft7Validator] = {}

        for name, schema in BUILTIN_SCHEMAS.items():
            Draft7Validator.check_schema(schema)
            self._validators[name] = Draft7Validator(schema)

    def validate(self, data: Any, schema_name: str) -> tuple[bool, list[str]]:
        """
        Validate data against a schema.

        Args:
            data: Data to validate
            schema_name: Name of a built-in schema

        Returns:
            Tuple of (is_valid, error_messages)
        """
        if schema_name not in self._validators:
            logger.error("Schema not found: %s", schema_name)
            return False, [f"Schema '{schema_name}' not loaded"]

        validator = self._validators[schema_name]
        errors = []
        for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path]):
            location = ".".join(str(p) for p in error.path) or "<root>"
            errors.append(f"Validation error at {location}: {error.message}")

        return not errors, errors


def validate_qol_config(data: Any, validator: SchemaValidator | None = None) -> tuple[bool, list[str]]:
    """Validate a parsed ``qol.json`` document."""
    return (validator or SchemaValidator()).validate(data, "qol_config")
