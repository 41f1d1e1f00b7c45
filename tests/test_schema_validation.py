"""
Tests for the qol.json schema.
"""

from helpers.schema_validation import SchemaValidator, validate_qol_config
from tests.factories.config_factories import make_invalid_settings_dict, make_settings_dict


class TestQolConfigSchema:
    def setup_method(self):
        self.validator = SchemaValidator()

    def test_default_document_is_valid(self):
        assert self.validator.validate(make_settings_dict(), "qol_config") == (True, [])

    def test_partial_document_is_valid(self):
        is_valid, errors = validate_qol_config({"enable_anti_wobble": True})

        assert is_valid
        assert errors == []

    def test_unknown_keys_allowed(self):
        is_valid, _ = validate_qol_config(make_settings_dict(extra_key="ignored"))

        assert is_valid

    def test_integer_zoom_values_allowed(self):
        is_valid, _ = validate_qol_config({"zoom_levels": [14, 7, 1]})

        assert is_valid

    def test_string_toggle_rejected(self):
        is_valid, errors = self.validator.validate(
            make_invalid_settings_dict("wrong_type_toggle"), "qol_config"
        )

        assert not is_valid
        assert len(errors) == 1
        assert "enable_anti_wobble" in errors[0]

    def test_bool_is_not_an_integer(self):
        is_valid, errors = validate_qol_config(make_invalid_settings_dict("bool_level"))

        assert not is_valid
        assert "max_zoom_level" in errors[0]

    def test_negative_level_rejected(self):
        is_valid, _ = validate_qol_config(make_invalid_settings_dict("negative_level"))

        assert not is_valid

    def test_empty_zoom_levels_rejected(self):
        is_valid, _ = validate_qol_config(make_invalid_settings_dict("empty_levels"))

        assert not is_valid

    def test_error_location_includes_index(self):
        _, errors = validate_qol_config(make_invalid_settings_dict("string_level_value"))

        assert errors == [
            "Validation error at zoom_levels.1: '7.0' is not of type 'number'"
        ]

    def test_non_object_rejected(self):
        is_valid, errors = validate_qol_config([1, 2])

        assert not is_valid
        assert errors[0].startswith("Validation error at <root>")

    def test_multiple_errors_reported(self):
        doc = make_settings_dict(enable_anti_wobble=1, min_zoom_level="3")

        _, errors = validate_qol_config(doc)

        assert len(errors) == 2


class TestSchemaValidatorRegistry:
    def test_unknown_schema(self):
        is_valid, errors = SchemaValidator().validate({}, "missing")

        assert not is_valid
        assert errors == ["Schema 'missing' not loaded"]
