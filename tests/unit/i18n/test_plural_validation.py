"""Tests for component_i18n.i18n.plural_validation module."""

import pytest

from component_i18n.i18n.plural_validation import validate_plural_forms


@pytest.mark.unit
class TestValidatePluralForms:
    """Tests for validate_plural_forms()."""

    def test_plain_string_passes(self):
        """Plain strings are not plural values."""
        result = validate_plural_forms("text", "ru", "key")
        assert result.is_valid
        assert result.warnings == []

    def test_complete_forms_pass(self):
        """All required forms present gives a clean result."""
        value = {"one": "a", "few": "b", "many": "c"}
        result = validate_plural_forms(value, "ru", "files")
        assert result.is_valid
        assert result.warnings == []

    def test_missing_forms_warn(self):
        """Missing required forms are warnings by default."""
        result = validate_plural_forms({"one": "a"}, "ru", "files")
        assert result.is_valid
        assert len(result.warnings) == 2

    def test_missing_forms_strict(self):
        """Strict mode turns missing forms into errors."""
        result = validate_plural_forms({"one": "a"}, "ru", "files", strict=True)
        assert not result.is_valid
        assert len(result.errors) == 2

    def test_invalid_category_is_error(self):
        """Unknown category names are errors."""
        result = validate_plural_forms({"one": "a", "other": "b", "lots": "c"}, "en", "k")
        assert not result.is_valid
        assert "lots" in result.errors[0]

    def test_unused_forms(self):
        """check_unused warns about forms the language never selects."""
        result = validate_plural_forms(
            {"one": "a", "other": "b", "few": "c"}, "en", "k", check_unused=True
        )
        assert any("'few'" in warning for warning in result.warnings)

    def test_inconsistent_variables(self):
        """check_variables warns when a form drops a shared variable."""
        value = {"one": "{name} has one", "other": "{count} items"}
        result = validate_plural_forms(value, "en", "k", check_variables=True)

        assert any("'other'" in w and "name" in w for w in result.warnings)
        assert not any("'one'" in w for w in result.warnings)
