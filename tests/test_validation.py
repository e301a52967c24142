"""
Tests for opt-in validation of Swagger UI configurations
"""

import pytest

from http_swagger import (
    InvalidDepthError,
    InvalidEnumValueError,
    SwaggerConfigError,
    new_config,
    options,
    validate_config,
)
from http_swagger.config import config


class TestStrictBuild:
    """Tests for building with validation enabled"""

    def test_valid_config_passes(self):
        """Test that documented values are accepted"""
        swagger = new_config(
            options.doc_expansion("none"),
            options.default_model_rendering("schema"),
            options.default_models_expand_depth(-1),
            options.supported_submit_methods("get", "post"),
            strict=True,
        )

        assert swagger.doc_expansion == "none"

    def test_invalid_doc_expansion(self):
        """Test that an unknown doc expansion is rejected"""
        with pytest.raises(InvalidEnumValueError) as exc_info:
            new_config(options.doc_expansion("sideways"), strict=True)

        assert exc_info.value.field == "doc_expansion"
        assert exc_info.value.value == "sideways"
        assert exc_info.value.allowed == ["list", "full", "none"]

    def test_invalid_model_rendering(self):
        """Test that an unknown model rendering is rejected"""
        with pytest.raises(InvalidEnumValueError) as exc_info:
            new_config(options.default_model_rendering("table"), strict=True)

        assert exc_info.value.field == "default_model_rendering"

    def test_invalid_submit_method(self):
        """Test that a non HTTP verb is rejected"""
        with pytest.raises(InvalidEnumValueError) as exc_info:
            new_config(options.supported_submit_methods("get", "GET"), strict=True)

        assert exc_info.value.value == "GET"

    def test_invalid_depth(self):
        """Test that depths below -1 are rejected"""
        with pytest.raises(InvalidDepthError) as exc_info:
            new_config(options.default_model_expand_depth(-2), strict=True)

        assert exc_info.value.field == "default_model_expand_depth"
        assert exc_info.value.value == -2

    def test_errors_share_base_class(self):
        """Test that validation errors are SwaggerConfigError and ValueError"""
        assert issubclass(InvalidEnumValueError, SwaggerConfigError)
        assert issubclass(InvalidDepthError, ValueError)


class TestStrictSetting:
    """Tests for the process-wide validation setting"""

    def test_unchecked_by_default(self):
        """Test that invalid values pass when validation is off"""
        swagger = new_config(options.doc_expansion("sideways"))

        assert swagger.doc_expansion == "sideways"

    def test_setting_enables_validation(self, monkeypatch):
        """Test that the strict setting applies when not passed explicitly"""
        monkeypatch.setattr(config.swagger, "strict_validation", True)

        with pytest.raises(InvalidEnumValueError):
            new_config(options.doc_expansion("sideways"))

    def test_explicit_flag_overrides_setting(self, monkeypatch):
        """Test that strict=False skips validation even when the setting is on"""
        monkeypatch.setattr(config.swagger, "strict_validation", True)

        swagger = new_config(options.doc_expansion("sideways"), strict=False)

        assert swagger.doc_expansion == "sideways"

    def test_validate_config_directly(self):
        """Test validating an unchecked config after the fact"""
        swagger = new_config(options.default_models_expand_depth(-3))

        with pytest.raises(InvalidDepthError):
            validate_config(swagger)

    def test_mistyped_depth_is_rejected(self):
        """Test that a non integer depth is reported as an invalid depth"""
        swagger = new_config(options.default_models_expand_depth("2"))

        with pytest.raises(InvalidDepthError):
            validate_config(swagger)
