"""
Unit tests for ConversionSettings and the settings enums.
"""
import dataclasses

import pytest

from image_pdf_toolkit.core.models import (
    ConversionSettings,
    Orientation,
    PageSize,
    Quality,
    ScalingPolicy,
)


class TestDefaults:
    def test_defaults_are_a4_portrait_fit_high(self):
        settings = ConversionSettings()
        assert settings.page_size is PageSize.A4
        assert settings.orientation is Orientation.PORTRAIT
        assert settings.scaling is ScalingPolicy.FIT
        assert settings.quality is Quality.HIGH

    def test_settings_are_frozen(self):
        settings = ConversionSettings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.page_size = PageSize.A3


class TestCoercion:
    def test_values_are_coerced_to_enum_members(self):
        settings = ConversionSettings(
            page_size="Letter", orientation="landscape", scaling="fill", quality="low"
        )
        assert settings.page_size is PageSize.LETTER
        assert settings.orientation is Orientation.LANDSCAPE
        assert settings.scaling is ScalingPolicy.FILL
        assert settings.quality is Quality.LOW

    def test_member_names_are_accepted(self):
        settings = ConversionSettings(page_size="LEGAL", scaling="Original")
        assert settings.page_size is PageSize.LEGAL
        assert settings.scaling is ScalingPolicy.ORIGINAL

    @pytest.mark.parametrize("field,value", [
        ("page_size", "B5"),
        ("orientation", "diagonal"),
        ("scaling", "stretch"),
        ("quality", "ultra"),
    ])
    def test_unknown_values_raise(self, field, value):
        with pytest.raises(ValueError, match=field):
            ConversionSettings(**{field: value})


class TestSerialization:
    def test_to_dict_uses_plain_values(self):
        settings = ConversionSettings(page_size=PageSize.A5, quality=Quality.MEDIUM)
        assert settings.to_dict() == {
            "page_size": "A5",
            "orientation": "portrait",
            "scaling": "fit",
            "quality": "medium",
        }

    def test_from_dict_restores_settings(self):
        original = ConversionSettings(
            page_size=PageSize.LEGAL,
            orientation=Orientation.LANDSCAPE,
            scaling=ScalingPolicy.ORIGINAL,
            quality=Quality.LOW,
        )
        assert ConversionSettings.from_dict(original.to_dict()) == original

    def test_from_dict_fills_missing_keys_with_defaults(self):
        settings = ConversionSettings.from_dict({"orientation": "landscape", "quality": None})
        assert settings == ConversionSettings(orientation=Orientation.LANDSCAPE)

    def test_from_dict_rejects_bad_values(self):
        with pytest.raises(ValueError):
            ConversionSettings.from_dict({"page_size": "Tabloid"})


def test_summary_reads_naturally():
    settings = ConversionSettings(page_size="Letter", orientation="landscape")
    assert settings.summary() == "Letter • landscape • fit scaling • high quality"


def test_enum_str_is_value():
    assert str(PageSize.LETTER) == "Letter"
    assert f"{ScalingPolicy.ORIGINAL}" == "original"
