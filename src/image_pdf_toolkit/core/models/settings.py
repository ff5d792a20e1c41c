"""
Module: settings

Purpose:
    Provides the enumerations and the ConversionSettings dataclass that
    describe how a set of images is laid out in the output PDF.

Key Classes:
    - PageSize: Named paper sizes (A4, A3, A5, Letter, Legal)
    - Orientation: Portrait or landscape
    - ScalingPolicy: fit / fill / original placement rule
    - Quality: Output compression level
    - ConversionSettings: Immutable snapshot used for one conversion run

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - converter.layout.pages: Page dimension lookup
    - converter.controller: Conversion pipeline
    - gui.models.settings: Settings persistence
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping


class PageSize(str, Enum):
    """Supported paper sizes."""
    A4 = "A4"
    A3 = "A3"
    A5 = "A5"
    LETTER = "Letter"
    LEGAL = "Legal"

    def __str__(self) -> str:
        return self.value


class Orientation(str, Enum):
    """Page orientation. Landscape swaps the canonical width and height."""
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    def __str__(self) -> str:
        return self.value


class ScalingPolicy(str, Enum):
    """
    Rule mapping an image's pixel size to its size on the page.

    Attributes:
        FIT: Largest size that keeps the aspect ratio and stays on the page
        FILL: Stretch to cover the whole page
        ORIGINAL: Physical size at 96 DPI, shrunk only if it overflows
    """
    FIT = "fit"
    FILL = "fill"
    ORIGINAL = "original"

    def __str__(self) -> str:
        return self.value


class Quality(str, Enum):
    """Output quality. Affects JPEG compression only, never layout."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ConversionSettings:
    """
    Settings for one conversion run (immutable).

    String values are coerced to their enum members on construction, so
    ``ConversionSettings(page_size="Letter")`` is valid. Unknown values
    raise ValueError.

    Attributes:
        page_size: Paper size
        orientation: Portrait or landscape
        scaling: Placement rule for each image
        quality: Compression level for embedded images

    Example:
        >>> settings = ConversionSettings(orientation="landscape")
        >>> settings.summary()
        'A4 • landscape • fit scaling • high quality'
    """

    page_size: PageSize = PageSize.A4
    orientation: Orientation = Orientation.PORTRAIT
    scaling: ScalingPolicy = ScalingPolicy.FIT
    quality: Quality = Quality.HIGH

    def __post_init__(self) -> None:
        """Coerce and validate enum fields."""
        # frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "page_size", _coerce(PageSize, self.page_size, "page_size"))
        object.__setattr__(self, "orientation", _coerce(Orientation, self.orientation, "orientation"))
        object.__setattr__(self, "scaling", _coerce(ScalingPolicy, self.scaling, "scaling"))
        object.__setattr__(self, "quality", _coerce(Quality, self.quality, "quality"))

    def summary(self) -> str:
        """One-line human readable description of the settings."""
        return (
            f"{self.page_size} • {self.orientation} • "
            f"{self.scaling} scaling • {self.quality} quality"
        )

    def to_dict(self) -> Dict[str, str]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "page_size": self.page_size.value,
            "orientation": self.orientation.value,
            "scaling": self.scaling.value,
            "quality": self.quality.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConversionSettings:
        """
        Deserialize from a dictionary. Missing keys take their defaults.

        Raises:
            ValueError: If a value is not a member of its enum
        """
        kwargs = {
            key: data[key]
            for key in ("page_size", "orientation", "scaling", "quality")
            if data.get(key) is not None
        }
        return cls(**kwargs)


def _coerce(enum_cls: type[Enum], value: Any, field_name: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        pass
    # Accept member names too ("LETTER", "landscape" -> LANDSCAPE)
    if isinstance(value, str) and value.upper() in enum_cls.__members__:
        return enum_cls.__members__[value.upper()]
    allowed = ", ".join(str(m.value) for m in enum_cls)
    raise ValueError(f"{field_name} must be one of [{allowed}]: {value!r}")
