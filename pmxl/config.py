"""Parser settings and placeholder layout geometry."""

from dataclasses import dataclass
from typing import Final

#: Root element of a partwise MusicXML document.
ROOT_ELEMENT: Final[str] = "score-partwise"

#: Prefix that separates attributes from child elements in the parsed tree.
ATTR_PREFIX: Final[str] = "@_"

#: Key holding an element's text when it also carries attributes.
TEXT_KEY: Final[str] = "#text"

#: Elements that always parse to a list, even when they occur once.
FORCE_LIST_ELEMENTS: Final[tuple[str, ...]] = ("part", "measure", "score-part")

DEFAULT_VERSION: Final[str] = "4.0"
DEFAULT_MAJOR_VERSION: Final[int] = 4
DEFAULT_MINOR_VERSION: Final[int] = 0


@dataclass(frozen=True)
class LayoutConfig:
    """
    Geometry for synthetic measure positions.

    Attributes:
        part_spacing:    Vertical offset between consecutive parts.
        measure_spacing: Horizontal offset between consecutive measures.
        measure_width:   Width reported for every measure.
        measure_height:  Height reported for every measure.
    """

    part_spacing: int = 100
    measure_spacing: int = 200
    measure_width: int = 200
    measure_height: int = 100


DEFAULT_LAYOUT: Final[LayoutConfig] = LayoutConfig()
