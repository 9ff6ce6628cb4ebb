"""Data models for MusicXML extraction results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MusicXMLVersion:
    """MusicXML format version declared on the score root."""

    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


@dataclass(frozen=True)
class PartInfo:
    """One ``score-part`` entry from the part list."""

    id: str
    name: str | None = None
    abbreviation: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.id


@dataclass(frozen=True)
class MeasurePosition:
    """
    Placeholder box for one measure of one part.

    Coordinates are derived from the part and measure indices only; they
    carry no layout meaning.
    """

    number: str
    part_id: str
    top: int
    left: int
    width: int
    height: int


@dataclass(frozen=True)
class MusicXMLSummary:
    """Descriptive metadata for a score."""

    title: str | None
    composer: str | None
    opus: str | None
    movement: str | None
    parts: tuple[PartInfo, ...]
    measure_count: int  # first part only


@dataclass(frozen=True)
class MusicXMLParseResult:
    """Everything extracted from one MusicXML document."""

    version: MusicXMLVersion
    summary: MusicXMLSummary
    measure_positions: tuple[MeasurePosition, ...]
