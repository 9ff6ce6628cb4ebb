"""Tagged error values returned by the MusicXML parser."""

from dataclasses import dataclass
from enum import Enum

from pmxl.models import MusicXMLParseResult


class ParseErrorKind(str, Enum):
    """Mutually exclusive failure categories."""

    FILE_READ_ERROR = "file_read_error"
    INVALID_XML = "invalid_xml"
    NOT_MUSICXML = "not_musicxml"


@dataclass(frozen=True)
class MusicXMLParseError:
    """A parse failure: its kind plus a human-readable message."""

    kind: ParseErrorKind
    message: str


@dataclass(frozen=True)
class Ok:
    """Successful parse outcome."""

    value: MusicXMLParseResult


@dataclass(frozen=True)
class Err:
    """Failed parse outcome."""

    error: MusicXMLParseError


ParseOutcome = Ok | Err
