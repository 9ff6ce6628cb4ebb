"""MusicXML parser: extracts version, summary and measure positions from a score."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from pmxl.config import (
    ATTR_PREFIX,
    DEFAULT_LAYOUT,
    DEFAULT_MAJOR_VERSION,
    DEFAULT_MINOR_VERSION,
    DEFAULT_VERSION,
    FORCE_LIST_ELEMENTS,
    ROOT_ELEMENT,
    TEXT_KEY,
    LayoutConfig,
)
from pmxl.errors import Err, MusicXMLParseError, Ok, ParseErrorKind, ParseOutcome
from pmxl.models import (
    MeasurePosition,
    MusicXMLParseResult,
    MusicXMLSummary,
    MusicXMLVersion,
    PartInfo,
)

logger = logging.getLogger(__name__)

NOT_MUSICXML_MESSAGE = f"Not a valid MusicXML file (missing {ROOT_ELEMENT} element)"


# ── Tree access helpers ──────────────────────────────────────────────────────
# The parsed tree is loosely shaped: an element is a dict, a plain string
# (text only), a list (forced or repeated), or None (empty element).

def _child(node: Any, key: str) -> Any:
    if isinstance(node, dict):
        return node.get(key)
    return None


def _attr(node: Any, name: str) -> str | None:
    value = _child(node, f"{ATTR_PREFIX}{name}")
    return value or None


def _text(node: Any) -> str | None:
    """Return the text content of an element, or None if it has none."""
    if isinstance(node, list):
        return _text(node[0]) if node else None
    if isinstance(node, str):
        return node or None
    if isinstance(node, dict):
        return node.get(TEXT_KEY) or None
    return None


def _as_list(node: Any) -> list[Any]:
    if node is None:
        return []
    if isinstance(node, list):
        return node
    return [node]


def _parse_version_field(field: str | None, default: int) -> int:
    try:
        value = int(field.strip()) if field is not None else 0
    except ValueError:
        value = 0
    return value or default


# ── Extraction ──────────────────────────────────────────────────────────────

def extract_version(root: dict[str, Any]) -> MusicXMLVersion:
    """
    Read the ``version`` attribute of the score root.

    Each field falls back independently: a non-numeric or zero major becomes
    4, a non-numeric, zero or missing minor becomes 0.
    """
    version_attr = _attr(root, "version") or DEFAULT_VERSION
    fields = version_attr.split(".")
    minor = fields[1] if len(fields) > 1 else None
    return MusicXMLVersion(
        major=_parse_version_field(fields[0], DEFAULT_MAJOR_VERSION),
        minor=_parse_version_field(minor, DEFAULT_MINOR_VERSION),
    )


def _extract_title(root: dict[str, Any]) -> str | None:
    work_title = _text(_child(_child(root, "work"), "work-title"))
    if work_title:
        return work_title
    return _text(_child(root, "movement-title"))


def _extract_composer(root: dict[str, Any]) -> str | None:
    creators = _as_list(_child(_child(root, "identification"), "creator"))
    for creator in creators:
        if _attr(creator, "type") == "composer":
            return _text(creator)
    return None


def _extract_parts(root: dict[str, Any]) -> tuple[PartInfo, ...]:
    score_parts = _as_list(_child(_child(root, "part-list"), "score-part"))
    return tuple(
        PartInfo(
            id=_attr(score_part, "id") or "",
            name=_text(_child(score_part, "part-name")),
            abbreviation=_text(_child(score_part, "part-abbreviation")),
        )
        for score_part in score_parts
    )


def _measures_of(part: Any) -> list[Any]:
    return _as_list(_child(part, "measure"))


def extract_summary(root: dict[str, Any]) -> MusicXMLSummary:
    """Collect descriptive metadata; the measure count covers the first part only."""
    parts = _as_list(_child(root, "part"))
    measure_count = len(_measures_of(parts[0])) if parts else 0

    return MusicXMLSummary(
        title=_extract_title(root),
        composer=_extract_composer(root),
        opus=_text(_child(_child(root, "work"), "opus")),
        movement=_text(_child(root, "movement-number")),
        parts=_extract_parts(root),
        measure_count=measure_count,
    )


def extract_measure_positions(
    root: dict[str, Any],
    layout: LayoutConfig = DEFAULT_LAYOUT,
) -> tuple[MeasurePosition, ...]:
    """
    Compute a placeholder box for every measure of every part.

    Positions are a grid indexed by (part, measure); real coordinates would
    require rendering the score.
    """
    positions: list[MeasurePosition] = []
    for part_index, part in enumerate(_as_list(_child(root, "part"))):
        part_id = _attr(part, "id") or f"Part{part_index + 1}"

        for measure_index, measure in enumerate(_measures_of(part)):
            positions.append(
                MeasurePosition(
                    number=_attr(measure, "number") or f"{measure_index + 1}",
                    part_id=part_id,
                    top=part_index * layout.part_spacing,
                    left=measure_index * layout.measure_spacing,
                    width=layout.measure_width,
                    height=layout.measure_height,
                )
            )
    return tuple(positions)


# ── Public API ──────────────────────────────────────────────────────────────

def _fail(kind: ParseErrorKind, message: str) -> Err:
    logger.info("%s: %s", kind.value, message)
    return Err(MusicXMLParseError(kind=kind, message=message))


def parse_musicxml_content(
    content: str,
    layout: LayoutConfig = DEFAULT_LAYOUT,
) -> ParseOutcome:
    """
    Parse MusicXML text.

    Args:
        content: Raw document text.
        layout:  Geometry for the synthetic measure positions.

    Returns:
        ``Ok`` wrapping a MusicXMLParseResult, or ``Err`` wrapping a
        MusicXMLParseError of kind ``invalid_xml`` or ``not_musicxml``.
        Never raises.
    """
    logger.debug("Parsing %d characters of MusicXML", len(content))

    try:
        tree = (
            xmltodict.parse(
                content,
                attr_prefix=ATTR_PREFIX,
                force_list=FORCE_LIST_ELEMENTS,
            )
            if content.strip()
            else {}
        )
    except (ExpatError, ValueError) as exc:
        return _fail(ParseErrorKind.INVALID_XML, f"Failed to parse XML: {exc}")

    root = tree.get(ROOT_ELEMENT)
    if not root:
        return _fail(ParseErrorKind.NOT_MUSICXML, NOT_MUSICXML_MESSAGE)
    if not isinstance(root, dict):
        root = {}

    result = MusicXMLParseResult(
        version=extract_version(root),
        summary=extract_summary(root),
        measure_positions=extract_measure_positions(root, layout),
    )
    logger.debug(
        "Extracted %d part(s) and %d measure position(s)",
        len(result.summary.parts),
        len(result.measure_positions),
    )
    return Ok(result)


def parse_musicxml_file(
    file_path: str | Path,
    layout: LayoutConfig = DEFAULT_LAYOUT,
) -> ParseOutcome:
    """
    Read a MusicXML file from disk and parse it.

    A missing or unreadable file yields an ``Err`` of kind
    ``file_read_error``; otherwise see :func:`parse_musicxml_content`.
    """
    path = Path(file_path)
    logger.debug("Reading MusicXML file: %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return _fail(ParseErrorKind.FILE_READ_ERROR, f"Failed to read file: {exc}")
    return parse_musicxml_content(content, layout)
