"""Unit tests for measure position CSV export."""

from pathlib import Path

from pmxl.csv_export import default_output_path, format_positions_as_csv, write_positions_csv
from pmxl.models import MeasurePosition


def _positions() -> list[MeasurePosition]:
    return [
        MeasurePosition(number="1", part_id="P1", top=0, left=0, width=200, height=100),
        MeasurePosition(number="2", part_id="P1", top=0, left=200, width=200, height=100),
        MeasurePosition(number="1", part_id="P2", top=100, left=0, width=200, height=100),
    ]


def test_csv_header_row() -> None:
    lines = format_positions_as_csv([]).splitlines()
    assert lines == ["measure_number,part_id,top,left,width,height"]


def test_csv_rows_in_input_order() -> None:
    lines = format_positions_as_csv(_positions()).splitlines()
    assert lines[1:] == [
        "1,P1,0,0,200,100",
        "2,P1,0,200,200,100",
        "1,P2,100,0,200,100",
    ]


def test_csv_quotes_fields_containing_commas() -> None:
    position = MeasurePosition(number="1", part_id="P1,a", top=0, left=0, width=200, height=100)
    lines = format_positions_as_csv([position]).splitlines()
    assert lines[1] == '1,"P1,a",0,0,200,100'


def test_default_output_path_replaces_extension() -> None:
    assert default_output_path("song.musicxml") == "song_measures.csv"


def test_default_output_path_keeps_directory(tmp_path: Path) -> None:
    source = tmp_path / "scores" / "song.xml"
    assert default_output_path(source) == str(tmp_path / "scores" / "song_measures.csv")


def test_default_output_path_only_drops_last_extension() -> None:
    assert default_output_path("song.v2.musicxml") == "song.v2_measures.csv"


def test_write_overwrites_existing_file(tmp_path: Path) -> None:
    out = tmp_path / "positions.csv"
    out.write_text("stale content\n" * 10, encoding="utf-8")

    write_positions_csv(_positions()[:1], out)

    assert out.read_text(encoding="utf-8").splitlines() == [
        "measure_number,part_id,top,left,width,height",
        "1,P1,0,0,200,100",
    ]


def test_default_output_path_keeps_relative_prefix() -> None:
    assert default_output_path("./song.xml") == "./song_measures.csv"
