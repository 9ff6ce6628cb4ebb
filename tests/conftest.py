"""Shared MusicXML fixtures."""

from pathlib import Path

import pytest

SAMPLE_MUSICXML = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE score-partwise PUBLIC "-//Recordare//DTD MusicXML 4.0 Partwise//EN" "http://www.musicxml.org/dtds/partwise.dtd">
<score-partwise version="4.0">
  <work>
    <work-title>Test Composition</work-title>
    <opus>Op. 1</opus>
  </work>
  <identification>
    <creator type="composer">Test Composer</creator>
  </identification>
  <movement-number>1</movement-number>
  <part-list>
    <score-part id="P1">
      <part-name>Piano</part-name>
      <part-abbreviation>Pno.</part-abbreviation>
    </score-part>
    <score-part id="P2">
      <part-name>Violin</part-name>
      <part-abbreviation>Vln.</part-abbreviation>
    </score-part>
  </part-list>
  <part id="P1">
    <measure number="1">
      <note>
        <pitch><step>C</step><octave>4</octave></pitch>
        <duration>4</duration>
        <type>quarter</type>
      </note>
    </measure>
    <measure number="2">
      <note>
        <pitch><step>D</step><octave>4</octave></pitch>
        <duration>4</duration>
        <type>quarter</type>
      </note>
    </measure>
  </part>
  <part id="P2">
    <measure number="1">
      <note>
        <pitch><step>E</step><octave>4</octave></pitch>
        <duration>4</duration>
        <type>quarter</type>
      </note>
    </measure>
    <measure number="2">
      <note>
        <pitch><step>F</step><octave>4</octave></pitch>
        <duration>4</duration>
        <type>quarter</type>
      </note>
    </measure>
  </part>
</score-partwise>"""


@pytest.fixture
def sample_musicxml() -> str:
    return SAMPLE_MUSICXML


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.musicxml"
    path.write_text(SAMPLE_MUSICXML, encoding="utf-8")
    return path
