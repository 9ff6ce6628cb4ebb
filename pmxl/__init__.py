"""pmxl: MusicXML metadata extraction CLI."""

__version__ = "0.1.0"
