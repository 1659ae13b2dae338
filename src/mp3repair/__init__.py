"""mp3repair: inspect and repair the metadata of an mp3 music library."""

__version__ = "0.1.0"
