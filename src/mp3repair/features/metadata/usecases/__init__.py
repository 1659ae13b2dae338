"""Codec use cases: read, compare and write ID3 metadata."""
