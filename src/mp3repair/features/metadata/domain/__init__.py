"""Domain types and tables for ID3 metadata."""
