"""Application layer wiring features into commands."""
