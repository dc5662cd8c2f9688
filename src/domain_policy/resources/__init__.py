"""Packaged data files (JSON Schema and output templates)."""
