"""Jinja2 templates for text output."""
