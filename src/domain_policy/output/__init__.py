"""Output rendering for CLI results."""

from __future__ import annotations

import json

from .serialize import (
    discovery_payload,
    error_payload,
    record_payload,
    registrable_domain_entry,
    registrable_domains_payload,
)
from .templates import render_template

_TEXT_TEMPLATES = {
    "record": "record.txt.j2",
    "discovery": "discovery.txt.j2",
    "etld": "etld.txt.j2",
    "error": "error.txt.j2",
}


def to_json(payload: dict) -> str:
    """Render a payload as indented JSON.

    Args:
        payload (dict): Serializable payload.

    Returns:
        str: JSON document.
    """
    return json.dumps(payload, indent=2)


def to_text(kind: str, payload: dict) -> str:
    """Render a payload as text.

    Args:
        kind (str): Payload kind (``record``, ``discovery``, ``etld`` or ``error``).
        payload (dict): Serializable payload.

    Returns:
        str: Rendered text.

    Raises:
        ValueError: If the kind has no template.
    """
    try:
        template_name = _TEXT_TEMPLATES[kind]
    except KeyError as exc:
        raise ValueError(f"Unknown output kind: {kind}") from exc
    return render_template(template_name, payload)


def render(kind: str, payload: dict, output_format: str) -> str:
    """Render a payload in the requested format.

    Args:
        kind (str): Payload kind for text rendering.
        payload (dict): Serializable payload.
        output_format (str): ``text`` or ``json``.

    Returns:
        str: Rendered output.
    """
    if output_format == "json":
        return to_json(payload)
    return to_text(kind, payload)


__all__ = [
    "discovery_payload",
    "error_payload",
    "record_payload",
    "registrable_domain_entry",
    "registrable_domains_payload",
    "render",
    "to_json",
    "to_text",
]
