"""DNS resolver test support."""

from __future__ import annotations

from typing import Any

import dns.resolver
import pytest


class DummyResolver:
    """Minimal dnspython-compatible resolver test double.

    Attributes:
        answers (dict[tuple[str, str], Any]): Lookup results by (name, record_type).
        calls (list[tuple[str, str, dict]]): Recorded resolve calls.
        nameservers (list[str]): Assigned resolver nameservers.
        timeout (float | None): Per-query timeout.
        lifetime (float | None): Query lifetime.
    """

    def __init__(self, answers: dict[tuple[str, str], Any]):
        """Initialize a dummy resolver.

        Args:
            answers (dict[tuple[str, str], Any]): Lookup responses keyed by query tuple.
        """
        self.answers = answers
        self.calls: list[tuple[str, str, dict]] = []
        self.nameservers: list[str] = []
        self.timeout: float | None = None
        self.lifetime: float | None = None

    def resolve(self, name: str, record_type: str, **kwargs: Any) -> Any:
        """Resolve a record using predefined answers.

        Args:
            name (str): DNS name to resolve.
            record_type (str): DNS record type.
            **kwargs (Any): Extra dnspython options, recorded for assertions.

        Returns:
            Any: Preconfigured answer payload.

        Raises:
            Exception: Any configured exception value for the query key.
        """
        self.calls.append((name, record_type, kwargs))
        result = self.answers[(name, record_type)]
        if isinstance(result, Exception):
            raise result
        return result


def make_dummy_resolver(
    monkeypatch: pytest.MonkeyPatch,
    answers: dict[tuple[str, str], Any] | None = None,
) -> DummyResolver:
    """Create and patch a dummy dnspython resolver.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
        answers (dict[tuple[str, str], Any] | None): Optional preloaded lookup answers.

    Returns:
        DummyResolver: Patched dummy resolver instance.
    """
    dummy = DummyResolver(answers or {})
    monkeypatch.setattr(dns.resolver, "Resolver", lambda: dummy)
    return dummy


__all__ = ["DummyResolver", "make_dummy_resolver"]
