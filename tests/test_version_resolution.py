"""Version resolution regression tests."""

from __future__ import annotations

from pathlib import Path

import domain_policy


def test_source_checkout_prefers_source_version() -> None:
    assert domain_policy._is_source_checkout(Path(domain_policy.__file__))
    assert domain_policy.__version__ == "0.3.0"


def test_resolve_version_uses_metadata_outside_source_checkout(monkeypatch) -> None:
    monkeypatch.setattr(domain_policy, "_is_source_checkout", lambda _path: False)
    monkeypatch.setattr(domain_policy, "version", lambda _name: "9.9.9")

    assert domain_policy._resolve_version() == "9.9.9"


def test_resolve_version_falls_back_when_metadata_missing(monkeypatch) -> None:
    monkeypatch.setattr(domain_policy, "_is_source_checkout", lambda _path: False)

    def _raise(_name: str) -> str:
        raise domain_policy.PackageNotFoundError

    monkeypatch.setattr(domain_policy, "version", _raise)

    assert domain_policy._resolve_version() == "0.3.0"
