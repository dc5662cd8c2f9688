"""Shared fixtures for CLI tests."""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest

from domain_policy.psl import SuffixRules
from domain_policy.settings import Settings

from tests.support import FakeTxtLookup, sample_rules


@pytest.fixture
def cli_module():
    """Load the CLI module under test.

    Returns:
        module: Imported ``domain_policy.cli`` module.
    """
    import domain_policy.cli as cli

    return cli


@pytest.fixture
def patch_settings(
    monkeypatch: pytest.MonkeyPatch,
    cli_module: Any,
) -> list[Settings]:
    """Use default settings and record the effective settings of each run.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
        cli_module (Any): Imported CLI module.

    Returns:
        list[Settings]: Settings passed to ``build_resolver``, in call order.
    """
    seen: list[Settings] = []
    monkeypatch.setattr(cli_module, "load_settings", lambda _path=None: Settings())
    monkeypatch.setattr(
        Settings,
        "build_resolver",
        lambda self: seen.append(self) or SimpleNamespace(get_txt=FakeTxtLookup()),
    )
    return seen


@pytest.fixture
def patch_txt_answers(
    monkeypatch: pytest.MonkeyPatch,
    patch_settings: list[Settings],
) -> Callable[[dict], FakeTxtLookup]:
    """Serve canned TXT answers through the resolver built by the CLI.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
        patch_settings (list[Settings]): Settings recorder fixture.

    Returns:
        Callable[[dict], FakeTxtLookup]: Patch function returning the lookup.
    """

    def _patch(answers: dict) -> FakeTxtLookup:
        lookup = FakeTxtLookup(answers)

        def _build(self: Settings) -> SimpleNamespace:
            patch_settings.append(self)
            return SimpleNamespace(get_txt=lookup)

        monkeypatch.setattr(Settings, "build_resolver", _build)
        return lookup

    return _patch


@pytest.fixture
def patch_suffix_rules(
    monkeypatch: pytest.MonkeyPatch,
    cli_module: Any,
) -> list[str]:
    """Serve the sample suffix list instead of downloading one.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
        cli_module (Any): Imported CLI module.

    Returns:
        list[str]: Requested suffix list sources, in call order.
    """
    sources: list[str] = []

    def _load(source: str, **_kwargs: Any) -> SuffixRules:
        sources.append(source)
        return sample_rules()

    monkeypatch.setattr(cli_module, "load_suffix_rules", _load)
    return sources
