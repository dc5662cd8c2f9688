"""Public Suffix List loading and registrable domain matching."""

from __future__ import annotations

from .matcher import RegistrableDomainNotFoundError, resolve_registrable_domain
from .source import (
    DEFAULT_FETCH_TIMEOUT,
    PUBLIC_SUFFIX_LIST_URL,
    SuffixListError,
    SuffixListFetchError,
    SuffixRules,
    fetch_suffix_list,
    load_suffix_list,
    load_suffix_rules,
    parse_suffix_list,
)

__all__ = [
    "DEFAULT_FETCH_TIMEOUT",
    "PUBLIC_SUFFIX_LIST_URL",
    "RegistrableDomainNotFoundError",
    "SuffixListError",
    "SuffixListFetchError",
    "SuffixRules",
    "fetch_suffix_list",
    "load_suffix_list",
    "load_suffix_rules",
    "parse_suffix_list",
    "resolve_registrable_domain",
]
