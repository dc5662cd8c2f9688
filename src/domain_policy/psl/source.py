"""Public Suffix List retrieval and tokenization."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional

import requests

PUBLIC_SUFFIX_LIST_URL = "https://publicsuffix.org/list/public_suffix_list.dat"
DEFAULT_FETCH_TIMEOUT = 30.0

_COMMENT_PREFIX = "//"
_WILDCARD_PREFIX = "*."
_EXCEPTION_PREFIX = "!"

LOGGER = logging.getLogger(__name__)


class SuffixRules(NamedTuple):
    """Tokenized Public Suffix List rules.

    Attributes:
        suffixes (List[str]): Exact public suffix rules (``co.uk``).
        wildcards (List[str]): Wildcard rules without the leading ``*.`` marker.
        exceptions (List[str]): Exception rules without the leading ``!`` marker.
    """

    suffixes: List[str]
    wildcards: List[str]
    exceptions: List[str]


class SuffixListError(Exception):
    """Base class for suffix list failures."""


class SuffixListFetchError(SuffixListError):
    """Raised when a suffix list body cannot be retrieved."""

    def __init__(self, source: str, error: Exception) -> None:
        """Initialize a fetch error.

        Args:
            source (str): URL or path that failed to load.
            error (Exception): Underlying transport or filesystem exception.
        """
        super().__init__(f"Public suffix list could not be retrieved from {source}: {error}")
        self.url = source
        self.error = error


def _iter_rule_lines(lines: Iterable[str]) -> Iterable[str]:
    """Yield trimmed rule lines, skipping blanks and comments.

    Args:
        lines (Iterable[str]): Raw list lines.

    Yields:
        str: Candidate rule text.
    """
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith(_COMMENT_PREFIX):
            continue
        yield stripped


def parse_suffix_list(text: str) -> SuffixRules:
    """Tokenize a Public Suffix List body into rule sets.

    Lines are classified by prefix only. Anything that is not a comment,
    wildcard or exception is kept verbatim as an exact suffix rule, so a
    malformed body yields odd entries rather than an error.

    Args:
        text (str): Newline-delimited list body.

    Returns:
        SuffixRules: Exact, wildcard and exception rules in input order.
    """
    suffixes: List[str] = []
    wildcards: List[str] = []
    exceptions: List[str] = []
    for rule in _iter_rule_lines(text.splitlines()):
        if rule.startswith(_WILDCARD_PREFIX):
            wildcards.append(rule[len(_WILDCARD_PREFIX) :])
        elif rule.startswith(_EXCEPTION_PREFIX):
            exceptions.append(rule[len(_EXCEPTION_PREFIX) :])
        else:
            suffixes.append(rule)
    return SuffixRules(suffixes, wildcards, exceptions)


def fetch_suffix_list(
    url: str = PUBLIC_SUFFIX_LIST_URL,
    *,
    session: Optional[object] = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> SuffixRules:
    """Download and tokenize a Public Suffix List.

    Args:
        url (str): List location.
        session (Optional[object]): Object with a ``requests``-compatible ``get``
            method. Defaults to the ``requests`` module itself.
        timeout (float): Request timeout in seconds.

    Returns:
        SuffixRules: Tokenized rules.

    Raises:
        SuffixListFetchError: If the request fails or returns an error status.
    """
    client = session if session is not None else requests
    LOGGER.info("Fetching public suffix list from %s", url)
    try:
        response = client.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as err:
        LOGGER.warning("Public suffix list fetch failed for %s: %s", url, err)
        raise SuffixListFetchError(url, err) from err
    rules = parse_suffix_list(response.text)
    LOGGER.debug(
        "Parsed %d suffixes, %d wildcards, %d exceptions",
        len(rules.suffixes),
        len(rules.wildcards),
        len(rules.exceptions),
    )
    return rules


def load_suffix_list(path: Path | str) -> SuffixRules:
    """Read and tokenize a Public Suffix List from a local file.

    Args:
        path (Path | str): File path.

    Returns:
        SuffixRules: Tokenized rules.

    Raises:
        SuffixListFetchError: If the file cannot be read.
    """
    file_path = Path(path).expanduser()
    LOGGER.info("Loading public suffix list from %s", file_path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as err:
        raise SuffixListFetchError(str(file_path), err) from err
    return parse_suffix_list(text)


def load_suffix_rules(
    source: str,
    *,
    session: Optional[object] = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> SuffixRules:
    """Load rules from a URL or a local path.

    Args:
        source (str): ``http(s)://`` URL or filesystem path.
        session (Optional[object]): Optional HTTP session for URL sources.
        timeout (float): Request timeout in seconds for URL sources.

    Returns:
        SuffixRules: Tokenized rules.
    """
    if source.startswith(("http://", "https://")):
        return fetch_suffix_list(source, session=session, timeout=timeout)
    return load_suffix_list(source)


__all__ = [
    "DEFAULT_FETCH_TIMEOUT",
    "PUBLIC_SUFFIX_LIST_URL",
    "SuffixListError",
    "SuffixListFetchError",
    "SuffixRules",
    "fetch_suffix_list",
    "load_suffix_list",
    "load_suffix_rules",
    "parse_suffix_list",
]
