"""Shared test doubles and sample data."""

from __future__ import annotations

import textwrap
from typing import Dict, List, Union

from domain_policy.psl import SuffixRules, parse_suffix_list

SAMPLE_SUFFIX_LIST = textwrap.dedent(
    """\
    // ===BEGIN ICANN DOMAINS===

    // ad : https://en.wikipedia.org/wiki/.ad
    ad
    nom.ad

    // br
    br
    com.br

    // email
    email

    // gov.in
    in
    gov.in

    // jp
    jp
    *.kawasaki.jp
    *.yokohama.jp
    !city.kawasaki.jp
    !city.yokohama.jp

    // kh, pg
    *.kh
    *.pg

    // uk
    uk
    gov.uk
    co.uk

    // au
    au
    gov.au
    sa.gov.au

    // ck
    *.ck
    !www.ck
    """
)


def sample_rules() -> SuffixRules:
    """Tokenize the sample suffix list.

    Returns:
        SuffixRules: Rules from ``SAMPLE_SUFFIX_LIST``.
    """
    return parse_suffix_list(SAMPLE_SUFFIX_LIST)


class FakeTxtLookup:
    """Callable TXT lookup returning canned answers.

    Attributes:
        answers (Dict[str, Union[List[str], Exception]]): Values or exceptions by name.
        queries (List[str]): Names queried, in order.
    """

    def __init__(self, answers: Dict[str, Union[List[str], Exception]] | None = None) -> None:
        """Initialize the lookup.

        Args:
            answers (Dict[str, Union[List[str], Exception]] | None): Canned answers.
        """
        self.answers = answers or {}
        self.queries: List[str] = []

    def __call__(self, name: str) -> List[str]:
        """Return the canned answer for a name.

        Args:
            name (str): DNS name.

        Returns:
            List[str]: TXT values, empty when the name is unknown.

        Raises:
            Exception: Any configured exception for the name.
        """
        self.queries.append(name)
        result = self.answers.get(name, [])
        if isinstance(result, Exception):
            raise result
        return list(result)


class FakeResponse:
    """Minimal ``requests.Response`` stand-in."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        """Initialize the response.

        Args:
            text (str): Response body.
            error (Exception | None): Exception raised by ``raise_for_status``.
        """
        self.text = text
        self._error = error

    def raise_for_status(self) -> None:
        """Raise the configured HTTP error, if any."""
        if self._error is not None:
            raise self._error


class FakeSession:
    """Minimal ``requests.Session`` stand-in recording calls."""

    def __init__(self, response: FakeResponse | Exception) -> None:
        """Initialize the session.

        Args:
            response (FakeResponse | Exception): Response to return or exception to raise.
        """
        self.response = response
        self.calls: List[tuple[str, float]] = []

    def get(self, url: str, timeout: float) -> FakeResponse:
        """Return the configured response.

        Args:
            url (str): Requested URL.
            timeout (float): Request timeout.

        Returns:
            FakeResponse: Configured response.
        """
        self.calls.append((url, timeout))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


__all__ = ["FakeResponse", "FakeSession", "FakeTxtLookup", "SAMPLE_SUFFIX_LIST", "sample_rules"]
