"""Registrable domain (eTLD+1) resolution against suffix rules."""

from __future__ import annotations

from typing import Iterable, List

from .source import SuffixListError


class RegistrableDomainNotFoundError(SuffixListError, LookupError):
    """Raised when no suffix rule matches any suffix of a domain."""

    def __init__(self, domain: str) -> None:
        """Initialize the error.

        Args:
            domain (str): Domain that could not be resolved.
        """
        super().__init__(f"no eTLD+1 found for domain: {domain}")
        self.domain = domain


def _with_parent_label(labels: List[str], index: int) -> str:
    """Join the matched suffix together with the label in front of it.

    Args:
        labels (List[str]): Domain labels.
        index (int): Index of the first label of the matched suffix.

    Returns:
        str: The matched suffix plus one label, or the whole domain at index 0.
    """
    if index == 0:
        return ".".join(labels)
    return ".".join(labels[index - 1 :])


def resolve_registrable_domain(
    domain: str,
    suffixes: Iterable[str],
    wildcards: Iterable[str],
    exceptions: Iterable[str],
) -> str:
    """Find the registrable domain (eTLD+1) of ``domain``.

    Candidates are tried from the full domain down to its last label, so the
    first hit is the longest matching suffix. Exact rules compare
    case-insensitively. Wildcard rules match as a plain string suffix of the
    candidate and exception rules as a substring, both case-sensitively;
    callers that want case-insensitive wildcard handling should lower-case
    the domain first. A matched exception is returned as written in the rule.

    Args:
        domain (str): Domain to resolve. Case is preserved in the result.
        suffixes (Iterable[str]): Exact public suffix rules.
        wildcards (Iterable[str]): Wildcard rules without the ``*.`` marker.
        exceptions (Iterable[str]): Exception rules without the ``!`` marker.

    Returns:
        str: The registrable domain.

    Raises:
        RegistrableDomainNotFoundError: If no rule matches.
    """
    exact = {suffix.casefold() for suffix in suffixes}
    wildcard_rules = list(wildcards)
    exception_rules = list(exceptions)
    labels = domain.split(".")
    for index in range(len(labels)):
        candidate = ".".join(labels[index:])
        if candidate.casefold() in exact:
            return _with_parent_label(labels, index)
        if any(candidate.endswith(wildcard) for wildcard in wildcard_rules):
            for exception in exception_rules:
                if exception in candidate:
                    return exception
            return _with_parent_label(labels, index)
    raise RegistrableDomainNotFoundError(domain)


__all__ = ["RegistrableDomainNotFoundError", "resolve_registrable_domain"]
