"""DMARC parsing and lookup errors."""

from __future__ import annotations

from typing import List, Sequence


class DmarcError(Exception):
    """Base class for DMARC failures.

    Attributes:
        temporary (bool): Whether retrying the operation may succeed.
    """

    temporary = False


class DmarcSyntaxError(DmarcError, ValueError):
    """Raised when a record has an invalid mandatory or strictly validated tag."""


class DuplicateTagError(DmarcSyntaxError):
    """Raised when a known tag is repeated with a conflicting value."""

    def __init__(self, tag: str) -> None:
        """Initialize the error.

        Args:
            tag (str): Repeated tag name.
        """
        super().__init__(f"dmarc: duplicate parameter '{tag}'")
        self.tag = tag


class NoPolicyError(DmarcError):
    """Raised when a domain publishes no DMARC record."""

    def __init__(self, domain: str) -> None:
        """Initialize the error.

        Args:
            domain (str): Domain without a policy.
        """
        super().__init__(f"dmarc: no policy found for domain {domain}")
        self.domain = domain


class MultipleRecordsError(DmarcError):
    """Raised when a domain publishes more than one DMARC record."""

    def __init__(self, domain: str, records: Sequence[str]) -> None:
        """Initialize the error.

        Args:
            domain (str): Domain with conflicting records.
            records (Sequence[str]): Raw DMARC TXT values found.
        """
        super().__init__(
            f"dmarc: multiple DMARC records found for domain {domain} ({len(records)} records)"
        )
        self.domain = domain
        self.records: List[str] = list(records)


class TemporaryFailureError(DmarcError):
    """Raised when the TXT lookup fails for a reason other than a missing name."""

    temporary = True

    def __init__(self, domain: str, error: Exception) -> None:
        """Initialize the error.

        Args:
            domain (str): Domain being looked up.
            error (Exception): Underlying transport exception.
        """
        super().__init__(f"dmarc: failed to lookup TXT record for {domain}: {error}")
        self.domain = domain
        self.error = error


def is_temporary_failure(error: BaseException) -> bool:
    """Check whether an error signals a retryable lookup failure.

    Args:
        error (BaseException): Error raised by a lookup.

    Returns:
        bool: True for temporary failures.
    """
    return bool(getattr(error, "temporary", False)) and isinstance(error, DmarcError)


__all__ = [
    "DmarcError",
    "DmarcSyntaxError",
    "DuplicateTagError",
    "MultipleRecordsError",
    "NoPolicyError",
    "TemporaryFailureError",
    "is_temporary_failure",
]
