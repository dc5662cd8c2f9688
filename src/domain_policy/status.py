"""Outcome statuses and exit code mapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .dmarc.errors import DmarcSyntaxError, MultipleRecordsError, NoPolicyError
from .dns_resolver import DnsLookupError
from .psl.matcher import RegistrableDomainNotFoundError
from .psl.source import SuffixListFetchError


class Status(Enum):
    """Known outcome statuses."""

    OK = "OK"
    NO_POLICY = "NO_POLICY"
    NOT_FOUND = "NOT_FOUND"
    MULTIPLE_RECORDS = "MULTIPLE_RECORDS"
    INVALID = "INVALID"
    TEMPFAIL = "TEMPFAIL"


@dataclass(frozen=True)
class ExitCodes:
    """Exit codes aligned with status values.

    Attributes:
        OK (int): A result was produced.
        MISSING (int): No policy or no registrable domain exists.
        INVALID (int): A record is malformed or ambiguous.
        TEMPFAIL (int): A transport failure that may be retried.
    """

    OK: int = 0
    MISSING: int = 1
    INVALID: int = 2
    TEMPFAIL: int = 3


def coerce_status(status: Union[Status, str]) -> Status:
    """Normalize a status string or enum into a Status value.

    Args:
        status (Status | str): Status enum or string value.

    Returns:
        Status: Normalized Status value.

    Raises:
        ValueError: If the string is not a known status.
    """
    if isinstance(status, Status):
        return status
    return Status(status)


def status_for_error(error: BaseException) -> Status:
    """Classify an error raised by a lookup, parse or resolution.

    Args:
        error (BaseException): Raised error.

    Returns:
        Status: Matching status. Other errors map to TEMPFAIL when flagged
            temporary and to INVALID otherwise.
    """
    if isinstance(error, NoPolicyError):
        return Status.NO_POLICY
    if isinstance(error, RegistrableDomainNotFoundError):
        return Status.NOT_FOUND
    if isinstance(error, MultipleRecordsError):
        return Status.MULTIPLE_RECORDS
    if isinstance(error, DmarcSyntaxError):
        return Status.INVALID
    if isinstance(error, (SuffixListFetchError, DnsLookupError)):
        return Status.TEMPFAIL
    return Status.TEMPFAIL if getattr(error, "temporary", False) else Status.INVALID


def exit_code_for_status(status: Union[Status, str]) -> int:
    """Map a status value to an exit code.

    Args:
        status (Status | str): Status enum or string value.

    Returns:
        int: Exit code for the status.
    """
    normalized = coerce_status(status)
    if normalized is Status.OK:
        return ExitCodes.OK
    if normalized in (Status.NO_POLICY, Status.NOT_FOUND):
        return ExitCodes.MISSING
    if normalized in (Status.INVALID, Status.MULTIPLE_RECORDS):
        return ExitCodes.INVALID
    return ExitCodes.TEMPFAIL


__all__ = ["ExitCodes", "Status", "coerce_status", "exit_code_for_status", "status_for_error"]
