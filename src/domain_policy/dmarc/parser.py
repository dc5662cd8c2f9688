"""DMARC TXT record parsing (RFC 7489 section 6.3).

Syntax errors in ``pct``, ``ri`` and ``sp`` are replaced by their defaults
instead of rejecting the record, following the RFC advice to discard syntax
errors outside the ``v`` and ``p`` tags. Errors in every other known tag
reject the record.
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Dict, List, Optional, Tuple

from .errors import DmarcSyntaxError, DuplicateTagError
from .models import (
    DEFAULT_REPORT_INTERVAL,
    FAILURE_OPTION_TOKENS,
    AlignmentMode,
    DmarcRecord,
    FailureOptions,
    Policy,
    ReportFormat,
)

DMARC_VERSION = "dmarc1"
DEFAULT_PERCENT = 100

RFC_TAGS = frozenset({"v", "p", "adkim", "aspf", "fo", "pct", "rf", "ri", "rua", "ruf", "sp"})

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_tags(record: str) -> Dict[str, str]:
    """Split a record into a tag/value mapping.

    Tags and values are trimmed and lower-cased. Segments without ``=`` are
    dropped and only the first ``=`` separates a tag from its value.

    Args:
        record (str): Raw TXT record.

    Returns:
        Dict[str, str]: Mapping of tag to value.

    Raises:
        DuplicateTagError: If a known tag repeats with a different value.
    """
    tags: Dict[str, str] = {}
    for segment in record.split(";"):
        if "=" not in segment:
            continue
        tag, value = segment.split("=", 1)
        tag = tag.strip().lower()
        value = value.strip().lower()
        if tag in tags and tag in RFC_TAGS and tags[tag] != value:
            raise DuplicateTagError(tag)
        tags[tag] = value
    return tags


def _parse_int(value: str) -> Optional[int]:
    """Parse a signed 64-bit decimal integer, returning None for anything else.

    Args:
        value (str): Tag value.

    Returns:
        Optional[int]: Parsed integer, or None when malformed or out of range.
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        return None
    parsed = int(value)
    if parsed < _INT64_MIN or parsed > _INT64_MAX:
        return None
    return parsed


def _parse_policy(value: str, tag: str) -> Policy:
    """Parse a policy literal.

    Args:
        value (str): Tag value.
        tag (str): Tag name for error messages.

    Returns:
        Policy: Parsed policy.

    Raises:
        DmarcSyntaxError: If the value is not a known policy.
    """
    try:
        return Policy(value)
    except ValueError as exc:
        raise DmarcSyntaxError(f"dmarc: invalid policy for parameter '{tag}'") from exc


def _parse_alignment(value: str, tag: str) -> AlignmentMode:
    """Parse an alignment mode literal.

    Args:
        value (str): Tag value.
        tag (str): Tag name for error messages.

    Returns:
        AlignmentMode: Parsed mode.

    Raises:
        DmarcSyntaxError: If the value is not ``r`` or ``s``.
    """
    try:
        return AlignmentMode(value)
    except ValueError as exc:
        raise DmarcSyntaxError(f"dmarc: invalid alignment mode for parameter '{tag}'") from exc


def _parse_failure_options(value: str) -> FailureOptions:
    """Parse a colon-separated ``fo`` value.

    Args:
        value (str): Tag value.

    Returns:
        FailureOptions: Combined flags.

    Raises:
        DmarcSyntaxError: If any token is unknown.
    """
    options = FailureOptions(0)
    for token in value.split(":"):
        flag = FAILURE_OPTION_TOKENS.get(token.strip())
        if flag is None:
            raise DmarcSyntaxError("dmarc: invalid failure option in parameter 'fo'")
        options |= flag
    return options


def _parse_percent(value: str) -> int:
    """Parse ``pct``; unparseable values fall back to 100.

    Args:
        value (str): Tag value.

    Returns:
        int: Percentage between 0 and 100.

    Raises:
        DmarcSyntaxError: If a parsed value is out of range.
    """
    percent = _parse_int(value)
    if percent is None:
        percent = DEFAULT_PERCENT
    if percent < 0 or percent > 100:
        raise DmarcSyntaxError(f"dmarc: invalid parameter 'pct': value {percent} out of bounds")
    return percent


def _parse_report_formats(value: str) -> Tuple[ReportFormat, ...]:
    """Parse a colon-separated ``rf`` value.

    Args:
        value (str): Tag value.

    Returns:
        Tuple[ReportFormat, ...]: Formats in record order.

    Raises:
        DmarcSyntaxError: If any format is unknown.
    """
    formats: List[ReportFormat] = []
    for token in value.split(":"):
        try:
            formats.append(ReportFormat(token.strip()))
        except ValueError as exc:
            raise DmarcSyntaxError("dmarc: invalid parameter 'rf'") from exc
    return tuple(formats)


def _parse_report_interval(value: str) -> timedelta:
    """Parse ``ri`` seconds; unparseable or unrepresentable values fall back to one day.

    Args:
        value (str): Tag value.

    Returns:
        timedelta: Report interval.

    Raises:
        DmarcSyntaxError: If a parsed value is zero or negative.
    """
    seconds = _parse_int(value)
    if seconds is None:
        return DEFAULT_REPORT_INTERVAL
    if seconds <= 0:
        raise DmarcSyntaxError("dmarc: invalid parameter 'ri': negative or zero duration")
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        return DEFAULT_REPORT_INTERVAL


def _parse_uri_list(value: str) -> Tuple[str, ...]:
    """Split a comma-separated URI list.

    Args:
        value (str): Tag value.

    Returns:
        Tuple[str, ...]: Trimmed URIs, empty entries included.
    """
    return tuple(uri.strip() for uri in value.split(","))


def parse_dmarc_record(record: str) -> DmarcRecord:
    """Parse a DMARC TXT record.

    Args:
        record (str): Raw TXT value, e.g. ``v=DMARC1; p=reject``.

    Returns:
        DmarcRecord: Parsed record with defaults applied.

    Raises:
        DmarcSyntaxError: If the record is not a valid DMARC1 policy.
    """
    tags = parse_tags(record)

    if tags.get("v") != DMARC_VERSION:
        raise DmarcSyntaxError("dmarc: unsupported DMARC version")

    if "p" not in tags:
        raise DmarcSyntaxError("dmarc: record is missing a 'p' parameter")
    policy = _parse_policy(tags["p"], "p")

    dkim_alignment = AlignmentMode.RELAXED
    if "adkim" in tags:
        dkim_alignment = _parse_alignment(tags["adkim"], "adkim")

    spf_alignment = AlignmentMode.RELAXED
    if "aspf" in tags:
        spf_alignment = _parse_alignment(tags["aspf"], "aspf")

    failure_options = FailureOptions(0)
    if "fo" in tags:
        failure_options = _parse_failure_options(tags["fo"])

    percent = None
    if "pct" in tags:
        percent = _parse_percent(tags["pct"])

    report_formats: Tuple[ReportFormat, ...] = ()
    if "rf" in tags:
        report_formats = _parse_report_formats(tags["rf"])

    report_interval = DEFAULT_REPORT_INTERVAL
    if "ri" in tags:
        report_interval = _parse_report_interval(tags["ri"])

    report_uri_aggregate: Tuple[str, ...] = ()
    if "rua" in tags:
        report_uri_aggregate = _parse_uri_list(tags["rua"])

    report_uri_failure: Tuple[str, ...] = ()
    if "ruf" in tags:
        report_uri_failure = _parse_uri_list(tags["ruf"])

    subdomain_policy = policy
    if "sp" in tags:
        # Empty or nonstandard sp values are treated as absent.
        try:
            subdomain_policy = Policy(tags["sp"])
        except ValueError:
            subdomain_policy = policy

    return DmarcRecord(
        policy=policy,
        subdomain_policy=subdomain_policy,
        dkim_alignment=dkim_alignment,
        spf_alignment=spf_alignment,
        failure_options=failure_options,
        percent=percent,
        report_formats=report_formats,
        report_interval=report_interval,
        report_uri_aggregate=report_uri_aggregate,
        report_uri_failure=report_uri_failure,
    )


__all__ = ["DMARC_VERSION", "RFC_TAGS", "parse_dmarc_record", "parse_tags"]
