"""DMARC record models (RFC 7489 section 6.3)."""

from __future__ import annotations

import dataclasses
from datetime import timedelta
from enum import Enum, Flag
from typing import Dict, List, Optional, Tuple

DEFAULT_REPORT_INTERVAL = timedelta(seconds=86400)


class AlignmentMode(Enum):
    """Identifier alignment modes (``adkim``/``aspf``)."""

    STRICT = "s"
    RELAXED = "r"


class Policy(Enum):
    """Requested mail receiver policies (``p``/``sp``)."""

    NONE = "none"
    QUARANTINE = "quarantine"
    REJECT = "reject"


class ReportFormat(Enum):
    """Failure report formats (``rf``)."""

    AFRF = "afrf"
    IODEF = "iodef"


class FailureOptions(Flag):
    """Failure reporting options (``fo``).

    An empty value means the record did not specify any option.
    """

    ALL = 1
    ANY = 2
    DKIM = 4
    SPF = 8


FAILURE_OPTION_TOKENS: Dict[str, FailureOptions] = {
    "0": FailureOptions.ALL,
    "1": FailureOptions.ANY,
    "d": FailureOptions.DKIM,
    "s": FailureOptions.SPF,
}


def failure_option_tokens(options: FailureOptions) -> List[str]:
    """Render failure options back into their record tokens.

    Args:
        options (FailureOptions): Flag set to render.

    Returns:
        List[str]: Tokens in canonical ``0``, ``1``, ``d``, ``s`` order.
    """
    return [token for token, flag in FAILURE_OPTION_TOKENS.items() if flag in options]


@dataclasses.dataclass(frozen=True)
class DmarcRecord:
    """A parsed DMARC policy record.

    Attributes:
        policy (Policy): Requested policy for the domain (``p``).
        subdomain_policy (Policy): Requested policy for subdomains (``sp``).
        dkim_alignment (AlignmentMode): DKIM alignment mode (``adkim``).
        spf_alignment (AlignmentMode): SPF alignment mode (``aspf``).
        failure_options (FailureOptions): Failure reporting options (``fo``).
        percent (Optional[int]): Sampling rate (``pct``), None when absent.
        report_formats (Tuple[ReportFormat, ...]): Failure report formats (``rf``).
        report_interval (timedelta): Aggregate report interval (``ri``).
        report_uri_aggregate (Tuple[str, ...]): Aggregate report URIs (``rua``).
        report_uri_failure (Tuple[str, ...]): Failure report URIs (``ruf``).
    """

    policy: Policy
    subdomain_policy: Policy
    dkim_alignment: AlignmentMode = AlignmentMode.RELAXED
    spf_alignment: AlignmentMode = AlignmentMode.RELAXED
    failure_options: FailureOptions = FailureOptions(0)
    percent: Optional[int] = None
    report_formats: Tuple[ReportFormat, ...] = ()
    report_interval: timedelta = DEFAULT_REPORT_INTERVAL
    report_uri_aggregate: Tuple[str, ...] = ()
    report_uri_failure: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        """Serialize the record into JSON-compatible values.

        Returns:
            Dict[str, object]: Field mapping keyed by DMARC tag name.
        """
        return {
            "p": self.policy.value,
            "sp": self.subdomain_policy.value,
            "adkim": self.dkim_alignment.value,
            "aspf": self.spf_alignment.value,
            "fo": failure_option_tokens(self.failure_options),
            "pct": self.percent,
            "rf": [fmt.value for fmt in self.report_formats],
            "ri": int(self.report_interval.total_seconds()),
            "rua": list(self.report_uri_aggregate),
            "ruf": list(self.report_uri_failure),
        }


__all__ = [
    "AlignmentMode",
    "DEFAULT_REPORT_INTERVAL",
    "DmarcRecord",
    "FAILURE_OPTION_TOKENS",
    "FailureOptions",
    "Policy",
    "ReportFormat",
    "failure_option_tokens",
]
