"""DMARC record retrieval from DNS."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

import dns.exception
import dns.resolver

from ..dns_resolver import DnsLookupError, DnsNameNotFoundError, DnsResolver
from .errors import MultipleRecordsError, NoPolicyError, TemporaryFailureError
from .models import DmarcRecord
from .parser import parse_dmarc_record

DMARC_RECORD_PREFIX = "v=DMARC1"
DMARC_LABEL = "_dmarc"

TxtLookup = Callable[[str], List[str]]

LOGGER = logging.getLogger(__name__)


def dmarc_record_name(domain: str) -> str:
    """Build the DNS name holding a domain's DMARC record.

    Args:
        domain (str): Domain name.

    Returns:
        str: ``_dmarc.<domain>``.
    """
    return f"{DMARC_LABEL}.{domain}"


def _fetch_txt(domain: str, lookup_txt: TxtLookup) -> List[str]:
    """Fetch TXT values for a domain's DMARC name.

    Args:
        domain (str): Domain being looked up.
        lookup_txt (TxtLookup): TXT lookup callable.

    Returns:
        List[str]: TXT values.

    Raises:
        NoPolicyError: If the DMARC name does not exist.
        TemporaryFailureError: If the lookup fails for any other reason.
    """
    name = dmarc_record_name(domain)
    try:
        return list(lookup_txt(name))
    except (DnsNameNotFoundError, dns.resolver.NXDOMAIN) as err:
        LOGGER.debug("%s does not exist", name)
        raise NoPolicyError(domain) from err
    except (DnsLookupError, dns.exception.DNSException, OSError) as err:
        raise TemporaryFailureError(domain, err) from err


def lookup_dmarc_record(domain: str, lookup_txt: Optional[TxtLookup] = None) -> DmarcRecord:
    """Look up and parse the DMARC record published for a domain.

    Args:
        domain (str): Domain to query.
        lookup_txt (Optional[TxtLookup]): TXT lookup callable. Defaults to
            ``DnsResolver().get_txt``.

    Returns:
        DmarcRecord: The single DMARC record published for the domain.

    Raises:
        NoPolicyError: If no DMARC record is published.
        MultipleRecordsError: If more than one DMARC record is published.
        TemporaryFailureError: If the DNS lookup fails.
        DmarcSyntaxError: If a DMARC record cannot be parsed.
    """
    if lookup_txt is None:
        lookup_txt = DnsResolver().get_txt
    LOGGER.info("Looking up DMARC record for %s", domain)
    txts = _fetch_txt(domain, lookup_txt)
    candidates = [txt for txt in txts if txt.startswith(DMARC_RECORD_PREFIX)]
    LOGGER.debug("Found %d TXT values, %d DMARC candidates", len(txts), len(candidates))
    records = [parse_dmarc_record(txt) for txt in candidates]
    if not records:
        raise NoPolicyError(domain)
    if len(records) > 1:
        raise MultipleRecordsError(domain, candidates)
    return records[0]


__all__ = [
    "DMARC_LABEL",
    "DMARC_RECORD_PREFIX",
    "TxtLookup",
    "dmarc_record_name",
    "lookup_dmarc_record",
]
