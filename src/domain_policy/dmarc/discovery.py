"""DMARC policy discovery with organizational domain fallback.

Implements RFC 7489 section 6.6.3: when the author domain publishes no
record, the record of its organizational domain applies, using its
subdomain policy.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Optional

from ..psl.matcher import resolve_registrable_domain
from ..psl.source import SuffixRules
from .errors import NoPolicyError
from .lookup import TxtLookup, lookup_dmarc_record
from .models import DmarcRecord, Policy

LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class PolicyDiscovery:
    """Outcome of DMARC policy discovery.

    Attributes:
        domain (str): Domain the discovery started from.
        policy_domain (str): Domain whose record was used.
        record (DmarcRecord): Record found.
        applied_policy (Policy): Policy that applies to ``domain``.
    """

    domain: str
    policy_domain: str
    record: DmarcRecord
    applied_policy: Policy

    @property
    def used_organizational_domain(self) -> bool:
        """Whether the record came from the organizational domain.

        Returns:
            bool: True when the fallback lookup was used.
        """
        return self.policy_domain != self.domain


def discover_dmarc_policy(
    domain: str,
    suffix_rules: SuffixRules,
    lookup_txt: Optional[TxtLookup] = None,
) -> PolicyDiscovery:
    """Find the DMARC policy that applies to a domain.

    Args:
        domain (str): Author domain.
        suffix_rules (SuffixRules): Public suffix rules used to find the
            organizational domain.
        lookup_txt (Optional[TxtLookup]): TXT lookup callable passed to
            ``lookup_dmarc_record``.

    Returns:
        PolicyDiscovery: Record and the policy applied to ``domain``.

    Raises:
        NoPolicyError: If neither the domain nor its organizational domain
            publishes a record.
        RegistrableDomainNotFoundError: If the organizational domain cannot be
            determined.
    """
    try:
        record = lookup_dmarc_record(domain, lookup_txt)
    except NoPolicyError as err:
        org_domain = resolve_registrable_domain(domain, *suffix_rules)
        if org_domain.lower() == domain.lower():
            raise
        LOGGER.info("No DMARC record for %s, trying organizational domain %s", domain, org_domain)
        try:
            record = lookup_dmarc_record(org_domain, lookup_txt)
        except NoPolicyError:
            raise NoPolicyError(domain) from err
        return PolicyDiscovery(
            domain=domain,
            policy_domain=org_domain,
            record=record,
            applied_policy=record.subdomain_policy,
        )
    return PolicyDiscovery(
        domain=domain,
        policy_domain=domain,
        record=record,
        applied_policy=record.policy,
    )


__all__ = ["PolicyDiscovery", "discover_dmarc_policy"]
