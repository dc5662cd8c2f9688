"""Payload builders shared by the JSON and text renderers."""

from __future__ import annotations

from typing import Dict, List, Optional

from ..dmarc.discovery import PolicyDiscovery
from ..dmarc.models import DmarcRecord
from ..status import Status


def record_payload(record: DmarcRecord, domain: Optional[str] = None) -> Dict[str, object]:
    """Build the payload for a single parsed record.

    Args:
        record (DmarcRecord): Parsed record.
        domain (Optional[str]): Domain the record was looked up for.

    Returns:
        Dict[str, object]: Serializable payload.
    """
    return {"status": Status.OK.value, "domain": domain, "record": record.to_dict()}


def discovery_payload(discovery: PolicyDiscovery) -> Dict[str, object]:
    """Build the payload for a policy discovery result.

    Args:
        discovery (PolicyDiscovery): Discovery outcome.

    Returns:
        Dict[str, object]: Serializable payload.
    """
    return {
        "status": Status.OK.value,
        "domain": discovery.domain,
        "policy_domain": discovery.policy_domain,
        "applied_policy": discovery.applied_policy.value,
        "used_organizational_domain": discovery.used_organizational_domain,
        "record": discovery.record.to_dict(),
    }


def registrable_domain_entry(
    domain: str,
    registrable_domain: Optional[str] = None,
    error: Optional[BaseException] = None,
    status: Status = Status.OK,
) -> Dict[str, object]:
    """Build one registrable domain result entry.

    Args:
        domain (str): Input domain.
        registrable_domain (Optional[str]): Resolved eTLD+1, if any.
        error (Optional[BaseException]): Resolution error, if any.
        status (Status): Entry status.

    Returns:
        Dict[str, object]: Serializable entry.
    """
    return {
        "status": status.value,
        "domain": domain,
        "registrable_domain": registrable_domain,
        "error": str(error) if error is not None else None,
    }


def registrable_domains_payload(entries: List[Dict[str, object]]) -> Dict[str, object]:
    """Wrap registrable domain entries with an overall status.

    Args:
        entries (List[Dict[str, object]]): Per-domain entries.

    Returns:
        Dict[str, object]: Serializable payload; the status is the first
            non-OK entry status, or OK.
    """
    overall = next(
        (entry["status"] for entry in entries if entry["status"] != Status.OK.value),
        Status.OK.value,
    )
    return {"status": overall, "results": entries}


def error_payload(status: Status, error: BaseException, domain: Optional[str] = None) -> dict:
    """Build the payload for a failed operation.

    Args:
        status (Status): Failure status.
        error (BaseException): Raised error.
        domain (Optional[str]): Domain involved, if any.

    Returns:
        dict: Serializable payload.
    """
    payload: dict = {"status": status.value, "domain": domain, "error": str(error)}
    if getattr(error, "records", None):
        payload["records"] = list(error.records)
    return payload


__all__ = [
    "discovery_payload",
    "error_payload",
    "record_payload",
    "registrable_domain_entry",
    "registrable_domains_payload",
]
