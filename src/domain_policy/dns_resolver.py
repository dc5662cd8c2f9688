"""DNS TXT resolver used by DMARC record lookups.

The resolver is intentionally thin so it can be replaced in tests or by any
callable returning TXT strings for a name.
"""

from __future__ import annotations

import ipaddress
import logging
from typing import Iterable, List, Optional

try:
    import dns.exception
    import dns.resolver
except ImportError as exc:  # pragma: no cover - handled at runtime
    raise SystemExit("dnspython is required. Install with `pip install dnspython`.") from exc

LOGGER = logging.getLogger(__name__)


def _is_ip_address(value: str) -> bool:
    """Check whether a string is a valid IP address.

    Args:
        value (str): Input string to validate.

    Returns:
        bool: True if the value is a valid IPv4 or IPv6 address.
    """
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


class DnsLookupError(RuntimeError):
    """Raised when a DNS lookup fails."""

    def __init__(self, record_type: str, name: str, error: Exception) -> None:
        """Initialize a DNS lookup error.

        Args:
            record_type (str): DNS record type being queried.
            name (str): DNS name that failed to resolve.
            error (Exception): Underlying exception.
        """
        super().__init__(f"{record_type} lookup failed for {name}: {error}")
        self.record_type = record_type
        self.name = name
        self.error = error


class DnsNameNotFoundError(DnsLookupError):
    """Raised when the queried name does not exist (NXDOMAIN)."""


class DnsResolver:
    """Resolve TXT records using dnspython."""

    def __init__(
        self,
        nameservers: Optional[Iterable[str]] = None,
        timeout: Optional[float] = None,
        lifetime: Optional[float] = None,
        use_tcp: bool = False,
    ) -> None:
        """Initialize the DNS resolver.

        Args:
            nameservers (Optional[Iterable[str]]): Optional nameserver IPs or hostnames.
            timeout (Optional[float]): Per-query timeout in seconds.
            lifetime (Optional[float]): Total timeout across retries in seconds.
            use_tcp (bool): Whether to force TCP for DNS lookups.

        Raises:
            ValueError: If a setting is invalid or a nameserver cannot be resolved.
        """
        self._resolver = dns.resolver.Resolver()
        if timeout is not None:
            if timeout <= 0:
                raise ValueError("DNS timeout must be a positive number")
            self._resolver.timeout = timeout
        if lifetime is not None:
            if lifetime <= 0:
                raise ValueError("DNS lifetime must be a positive number")
            self._resolver.lifetime = lifetime
        self.use_tcp = bool(use_tcp)
        if nameservers:
            self._resolver.nameservers = self._resolve_nameservers(nameservers)

    def _resolve_nameservers(self, nameservers: Iterable[str]) -> List[str]:
        """Turn nameserver entries into IP addresses.

        Args:
            nameservers (Iterable[str]): Nameserver IPs or hostnames.

        Returns:
            List[str]: Unique IP addresses in input order.

        Raises:
            ValueError: If an entry is empty or does not resolve.
        """
        resolved: List[str] = []
        for server in nameservers:
            server_text = str(server).strip()
            if not server_text:
                raise ValueError("DNS server entries cannot be empty")
            addresses = [server_text] if _is_ip_address(server_text) else []
            if not addresses:
                addresses = self._lookup_addresses(server_text)
            if not addresses:
                raise ValueError(f"DNS server '{server_text}' did not resolve to any IP addresses")
            resolved.extend(address for address in addresses if address not in resolved)
        return resolved

    def _lookup_addresses(self, hostname: str) -> List[str]:
        """Resolve a nameserver hostname into A/AAAA addresses.

        Args:
            hostname (str): Hostname to resolve.

        Returns:
            List[str]: Resolved IP addresses.

        Raises:
            ValueError: If a DNS error other than a missing answer occurs.
        """
        addresses: List[str] = []
        for record_type in ("A", "AAAA"):
            try:
                answers = self._resolver.resolve(hostname, record_type)
            except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
                continue
            except dns.exception.DNSException as err:
                raise ValueError(f"DNS server '{hostname}' could not be resolved: {err}") from err
            addresses.extend(str(rdata.address) for rdata in answers)
        LOGGER.debug("Resolved DNS server %s to %s", hostname, addresses)
        return addresses

    def get_txt(self, name: str) -> List[str]:
        """Resolve TXT records for a DNS name.

        The character-strings of each TXT record are concatenated into one value.

        Args:
            name (str): DNS name to query.

        Returns:
            List[str]: TXT record strings, empty when the name has no TXT data.

        Raises:
            DnsNameNotFoundError: If the name does not exist.
            DnsLookupError: If any other DNS error occurs during lookup.
        """
        LOGGER.debug("Querying TXT records for %s", name)
        try:
            answers = self._resolver.resolve(name, "TXT", tcp=self.use_tcp)
        except dns.resolver.NoAnswer:
            return []
        except dns.resolver.NXDOMAIN as err:
            raise DnsNameNotFoundError("TXT", name, err) from err
        except dns.exception.DNSException as err:
            LOGGER.warning("TXT lookup failed for %s: %s", name, err)
            raise DnsLookupError("TXT", name, err) from err
        records: List[str] = []
        for rdata in answers:
            records.append(
                "".join(
                    part.decode("utf-8", errors="replace") if isinstance(part, bytes) else str(part)
                    for part in rdata.strings
                )
            )
        return records


__all__ = ["DnsLookupError", "DnsNameNotFoundError", "DnsResolver"]
