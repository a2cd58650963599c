"""
IP literal detection and classification.

Recognizes IPv4 dotted-quad and IPv6 textual literals and flags the
private, loopback and multicast ranges that should never be treated as
ordinary internet hosts.
"""

import ipaddress
from typing import Optional, Union

from .enums import IpVersion
from .models import IpAddress


PRIVATE_NETWORKS = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("169.254.0.0/16"),  # Link-local
    ipaddress.ip_network("fe80::/10"),  # Link-local
    ipaddress.ip_network("fc00::/7"),  # Unique local, covers fd00::/8
)

LOOPBACK_NETWORKS = (
    ipaddress.ip_network("127.0.0.0/8"),
    ipaddress.ip_network("::1/128"),
)

MULTICAST_NETWORKS = (
    ipaddress.ip_network("224.0.0.0/4"),
    ipaddress.ip_network("ff00::/8"),
)

_Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def _parse_literal(candidate: str) -> Optional[_Address]:
    if not isinstance(candidate, str) or not candidate:
        return None
    try:
        return ipaddress.ip_address(candidate)
    except ValueError:
        return None


def _in_any(address: _Address, networks) -> bool:
    return any(
        address.version == network.version and address in network
        for network in networks
    )


class IpClassifier:
    """Pure classifier for IPv4/IPv6 literals."""

    def classify(self, candidate: str) -> Optional[IpAddress]:
        """
        Classify a candidate string as an IP literal.

        Args:
            candidate: String that may be an IPv4 or IPv6 literal

        Returns:
            IpAddress with range flags, or None if candidate is not a literal
        """
        address = _parse_literal(candidate)
        if address is None:
            return None

        return IpAddress(
            address=candidate,
            version=IpVersion.V4 if address.version == 4 else IpVersion.V6,
            is_private=_in_any(address, PRIVATE_NETWORKS),
            is_loopback=_in_any(address, LOOPBACK_NETWORKS),
            is_multicast=_in_any(address, MULTICAST_NETWORKS),
        )

    def is_ip(self, candidate: str) -> bool:
        """Check whether candidate is a syntactically valid IP literal."""
        return _parse_literal(candidate) is not None

    def is_unsafe(self, candidate: str) -> bool:
        """
        Check whether candidate should not be reached as a public host.

        Non-literals count as unsafe, since the caller asked about an IP.
        """
        info = self.classify(candidate)
        if info is None:
            return True
        return info.is_unsafe
