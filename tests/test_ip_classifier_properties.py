"""
Property-based tests for the IP classifier module.

Uses Hypothesis for property-based testing to verify range flags for
IPv4 and IPv6 literals.
"""

import ipaddress

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domain_intel.enums import IpVersion
from domain_intel.ip_classifier import IpClassifier


@st.composite
def private_ipv4_strategy(draw) -> str:
    """Generate IPv4 addresses inside the RFC 1918 and link-local ranges."""
    network = draw(st.sampled_from([
        "10.0.0.0/8",
        "172.16.0.0/12",
        "192.168.0.0/16",
        "169.254.0.0/16",
    ]))
    net = ipaddress.ip_network(network)
    offset = draw(st.integers(min_value=0, max_value=net.num_addresses - 1))
    return str(net.network_address + offset)


@st.composite
def loopback_ipv4_strategy(draw) -> str:
    """Generate addresses in 127.0.0.0/8."""
    offset = draw(st.integers(min_value=0, max_value=2**24 - 1))
    return str(ipaddress.IPv4Address("127.0.0.0") + offset)


@st.composite
def multicast_ipv4_strategy(draw) -> str:
    """Generate addresses in 224.0.0.0/4."""
    offset = draw(st.integers(min_value=0, max_value=2**28 - 1))
    return str(ipaddress.IPv4Address("224.0.0.0") + offset)


@st.composite
def hostname_strategy(draw) -> str:
    """Generate hostnames that can never parse as IP literals."""
    label = draw(st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=12))
    tld = draw(st.sampled_from(["com", "net", "de", "org"]))
    return f"{label}.{tld}"


class TestIpv4ClassificationProperty:
    """
    Property-based tests for IPv4 range flags.

    **Feature: domain-intel, Property 1: IPv4 literals carry correct range flags**
    """

    @given(address=private_ipv4_strategy())
    @settings(max_examples=100)
    def test_private_ranges_flagged(self, address: str) -> None:
        """
        Property 1a: Private and link-local IPv4 addresses are private.

        **Feature: domain-intel, Property 1: IPv4 literals carry correct range flags**
        """
        info = IpClassifier().classify(address)

        assert info is not None
        assert info.version == IpVersion.V4
        assert info.is_private
        assert not info.is_loopback
        assert info.is_unsafe

    @given(address=loopback_ipv4_strategy())
    @settings(max_examples=100)
    def test_loopback_range_flagged(self, address: str) -> None:
        """
        Property 1b: Every 127.x.y.z address is loopback.

        **Feature: domain-intel, Property 1: IPv4 literals carry correct range flags**
        """
        info = IpClassifier().classify(address)

        assert info is not None
        assert info.is_loopback
        assert not info.is_private
        assert info.is_unsafe

    @given(address=multicast_ipv4_strategy())
    @settings(max_examples=100)
    def test_multicast_range_flagged(self, address: str) -> None:
        """
        Property 1c: Every 224.0.0.0/4 address is multicast.

        **Feature: domain-intel, Property 1: IPv4 literals carry correct range flags**
        """
        info = IpClassifier().classify(address)

        assert info is not None
        assert info.is_multicast
        assert IpClassifier().is_unsafe(address)

    @pytest.mark.parametrize("address", ["8.8.8.8", "1.1.1.1", "93.184.216.34"])
    def test_public_addresses_not_flagged(self, address: str) -> None:
        info = IpClassifier().classify(address)

        assert info is not None
        assert not info.is_private
        assert not info.is_loopback
        assert not info.is_multicast
        assert not IpClassifier().is_unsafe(address)

    @pytest.mark.parametrize("address", ["172.15.255.255", "172.32.0.0", "192.169.0.1"])
    def test_range_boundaries(self, address: str) -> None:
        assert not IpClassifier().classify(address).is_private


class TestIpv6ClassificationProperty:
    """
    Tests for IPv6 range flags.

    **Feature: domain-intel, Property 2: IPv6 literals carry correct range flags**
    """

    @pytest.mark.parametrize("address,private,loopback,multicast", [
        ("::1", False, True, False),
        ("fe80::1", True, False, False),
        ("fd12:3456::1", True, False, False),
        ("fc00::1", True, False, False),
        ("ff02::1", False, False, True),
        ("2001:4860:4860::8888", False, False, False),
    ])
    def test_ipv6_flags(
        self,
        address: str,
        private: bool,
        loopback: bool,
        multicast: bool,
    ) -> None:
        info = IpClassifier().classify(address)

        assert info is not None
        assert info.version == IpVersion.V6
        assert info.is_private == private
        assert info.is_loopback == loopback
        assert info.is_multicast == multicast

    def test_address_is_preserved(self) -> None:
        info = IpClassifier().classify("2001:db8::1")
        assert info.address == "2001:db8::1"
        assert info.subnet is None


class TestNonLiteralProperty:
    """
    Property-based tests for inputs that are not IP literals.

    **Feature: domain-intel, Property 3: Non-literals are never classified**
    """

    @given(hostname=hostname_strategy())
    @settings(max_examples=100)
    def test_hostnames_are_not_ips(self, hostname: str) -> None:
        """
        Property 3: Hostnames never classify as IP literals.

        **Feature: domain-intel, Property 3: Non-literals are never classified**
        """
        classifier = IpClassifier()

        assert classifier.classify(hostname) is None
        assert not classifier.is_ip(hostname)
        assert classifier.is_unsafe(hostname)

    @pytest.mark.parametrize("candidate", [
        "", "256.1.1.1", "1.2.3", "1.2.3.4.5", "::g", "[::1]", "example.com",
    ])
    def test_malformed_literals_rejected(self, candidate: str) -> None:
        assert IpClassifier().classify(candidate) is None
