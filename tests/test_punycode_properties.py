"""
Property-based tests for the Punycode module.

Uses Hypothesis for property-based testing to verify that label
conversion round-trips and leaves ASCII labels untouched.
"""

import string

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domain_intel.exceptions import DecodingError, EncodingError
from domain_intel.punycode import (
    decode_label,
    encode_label,
    from_punycode,
    has_punycode_label,
    to_punycode,
)


INTERNATIONAL_CHARS = "äöüßéèêëàâáãåçñøœ"


def ascii_label() -> st.SearchStrategy[str]:
    """Generate ASCII labels that do not carry the Punycode prefix."""
    alphanumeric = st.sampled_from(string.ascii_lowercase + string.digits)
    return st.builds(
        lambda first, middle, last: first + middle + last,
        alphanumeric,
        st.text(alphabet=string.ascii_lowercase + string.digits + "-", max_size=10),
        alphanumeric,
    ).filter(lambda s: not s.startswith("xn--"))


def idn_label() -> st.SearchStrategy[str]:
    """Generate lowercase labels with at least one international character."""
    valid_chars = string.ascii_lowercase + INTERNATIONAL_CHARS
    return st.builds(
        lambda prefix, special, suffix: prefix + special + suffix,
        st.text(alphabet=valid_chars, max_size=6),
        st.sampled_from(INTERNATIONAL_CHARS),
        st.text(alphabet=valid_chars, max_size=6),
    )


class TestPunycodeRoundTripProperty:
    """
    Property-based tests for Punycode conversion.

    **Feature: domain-intel, Property 4: Punycode conversion round-trips**
    """

    @given(label=idn_label(), tld=st.sampled_from(["de", "com", "net"]))
    @settings(max_examples=100)
    def test_round_trip(self, label: str, tld: str) -> None:
        """
        Property 4a: from_punycode(to_punycode(d)) == d for lowercase IDNs.

        **Feature: domain-intel, Property 4: Punycode conversion round-trips**
        """
        domain = f"{label}.{tld}"

        encoded = to_punycode(domain)

        assert encoded.isascii()
        assert encoded.split(".")[0].startswith("xn--")
        assert from_punycode(encoded) == domain

    @given(label=ascii_label())
    @settings(max_examples=100)
    def test_ascii_labels_unchanged(self, label: str) -> None:
        """
        Property 4b: ASCII labels pass through both directions unchanged.

        **Feature: domain-intel, Property 4: Punycode conversion round-trips**
        """
        assert encode_label(label) == label
        assert decode_label(label) == label
        assert not has_punycode_label(f"{label}.com")

    def test_known_encoding(self) -> None:
        assert to_punycode("münchen.de") == "xn--mnchen-3ya.de"
        assert from_punycode("xn--mnchen-3ya.de") == "münchen.de"

    def test_only_encoded_labels_change(self) -> None:
        assert to_punycode("www.bücher.example") == "www.xn--bcher-kva.example"

    def test_underscore_labels_survive(self) -> None:
        assert to_punycode("_dmarc.example.com") == "_dmarc.example.com"

    @pytest.mark.parametrize("label,expected", [
        ("München", "münchen"),
        ("ÄPFEL", "äpfel"),
        ("Straße", "straße"),
        ("a☃b", "a☃b"),
        ("💩", "💩"),
    ])
    def test_mixed_case_and_symbol_labels_round_trip(self, label: str, expected: str) -> None:
        encoded = encode_label(label)

        assert encoded.isascii()
        assert encoded.startswith("xn--")
        assert decode_label(encoded) == expected

    def test_uppercase_is_folded_before_encoding(self) -> None:
        assert to_punycode("MÜNCHEN.de") == "xn--mnchen-3ya.de"

    def test_symbol_labels_use_plain_punycode(self) -> None:
        assert encode_label("💩") == "xn--ls8h"
        assert decode_label("xn--ls8h") == "💩"
        assert from_punycode("XN--LS8H.la") == "💩.la"


class TestPunycodeErrorProperty:
    """
    Tests for malformed Punycode input.

    **Feature: domain-intel, Property 5: Malformed Punycode raises typed errors**
    """

    @pytest.mark.parametrize("domain", ["xn--.com", "xn--ab@c.com"])
    def test_malformed_payload_raises_decoding_error(self, domain: str) -> None:
        with pytest.raises(DecodingError) as exc_info:
            from_punycode(domain)

        assert exc_info.value.code == "decoding_error"

    def test_label_mapping_to_a_dot_raises_encoding_error(self) -> None:
        # U+3002 maps to a full stop
        with pytest.raises(EncodingError) as exc_info:
            encode_label("a\u3002b")

        assert exc_info.value.code == "encoding_error"

    def test_has_punycode_label_is_case_insensitive(self) -> None:
        assert has_punycode_label("XN--MNCHEN-3YA.de")
