"""
Property-based tests for subdomain operations.

Uses Hypothesis for property-based testing to verify root extraction,
subdomain listing and the add/remove/replace algebra.
"""

import string

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domain_intel.domain_parser import DomainParser
from domain_intel.exceptions import InvalidHostnameError, InvalidOperationError
from domain_intel.subdomain_ops import SubdomainOperations
from domain_intel.suffix import StaticSuffixClassifier


SUFFIXES = ["com", "net", "org", "de", "uk", "co.uk"]


def make_ops() -> SubdomainOperations:
    return SubdomainOperations(DomainParser(StaticSuffixClassifier(SUFFIXES)))


def label_strategy() -> st.SearchStrategy[str]:
    alphanumeric = string.ascii_lowercase + string.digits
    return st.builds(
        lambda first, rest: first + rest,
        st.sampled_from(alphanumeric),
        st.text(alphabet=alphanumeric, max_size=8),
    ).filter(lambda s: s != "co")


@st.composite
def domain_strategy(draw) -> tuple[list[str], str]:
    """Generate (subdomain labels, root domain) pairs."""
    subdomains = draw(st.lists(label_strategy(), max_size=3))
    registrable = draw(label_strategy())
    suffix = draw(st.sampled_from(SUFFIXES))
    return subdomains, f"{registrable}.{suffix}"


class TestRootDomainProperty:
    """
    Property-based tests for root-domain extraction.

    **Feature: domain-intel, Property 13: Root domain ignores subdomains**
    """

    @given(case=domain_strategy())
    @settings(max_examples=100)
    def test_root_domain_strips_subdomains(self, case) -> None:
        """
        Property 13a: root_domain returns registrable label plus suffix.

        **Feature: domain-intel, Property 13: Root domain ignores subdomains**
        """
        subdomains, root = case
        domain = ".".join(subdomains + [root])
        ops = make_ops()

        assert ops.root_domain(domain) == root
        assert ops.subdomains(domain) == subdomains
        assert ops.subdomain_depth(domain) == len(subdomains)

    @given(case=domain_strategy())
    @settings(max_examples=100)
    def test_root_domain_is_a_fixed_point(self, case) -> None:
        """
        Property 13b: root_domain(root_domain(d)) == root_domain(d).

        **Feature: domain-intel, Property 13: Root domain ignores subdomains**
        """
        subdomains, root = case
        ops = make_ops()
        first = ops.root_domain(".".join(subdomains + [root]))

        assert ops.root_domain(first) == first

    def test_accepts_parsed_domain(self) -> None:
        ops = make_ops()
        parsed = ops.parser.parse("www.example.co.uk")

        assert ops.root_domain(parsed) == "example.co.uk"
        assert ops.subdomains(parsed) == ["www"]

    def test_root_domain_is_lowercase(self) -> None:
        ops = make_ops()

        assert ops.root_domain("WWW.EXAMPLE.com") == "example.com"
        assert ops.root_domain("EXAMPLE.com") == ops.root_domain("example.com")

    @pytest.mark.parametrize("domain", ["192.168.1.1", "localhost", "printer.local"])
    def test_root_domain_returns_input_without_suffix(self, domain: str) -> None:
        assert make_ops().root_domain(domain) == domain

    def test_ip_has_no_subdomains(self) -> None:
        assert make_ops().subdomains("10.0.0.1") == []

    def test_unparseable_raises(self) -> None:
        with pytest.raises(InvalidHostnameError):
            make_ops().root_domain("co.uk")


class TestSubdomainAlgebraProperty:
    """
    Property-based tests for add, remove and replace.

    **Feature: domain-intel, Property 14: Adding then removing a subdomain is the identity**
    """

    @given(case=domain_strategy(), label=label_strategy())
    @settings(max_examples=100)
    def test_add_then_remove(self, case, label: str) -> None:
        """
        Property 14a: remove_subdomain(add_subdomain(d, l)) == d.

        **Feature: domain-intel, Property 14: Adding then removing a subdomain is the identity**
        """
        subdomains, root = case
        domain = ".".join(subdomains + [root])
        ops = make_ops()

        added = ops.add_subdomain(domain, label)

        assert added == f"{label}.{domain}"
        assert ops.remove_subdomain(added) == domain
        assert ops.subdomain_depth(added) == len(subdomains) + 1

    @given(case=domain_strategy(), label=label_strategy())
    @settings(max_examples=100)
    def test_replace_leaves_one_subdomain(self, case, label: str) -> None:
        """
        Property 14b: replace_subdomains keeps the root and exactly one subdomain.

        **Feature: domain-intel, Property 14: Adding then removing a subdomain is the identity**
        """
        subdomains, root = case
        ops = make_ops()

        replaced = ops.replace_subdomains(".".join(subdomains + [root]), label)

        assert replaced == f"{label}.{root}"
        assert ops.subdomains(replaced) == [label]

    def test_remove_on_root_is_noop(self) -> None:
        ops = make_ops()
        assert ops.remove_subdomain("example.com") == "example.com"
        # Three labels but no subdomain: never drops to the bare suffix
        assert ops.remove_subdomain("example.co.uk") == "example.co.uk"

    def test_remove_on_ip_is_noop(self) -> None:
        assert make_ops().remove_subdomain("8.8.8.8") == "8.8.8.8"

    def test_add_to_ip_raises(self) -> None:
        with pytest.raises(InvalidOperationError) as exc_info:
            make_ops().add_subdomain("192.168.0.1", "www")

        assert exc_info.value.code == "invalid_operation"

    def test_replace_on_ip_raises(self) -> None:
        with pytest.raises(InvalidOperationError):
            make_ops().replace_subdomains("::1", "www")

    @pytest.mark.parametrize("label", ["", "-api", "api-", "a.b", "a_b", "ä"])
    def test_malformed_label_rejected(self, label: str) -> None:
        with pytest.raises(InvalidHostnameError):
            make_ops().add_subdomain("example.com", label)

    def test_hyphenated_label_accepted(self) -> None:
        assert make_ops().add_subdomain("example.com", "my-api") == "my-api.example.com"


class TestIsSubdomainOfProperty:
    """
    Property-based tests for ancestry checks.

    **Feature: domain-intel, Property 15: Subdomain ancestry requires a label boundary**
    """

    @given(case=domain_strategy(), label=label_strategy())
    @settings(max_examples=100)
    def test_added_label_is_child(self, case, label: str) -> None:
        """
        Property 15a: add_subdomain(d, l) is a subdomain of d, never the reverse.

        **Feature: domain-intel, Property 15: Subdomain ancestry requires a label boundary**
        """
        subdomains, root = case
        domain = ".".join(subdomains + [root])
        ops = make_ops()
        child = ops.add_subdomain(domain, label)

        assert ops.is_subdomain_of(child, domain)
        assert not ops.is_subdomain_of(domain, child)
        assert not ops.is_subdomain_of(domain, domain)

    @pytest.mark.parametrize("candidate,parent,expected", [
        ("a.example.com", "example.com", True),
        ("a.b.example.com", "b.example.com", True),
        ("evilexample.com", "example.com", False),
        ("a.example.net", "example.com", False),
        ("a.example.com", "b.example.com", False),
        ("example.com", "a.example.com", False),
        ("192.168.0.1", "example.com", False),
        ("a.example.com", "co.uk", False),
    ])
    def test_examples(self, candidate: str, parent: str, expected: bool) -> None:
        assert make_ops().is_subdomain_of(candidate, parent) == expected
