"""
Subdomain algebra over parsed domain hierarchies.

Root-domain extraction, subdomain listing and depth, add/remove/replace
of subdomain labels, and the subdomain-of ancestry test.
"""

import re
from typing import Union

from .domain_parser import DomainParser
from .enums import DomainErrorCode
from .exceptions import DomainIntelError, InvalidHostnameError, InvalidOperationError
from .models import ParsedDomain


SUBDOMAIN_LABEL_PATTERN = re.compile(r"^[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?$")

DomainInput = Union[str, ParsedDomain]


class SubdomainOperations:
    """
    Pure functions over domain hierarchies.

    Every method accepts either a domain string, which is parsed with the
    attached parser, or an already ParsedDomain.
    """

    def __init__(self, parser: DomainParser) -> None:
        self._parser = parser

    @property
    def parser(self) -> DomainParser:
        return self._parser

    def _parsed(self, domain: DomainInput) -> ParsedDomain:
        if isinstance(domain, ParsedDomain):
            return domain
        return self._parser.parse(domain)

    def root_domain(self, domain: DomainInput) -> str:
        """
        Extract the registrable domain (registrable label plus suffix).

        Args:
            domain: Domain string or ParsedDomain

        Returns:
            Root domain such as 'example.co.uk'; the input unchanged for IPs
            and for domains lacking a registrable label or a suffix

        Raises:
            InvalidHostnameError: If a domain string does not parse
        """
        parsed = self._parsed(domain)
        original = domain if isinstance(domain, str) else parsed.full_domain

        if parsed.is_ip:
            return original

        registrable = parsed.registrable_label
        suffixes = parsed.suffix_labels
        if registrable is None or not suffixes:
            return original

        return ".".join([registrable.text] + [label.text for label in suffixes])

    def subdomains(self, domain: DomainInput) -> list[str]:
        """List subdomain labels, outermost first ('a.b.example.com' -> ['a', 'b'])."""
        parsed = self._parsed(domain)
        if parsed.is_ip:
            return []
        return [label.text for label in parsed.subdomain_labels]

    def subdomain_depth(self, domain: DomainInput) -> int:
        """Number of subdomain labels."""
        return len(self.subdomains(domain))

    def add_subdomain(self, domain: str, label: str) -> str:
        """
        Prepend a subdomain label.

        Args:
            domain: Domain to extend, e.g. 'example.com'
            label: New leftmost label, e.g. 'api'

        Returns:
            Extended domain, e.g. 'api.example.com'

        Raises:
            InvalidOperationError: If domain is an IP literal
            InvalidHostnameError: If domain does not parse or label is malformed
        """
        parsed = self._parser.parse(domain)
        if parsed.is_ip:
            raise InvalidOperationError(
                code=DomainErrorCode.INVALID_OPERATION.value,
                message="Cannot add subdomain to IP address",
                details={"domain": domain, "label": label},
            )

        if not isinstance(label, str) or not SUBDOMAIN_LABEL_PATTERN.match(label):
            raise InvalidHostnameError(
                code=DomainErrorCode.INVALID_HOSTNAME.value,
                message=(
                    "Invalid subdomain. Must start and end with alphanumeric "
                    "characters and can contain hyphens in between."
                ),
                details={"domain": domain, "label": label},
            )

        return f"{label}.{domain}"

    def remove_subdomain(self, domain: str) -> str:
        """
        Drop the outermost subdomain label.

        Args:
            domain: Domain, e.g. 'api.example.com'

        Returns:
            Domain without its leftmost label; unchanged for root domains
            and IP literals

        Raises:
            InvalidHostnameError: If domain does not parse
        """
        parsed = self._parser.parse(domain)
        if parsed.is_ip or not parsed.subdomain_labels:
            return domain

        return ".".join(label.text for label in parsed.labels[1:])

    def replace_subdomains(self, domain: str, new_label: str) -> str:
        """
        Replace all subdomain labels with a single new one.

        Args:
            domain: Domain, e.g. 'a.b.example.com'
            new_label: Replacement label, e.g. 'www'

        Returns:
            Rebuilt domain, e.g. 'www.example.com'

        Raises:
            InvalidOperationError: If domain is an IP literal
            InvalidHostnameError: If domain does not parse or label is malformed
        """
        parsed = self._parser.parse(domain)
        if parsed.is_ip:
            raise InvalidOperationError(
                code=DomainErrorCode.INVALID_OPERATION.value,
                message="Cannot replace subdomains in IP address",
                details={"domain": domain, "label": new_label},
            )

        return self.add_subdomain(self.root_domain(parsed), new_label)

    def is_subdomain_of(self, candidate: str, parent: str) -> bool:
        """
        Check whether candidate sits strictly below parent.

        Both must parse, neither may be an IP, they must share a root
        domain, candidate must have more subdomain labels, and candidate
        must end with '.' + parent so that 'evilexample.com' is never
        treated as a child of 'example.com'.
        """
        try:
            candidate_info = self._parser.parse(candidate)
            parent_info = self._parser.parse(parent)
        except DomainIntelError:
            return False

        if candidate_info.is_ip or parent_info.is_ip:
            return False

        if self.root_domain(candidate_info) != self.root_domain(parent_info):
            return False

        if len(candidate_info.subdomain_labels) <= len(parent_info.subdomain_labels):
            return False

        return candidate_info.full_domain.endswith(f".{parent_info.full_domain}")
