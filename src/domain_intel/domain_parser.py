"""
Domain hierarchy parsing.

Splits a raw domain (or URL) into subdomain, registrable and public
suffix labels using an injected PublicSuffixClassifier. IP literals are
recognized first and never reach the classifier.
"""

import re
from typing import Optional

from .enums import DomainErrorCode, SuffixStatus
from .exceptions import InvalidHostnameError
from .ip_classifier import IpClassifier
from .models import DomainLabel, ParsedDomain, SuffixClassification
from .suffix import PublicSuffixClassifier


SCHEME_PATTERN = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)
PATH_DELIMITERS = re.compile(r"[/?#]")


def strip_url_components(raw: str) -> str:
    """
    Reduce a URL to its host part.

    Removes a leading 'scheme://' and everything from the first '/', '?'
    or '#' onward. Bare hostnames pass through unchanged.
    """
    host = SCHEME_PATTERN.sub("", raw, count=1)
    return PATH_DELIMITERS.split(host, maxsplit=1)[0]


class DomainParser:
    """
    Parses domain strings into ParsedDomain hierarchies.

    Domains the classifier does not know (single-label hosts, '.local',
    custom lab TLDs) are accepted as one registrable label with is_local
    set, so internal hostnames stay parseable.
    """

    def __init__(
        self,
        classifier: PublicSuffixClassifier,
        ip_classifier: Optional[IpClassifier] = None,
    ) -> None:
        """
        Initialize parser.

        Args:
            classifier: Public suffix lookup used for every parse
            ip_classifier: IP literal classifier (a fresh one if omitted)
        """
        self._classifier = classifier
        self._ip_classifier = ip_classifier or IpClassifier()

    @property
    def classifier(self) -> PublicSuffixClassifier:
        return self._classifier

    @property
    def ip_classifier(self) -> IpClassifier:
        return self._ip_classifier

    def parse(self, raw: str) -> ParsedDomain:
        """
        Parse a domain string.

        Args:
            raw: Domain or URL, e.g. 'https://a.b.example.co.uk/path'

        Returns:
            ParsedDomain describing the label hierarchy

        Raises:
            InvalidHostnameError: If the classifier rejects the domain or
                no registrable label remains after suffix removal
        """
        domain = strip_url_components(raw)

        ip_info = self._ip_classifier.classify(domain)
        if ip_info is not None:
            return ParsedDomain(
                full_domain=domain,
                is_ip=True,
                is_local=ip_info.is_private or ip_info.is_loopback,
            )

        # Labels are case-insensitive; full_domain keeps the text as given
        host = domain.lower()
        classification = self._classifier.classify(host)

        if classification.status == SuffixStatus.INVALID:
            raise InvalidHostnameError(
                code=DomainErrorCode.INVALID_HOSTNAME.value,
                message=f"Invalid domain: {domain}",
                details={"raw_input": raw, "domain": domain},
            )

        if classification.status == SuffixStatus.NOT_LISTED:
            return ParsedDomain(
                full_domain=domain,
                labels=(DomainLabel(text=host, level=0, is_registrable=True),),
                is_local=True,
            )

        if not classification.registrable_label:
            raise InvalidHostnameError(
                code=DomainErrorCode.INVALID_HOSTNAME.value,
                message=f"Invalid domain structure: {domain}",
                details={"raw_input": raw, "domain": domain},
            )

        return self._build(domain, classification)

    def _build(
        self,
        domain: str,
        classification: SuffixClassification,
    ) -> ParsedDomain:
        subdomains = list(classification.subdomain_labels)
        suffixes = list(classification.suffix_labels)

        # Subdomain levels count outward from the registrable label
        labels = [
            DomainLabel(text=text, level=len(subdomains) - 1 - index)
            for index, text in enumerate(subdomains)
        ]
        level = len(subdomains)
        labels.append(DomainLabel(
            text=classification.registrable_label,
            level=level,
            is_registrable=True,
        ))
        for text in suffixes:
            level += 1
            labels.append(DomainLabel(text=text, level=level, is_public_suffix=True))

        return ParsedDomain(
            full_domain=domain,
            labels=tuple(labels),
            tld=".".join(suffixes),
            sld=classification.registrable_label,
            subdomain=".".join(subdomains) if subdomains else None,
        )
