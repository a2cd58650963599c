"""
Domain normalization.

Produces the canonical comparable form of a domain used before every
equality or similarity check: host part only, lowercase, no trailing dots,
Punycode labels decoded to Unicode. Normalization never raises; input
that does not look like a hostname comes back cleaned but otherwise
untouched.
"""

import re
from typing import Optional

from .domain_parser import strip_url_components
from .domain_validator import DomainValidator
from .exceptions import DomainIntelError
from .ip_classifier import IpClassifier
from .punycode import from_punycode


TRAILING_NOISE_PATTERN = re.compile(r"[\s.]+$")


def _strip_userinfo(host: str) -> str:
    if "@" in host:
        return host.rsplit("@", 1)[1]
    return host


def _strip_port(host: str) -> str:
    # '[v6]:port' or '[v6]'; brackets around anything else are left alone
    if host.startswith("["):
        closing = host.find("]")
        if closing != -1 and host[1:closing].count(":") > 1:
            return host[1:closing]
        return host
    # A single colon is a port separator; more than one is an IPv6 literal
    if host.count(":") == 1:
        return host.split(":", 1)[0]
    return host


class DomainNormalizer:
    """Best-effort canonicalization of domains and URLs."""

    def __init__(
        self,
        validator: Optional[DomainValidator] = None,
        ip_classifier: Optional[IpClassifier] = None,
    ) -> None:
        """
        Initialize normalizer.

        Args:
            validator: Shape validator (a classifier-free one if omitted)
            ip_classifier: IP literal classifier (a fresh one if omitted)
        """
        self._ip_classifier = ip_classifier or IpClassifier()
        self._validator = validator or DomainValidator(ip_classifier=self._ip_classifier)

    def clean(self, raw: str) -> str:
        """
        Strip URL parts, lowercase and drop trailing dots.

        Args:
            raw: Domain or URL

        Returns:
            Cleaned host string, not validated
        """
        host = strip_url_components((raw or "").strip())
        host = _strip_port(_strip_userinfo(host).strip())
        return TRAILING_NOISE_PATTERN.sub("", host.lower()).lstrip()

    def normalize(self, raw: str) -> str:
        """
        Normalize a domain to its canonical comparable form.

        Args:
            raw: Domain or URL, e.g. 'HTTPS://WWW.Example.COM./login'

        Returns:
            Canonical domain ('www.example.com'); the cleaned string if it
            does not validate as a hostname
        """
        cleaned = self.clean(raw)

        if not cleaned or self._ip_classifier.is_ip(cleaned):
            return cleaned

        try:
            decoded = from_punycode(cleaned).lower()
        except DomainIntelError:
            return cleaned

        if not self._validator.is_valid_shape(decoded):
            return cleaned

        return decoded
