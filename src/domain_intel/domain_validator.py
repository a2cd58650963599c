"""
Hostname validation module.

Checks length, character set and label shape of domain names, and
optionally whether they parse against a public suffix classifier.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .domain_parser import DomainParser
from .enums import DomainValidationErrorCode
from .exceptions import DomainIntelError
from .ip_classifier import IpClassifier
from .punycode import decode_label, encode_label, from_punycode, has_punycode_label
from .suffix_registry import ACE_PREFIX, MAX_DOMAIN_LENGTH, MAX_LABEL_LENGTH


# Valid hostname characters once IDN labels are Punycode-encoded
ALLOWED_CHARS_PATTERN = re.compile(r"^[a-z0-9.-]+$", re.IGNORECASE)
ASCII_LABEL_PATTERN = re.compile(r"^[a-z0-9-]+$", re.IGNORECASE)


@dataclass
class DomainValidationError:
    """Structured error information for hostname validation failures."""

    code: DomainValidationErrorCode
    message: str
    details: dict


@dataclass
class DomainValidationResult:
    """Result of hostname validation."""

    valid: bool
    canonical_domain: Optional[str]
    error: Optional[DomainValidationError]


class DomainValidator:
    """
    Validates hostnames.

    Handles:
    - IP literals (always valid)
    - Total length ceiling of 253 characters
    - Allowed characters, checked on the Punycode form for IDNs
    - Per-label length and hyphen rules
    - Parseability against the suffix classifier, when a parser is attached
    """

    def __init__(
        self,
        parser: Optional[DomainParser] = None,
        ip_classifier: Optional[IpClassifier] = None,
    ) -> None:
        """
        Initialize validator.

        Args:
            parser: Optional parser; without one only shape checks run
            ip_classifier: IP literal classifier (a fresh one if omitted)
        """
        self._parser = parser
        if ip_classifier is None:
            ip_classifier = parser.ip_classifier if parser else IpClassifier()
        self._ip_classifier = ip_classifier

    def validate(self, raw_domain: str) -> DomainValidationResult:
        """
        Validate a hostname.

        Args:
            raw_domain: Hostname to validate (no scheme or path)

        Returns:
            DomainValidationResult with the lowercased domain or an error
        """
        if not raw_domain or not raw_domain.strip():
            return self._failure(
                DomainValidationErrorCode.EMPTY_INPUT,
                "Domain input is empty",
                {"raw_input": raw_domain},
            )

        domain = raw_domain.strip()

        if self._ip_classifier.is_ip(domain):
            return DomainValidationResult(valid=True, canonical_domain=domain, error=None)

        error = self._check_shape(domain)
        if error is not None:
            return DomainValidationResult(valid=False, canonical_domain=None, error=error)

        if self._parser is not None:
            try:
                self._parser.parse(domain)
            except DomainIntelError as e:
                return self._failure(
                    DomainValidationErrorCode.INVALID_HOSTNAME,
                    e.message,
                    {"raw_input": raw_domain, **e.details},
                )

        return DomainValidationResult(
            valid=True,
            canonical_domain=domain.lower(),
            error=None,
        )

    def is_valid_shape(self, domain: str) -> bool:
        """
        Check length, characters and labels without consulting a classifier.

        Args:
            domain: Hostname to check

        Returns:
            True if the hostname is an IP literal or is well-formed
        """
        if not domain:
            return False
        if self._ip_classifier.is_ip(domain):
            return True
        return self._check_shape(domain) is None

    def validate_punycode(self, domain: str) -> bool:
        """
        Validate a domain that may contain 'xn--' labels.

        Every Punycode label must decode to a non-empty string with at
        least one non-ASCII character, and the decoded domain must itself
        validate.

        Args:
            domain: Hostname, e.g. 'xn--mnchen-3ya.de'

        Returns:
            True if valid, False otherwise
        """
        if not has_punycode_label(domain):
            return self.validate(domain).valid

        for label in domain.split("."):
            if not label.lower().startswith(ACE_PREFIX):
                continue
            try:
                decoded = decode_label(label)
            except DomainIntelError:
                return False
            if not decoded or decoded.isascii():
                return False

        try:
            unicode_domain = from_punycode(domain).lower()
        except DomainIntelError:
            return False

        return self.validate(unicode_domain).valid

    def _check_shape(self, domain: str) -> Optional[DomainValidationError]:
        if len(domain) > MAX_DOMAIN_LENGTH:
            return DomainValidationError(
                code=DomainValidationErrorCode.TOO_LONG,
                message=f"Domain exceeds {MAX_DOMAIN_LENGTH} characters",
                details={"domain": domain, "length": len(domain)},
            )

        if not self._has_allowed_chars(domain):
            return DomainValidationError(
                code=DomainValidationErrorCode.FORBIDDEN_CHARS,
                message="Domain contains forbidden characters",
                details={"domain": domain},
            )

        for label in domain.split("."):
            reason = self._label_problem(label)
            if reason:
                return DomainValidationError(
                    code=DomainValidationErrorCode.INVALID_LABEL,
                    message=f"Invalid label '{label}': {reason}",
                    details={"domain": domain, "label": label},
                )

        return None

    def _has_allowed_chars(self, domain: str) -> bool:
        if ALLOWED_CHARS_PATTERN.match(domain):
            return True
        if domain.isascii():
            return False
        try:
            encoded = ".".join(encode_label(label) for label in domain.split("."))
        except DomainIntelError:
            return False
        return bool(ALLOWED_CHARS_PATTERN.match(encoded))

    def _label_problem(self, label: str) -> Optional[str]:
        if not label:
            return "empty label"
        if len(label) > MAX_LABEL_LENGTH:
            return f"longer than {MAX_LABEL_LENGTH} characters"

        if ASCII_LABEL_PATTERN.match(label):
            if label.startswith("-") or label.endswith("-"):
                return "starts or ends with a hyphen"
            return None

        # IDN label: the Punycode payload plus 'xn--' must fit in one label
        try:
            encoded = encode_label(label)
        except DomainIntelError:
            return "cannot be Punycode-encoded"
        if len(encoded) > MAX_LABEL_LENGTH:
            return f"Punycode form longer than {MAX_LABEL_LENGTH} characters"
        return None

    @staticmethod
    def _failure(
        code: DomainValidationErrorCode,
        message: str,
        details: dict,
    ) -> DomainValidationResult:
        return DomainValidationResult(
            valid=False,
            canonical_domain=None,
            error=DomainValidationError(code=code, message=message, details=details),
        )
