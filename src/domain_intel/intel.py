"""
DomainIntel facade.

Wires the IP classifier, parser, normalizer, validator, subdomain
operations, similarity engine and the trust and threat evaluators around
one public suffix classifier, and exposes the module-level function
surface used by callers that prefer plain functions.
"""

import sys
from typing import Iterable, Optional

from .audit_logger import AuditLogger
from .config import IntelConfig, validate_config
from .domain_parser import DomainParser
from .domain_validator import DomainValidationResult, DomainValidator
from .enums import DomainErrorCode, LogLevel
from .exceptions import ConfigurationError
from .ip_classifier import IpClassifier
from .models import IpAddress, ParsedDomain, PhishingAssessment, SimilarityVerdict
from .normalizer import DomainNormalizer
from .punycode import from_punycode, to_punycode
from .similarity import SimilarityEngine
from .subdomain_ops import SubdomainOperations
from .suffix import PublicSuffixClassifier, StaticSuffixClassifier, TLDExtractClassifier
from .threat import ThreatEvaluator
from .trust import TrustEvaluator


def create_classifier(name: str) -> PublicSuffixClassifier:
    """
    Build a public suffix classifier by name.

    Args:
        name: 'tldextract' or 'static'

    Raises:
        ConfigurationError: If the name is unknown
    """
    if name == "tldextract":
        return TLDExtractClassifier()
    if name == "static":
        return StaticSuffixClassifier()
    raise ConfigurationError(
        code=DomainErrorCode.INVALID_CONFIG.value,
        message=f"Unknown classifier: {name}",
        details={"classifier": name},
    )


def create_logger(config: IntelConfig) -> Optional[AuditLogger]:
    """Build the audit logger described by config, or None if logging is off."""
    if not config.logging.enabled:
        return None

    logger = AuditLogger(
        output_format=config.logging.output_format,
        output_stream=sys.stderr,
        min_level=LogLevel(config.logging.level),
    )
    if config.logging.audit_mode and config.logging.audit_signing_key:
        logger.enable_audit_mode(config.logging.audit_signing_key)
    return logger


class DomainIntel:
    """
    Single entry point for domain parsing, comparison and evaluation.

    All methods are pure functions of their inputs and the injected
    classifier, so one instance can be shared across threads.
    """

    def __init__(
        self,
        classifier: Optional[PublicSuffixClassifier] = None,
        config: Optional[IntelConfig] = None,
        logger: Optional[AuditLogger] = None,
    ) -> None:
        """
        Initialize facade.

        Args:
            classifier: Public suffix classifier (built from config if omitted)
            config: Configuration (defaults if omitted)
            logger: Audit logger (built from config if omitted)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self._config = config or IntelConfig()
        errors = validate_config(self._config)
        if errors:
            raise ConfigurationError(
                code=DomainErrorCode.INVALID_CONFIG.value,
                message="; ".join(errors),
                details={"errors": errors},
            )

        self._logger = logger if logger is not None else create_logger(self._config)
        self._classifier = classifier or create_classifier(self._config.classifier)

        self._ip_classifier = IpClassifier()
        self._parser = DomainParser(self._classifier, self._ip_classifier)
        self._validator = DomainValidator(self._parser, self._ip_classifier)
        self._normalizer = DomainNormalizer(ip_classifier=self._ip_classifier)
        self._subdomain_ops = SubdomainOperations(self._parser)
        self._similarity = SimilarityEngine(
            self._parser,
            normalizer=self._normalizer,
            subdomain_ops=self._subdomain_ops,
            threshold=self._config.similarity.threshold,
        )
        self._trust = TrustEvaluator(
            self._subdomain_ops,
            normalizer=self._normalizer,
            logger=self._logger,
        )
        self._threat = ThreatEvaluator(
            self._parser,
            self._similarity,
            normalizer=self._normalizer,
            suspicious_tlds=self._config.suspicious_tlds,
            logger=self._logger,
        )

    @property
    def config(self) -> IntelConfig:
        return self._config

    @property
    def classifier(self) -> PublicSuffixClassifier:
        return self._classifier

    @property
    def logger(self) -> Optional[AuditLogger]:
        return self._logger

    # Parsing and normalization

    def parse(self, raw: str) -> ParsedDomain:
        return self._parser.parse(raw)

    def classify_ip(self, raw: str) -> Optional[IpAddress]:
        return self._ip_classifier.classify(raw)

    def normalize(self, raw: str) -> str:
        return self._normalizer.normalize(raw)

    def validate(self, raw: str) -> DomainValidationResult:
        return self._validator.validate(raw)

    def validate_punycode(self, raw: str) -> bool:
        return self._validator.validate_punycode(raw)

    def to_punycode(self, domain: str) -> str:
        return to_punycode(domain)

    def from_punycode(self, domain: str) -> str:
        return from_punycode(domain)

    # Subdomain operations

    def root_domain(self, domain: str) -> str:
        return self._subdomain_ops.root_domain(domain)

    def subdomains(self, domain: str) -> list[str]:
        return self._subdomain_ops.subdomains(domain)

    def subdomain_depth(self, domain: str) -> int:
        return self._subdomain_ops.subdomain_depth(domain)

    def add_subdomain(self, domain: str, label: str) -> str:
        return self._subdomain_ops.add_subdomain(domain, label)

    def remove_subdomain(self, domain: str) -> str:
        return self._subdomain_ops.remove_subdomain(domain)

    def replace_subdomains(self, domain: str, label: str) -> str:
        return self._subdomain_ops.replace_subdomains(domain, label)

    def is_subdomain_of(self, candidate: str, parent: str) -> bool:
        return self._subdomain_ops.is_subdomain_of(candidate, parent)

    # Similarity and evaluation

    def analyze_similarity(self, domain_a: str, domain_b: str) -> SimilarityVerdict:
        return self._similarity.analyze(domain_a, domain_b)

    def is_trusted(self, domain: str, allow_list: Optional[Iterable[str]] = None) -> bool:
        """Check against allow_list, or the configured trusted domains if omitted."""
        entries = self._config.trusted_domains if allow_list is None else allow_list
        return self._trust.is_trusted(domain, entries)

    def is_blacklisted(self, domain: str, block_list: Optional[Iterable[str]] = None) -> bool:
        """Check against block_list, or the configured blocked domains if omitted."""
        entries = self._config.blocked_domains if block_list is None else block_list
        return self._trust.is_blacklisted(domain, entries)

    def is_safe(self, domain: str, *, protocol_secure: bool = True) -> bool:
        """Heuristic safety gate; passing it is not a security guarantee."""
        return self._threat.is_safe(domain, protocol_secure=protocol_secure)

    def assess_phishing(self, domain: str, target: str) -> PhishingAssessment:
        return self._threat.assess_phishing(domain, target)

    def is_potential_phishing(self, domain: str, target: str) -> bool:
        return self._threat.is_potential_phishing(domain, target)


# Module-level function surface

_IP_CLASSIFIER = IpClassifier()
_NORMALIZER = DomainNormalizer(ip_classifier=_IP_CLASSIFIER)


def _intel(
    classifier: PublicSuffixClassifier,
    suspicious_tlds: Optional[Iterable[str]] = None,
) -> DomainIntel:
    config = IntelConfig()
    if suspicious_tlds is not None:
        config.suspicious_tlds = sorted(
            tld.lower().strip(".") for tld in suspicious_tlds if tld.strip(".")
        )
    return DomainIntel(classifier=classifier, config=config, logger=None)


def parse_domain(raw: str, classifier: PublicSuffixClassifier) -> ParsedDomain:
    return DomainParser(classifier, _IP_CLASSIFIER).parse(raw)


def classify_ip(raw: str) -> Optional[IpAddress]:
    return _IP_CLASSIFIER.classify(raw)


def normalize_domain(raw: str) -> str:
    return _NORMALIZER.normalize(raw)


def root_domain(domain: str, classifier: PublicSuffixClassifier) -> str:
    return _intel(classifier).root_domain(domain)


def subdomains(domain: str, classifier: PublicSuffixClassifier) -> list[str]:
    return _intel(classifier).subdomains(domain)


def add_subdomain(domain: str, label: str, classifier: PublicSuffixClassifier) -> str:
    return _intel(classifier).add_subdomain(domain, label)


def remove_subdomain(domain: str, classifier: PublicSuffixClassifier) -> str:
    return _intel(classifier).remove_subdomain(domain)


def replace_subdomains(domain: str, label: str, classifier: PublicSuffixClassifier) -> str:
    return _intel(classifier).replace_subdomains(domain, label)


def is_subdomain_of(candidate: str, parent: str, classifier: PublicSuffixClassifier) -> bool:
    return _intel(classifier).is_subdomain_of(candidate, parent)


def analyze_similarity(
    domain_a: str,
    domain_b: str,
    classifier: PublicSuffixClassifier,
) -> SimilarityVerdict:
    return _intel(classifier).analyze_similarity(domain_a, domain_b)


def is_trusted(domain: str, allow_list: Iterable[str], classifier: PublicSuffixClassifier) -> bool:
    return _intel(classifier).is_trusted(domain, list(allow_list))


def is_blacklisted(domain: str, block_list: Iterable[str], classifier: PublicSuffixClassifier) -> bool:
    return _intel(classifier).is_blacklisted(domain, list(block_list))


def is_safe(
    domain: str,
    classifier: PublicSuffixClassifier,
    suspicious_tlds: Optional[Iterable[str]] = None,
) -> bool:
    """Heuristic safety gate; passing it is not a security guarantee."""
    return _intel(classifier, suspicious_tlds).is_safe(domain)


def is_potential_phishing(domain: str, target: str, classifier: PublicSuffixClassifier) -> bool:
    return _intel(classifier).is_potential_phishing(domain, target)
