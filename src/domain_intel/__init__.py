"""
Domain Intel - Offline domain parsing, typosquatting and trust evaluation.

This package decomposes domains into subdomain, registrable and public
suffix labels through an injected public suffix classifier, and builds
normalization, subdomain algebra, similarity scoring and allow/block and
safety heuristics on top of it.
"""

__version__ = "0.1.0"
__author__ = "Domain Intel Team"

from domain_intel.exceptions import (
    DomainIntelError,
    InvalidHostnameError,
    InvalidOperationError,
    EncodingError,
    DecodingError,
    ConfigurationError,
)
from domain_intel.enums import (
    LogLevel,
    DomainErrorCode,
    DomainValidationErrorCode,
    SuffixStatus,
    IpVersion,
    SimilarityReason,
)
from domain_intel.models import (
    DomainLabel,
    ParsedDomain,
    IpAddress,
    SuffixClassification,
    SimilarityVerdict,
    PhishingAssessment,
)
from domain_intel.suffix import (
    PublicSuffixClassifier,
    StaticSuffixClassifier,
    TLDExtractClassifier,
)
from domain_intel.ip_classifier import IpClassifier
from domain_intel.punycode import (
    to_punycode,
    from_punycode,
)
from domain_intel.domain_parser import DomainParser
from domain_intel.domain_validator import (
    DomainValidator,
    DomainValidationResult,
    DomainValidationError,
)
from domain_intel.normalizer import DomainNormalizer
from domain_intel.subdomain_ops import SubdomainOperations
from domain_intel.similarity import (
    SimilarityEngine,
    levenshtein,
    DEFAULT_SIMILARITY_THRESHOLD,
)
from domain_intel.trust import TrustEvaluator
from domain_intel.threat import ThreatEvaluator
from domain_intel.audit_logger import (
    AuditLogger,
    LogEntry,
)
from domain_intel.config import (
    IntelConfig,
    SimilarityConfig,
    LoggingConfig,
    create_default_config,
    load_config_from_file,
    load_config_from_env,
    save_config_to_file,
)
from domain_intel.i18n import (
    get_message,
    get_all_message_keys,
    has_translation,
    get_missing_translations,
    validate_translations,
    TRANSLATIONS,
    SUPPORTED_LANGUAGES,
    DEFAULT_LANGUAGE,
)
from domain_intel.intel import (
    DomainIntel,
    parse_domain,
    classify_ip,
    normalize_domain,
    root_domain,
    subdomains,
    add_subdomain,
    remove_subdomain,
    replace_subdomains,
    is_subdomain_of,
    analyze_similarity,
    is_trusted,
    is_blacklisted,
    is_safe,
    is_potential_phishing,
)
from domain_intel.self_test import (
    SelfTest,
    SelfTestResult,
    ProbeResult,
    ConfigValidationResult,
    run_self_test,
)
from domain_intel.cli import (
    main as cli_main,
    create_parser,
)

__all__ = [
    # Exceptions
    "DomainIntelError",
    "InvalidHostnameError",
    "InvalidOperationError",
    "EncodingError",
    "DecodingError",
    "ConfigurationError",
    # Enums
    "LogLevel",
    "DomainErrorCode",
    "DomainValidationErrorCode",
    "SuffixStatus",
    "IpVersion",
    "SimilarityReason",
    # Models
    "DomainLabel",
    "ParsedDomain",
    "IpAddress",
    "SuffixClassification",
    "SimilarityVerdict",
    "PhishingAssessment",
    # Suffix Classifiers
    "PublicSuffixClassifier",
    "StaticSuffixClassifier",
    "TLDExtractClassifier",
    # IP Classifier
    "IpClassifier",
    # Punycode
    "to_punycode",
    "from_punycode",
    # Parser, Validator, Normalizer
    "DomainParser",
    "DomainValidator",
    "DomainValidationResult",
    "DomainValidationError",
    "DomainNormalizer",
    # Subdomain Operations
    "SubdomainOperations",
    # Similarity
    "SimilarityEngine",
    "levenshtein",
    "DEFAULT_SIMILARITY_THRESHOLD",
    # Evaluators
    "TrustEvaluator",
    "ThreatEvaluator",
    # Audit Logger
    "AuditLogger",
    "LogEntry",
    # Configuration
    "IntelConfig",
    "SimilarityConfig",
    "LoggingConfig",
    "create_default_config",
    "load_config_from_file",
    "load_config_from_env",
    "save_config_to_file",
    # I18n
    "get_message",
    "get_all_message_keys",
    "has_translation",
    "get_missing_translations",
    "validate_translations",
    "TRANSLATIONS",
    "SUPPORTED_LANGUAGES",
    "DEFAULT_LANGUAGE",
    # Facade
    "DomainIntel",
    "parse_domain",
    "classify_ip",
    "normalize_domain",
    "root_domain",
    "subdomains",
    "add_subdomain",
    "remove_subdomain",
    "replace_subdomains",
    "is_subdomain_of",
    "analyze_similarity",
    "is_trusted",
    "is_blacklisted",
    "is_safe",
    "is_potential_phishing",
    # Self-Test
    "SelfTest",
    "SelfTestResult",
    "ProbeResult",
    "ConfigValidationResult",
    "run_self_test",
    # CLI
    "cli_main",
    "create_parser",
]
