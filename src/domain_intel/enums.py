"""
Enumeration types for the domain intelligence library.

These enums provide type-safe constants for error codes, classifier
outcomes, similarity reasons and logging levels.
"""

from enum import Enum


class LogLevel(Enum):
    """Logging severity levels."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class DomainErrorCode(Enum):
    """Error codes carried by DomainIntelError subclasses."""

    INVALID_HOSTNAME = "invalid_hostname"
    INVALID_OPERATION = "invalid_operation"
    ENCODING_ERROR = "encoding_error"
    DECODING_ERROR = "decoding_error"
    INVALID_CONFIG = "invalid_config"


class DomainValidationErrorCode(Enum):
    """Error codes for hostname validation failures."""

    EMPTY_INPUT = "empty_input"
    TOO_LONG = "too_long"
    FORBIDDEN_CHARS = "forbidden_chars"
    INVALID_LABEL = "invalid_label"
    INVALID_HOSTNAME = "invalid_hostname"


class SuffixStatus(Enum):
    """Outcome of a public suffix lookup."""

    LISTED = "listed"
    NOT_LISTED = "not_listed"
    INVALID = "invalid"


class IpVersion(Enum):
    """IP protocol version of an address literal."""

    V4 = "v4"
    V6 = "v6"


class SimilarityReason(Enum):
    """Why two root domains were flagged as a typosquatting pair."""

    ONE_EDIT = "one-edit"
    ADJACENT_TRANSPOSITION = "adjacent-transposition"
    HOMOGLYPH_SUBSTITUTION = "homoglyph-substitution"
    TLD_VARIATION = "tld-variation"
    HIGH_OVERALL_SIMILARITY = "high-overall-similarity"
