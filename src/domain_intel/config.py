"""
Configuration dataclasses for the domain intelligence library.

This module defines the configuration structures used by the DomainIntel
facade and the CLI (similarity threshold, suspicious TLDs, allow/block
lists, logging), together with JSON file and environment loaders.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .enums import DomainErrorCode
from .exceptions import ConfigurationError
from .similarity import DEFAULT_SIMILARITY_THRESHOLD
from .suffix_registry import SUSPICIOUS_TLDS


SUPPORTED_CLASSIFIERS = ("tldextract", "static")
SUPPORTED_OUTPUT_FORMATS = ("json", "text", "both")
SUPPORTED_LOG_LEVELS = ("debug", "info", "warn", "error")

ENV_PREFIX = "DOMAIN_INTEL_"


@dataclass
class SimilarityConfig:
    """Typosquatting detection settings."""

    threshold: float = DEFAULT_SIMILARITY_THRESHOLD


@dataclass
class LoggingConfig:
    """Logging and audit configuration."""

    enabled: bool = False
    level: str = "info"
    audit_mode: bool = False
    audit_signing_key: Optional[str] = None
    output_format: str = "text"  # 'json', 'text', 'both'


@dataclass
class IntelConfig:
    """Main configuration combining all sub-configurations."""

    similarity: SimilarityConfig = field(default_factory=SimilarityConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    suspicious_tlds: list[str] = field(default_factory=lambda: sorted(SUSPICIOUS_TLDS))
    trusted_domains: list[str] = field(default_factory=list)
    blocked_domains: list[str] = field(default_factory=list)
    classifier: str = "tldextract"  # 'tldextract' or 'static'
    language: str = "de"  # 'de' or 'en'


def create_default_config(language: str = "de", classifier: str = "tldextract") -> IntelConfig:
    """
    Create a default configuration.

    Args:
        language: Output language
        classifier: Public suffix classifier to use

    Returns:
        IntelConfig with default values
    """
    return IntelConfig(language=language, classifier=classifier)


def validate_config(config: IntelConfig) -> list[str]:
    """
    Validate a configuration.

    Args:
        config: Configuration to check

    Returns:
        List of error messages, empty if the configuration is valid
    """
    errors = []

    threshold = config.similarity.threshold
    if not isinstance(threshold, (int, float)) or not 0.0 < threshold <= 1.0:
        errors.append(f"Similarity threshold must be in (0, 1], got {threshold!r}")

    if config.classifier not in SUPPORTED_CLASSIFIERS:
        errors.append(f"Unknown classifier: {config.classifier!r}")

    if config.language not in ("de", "en"):
        errors.append(f"Unsupported language: {config.language!r}")

    if config.logging.output_format not in SUPPORTED_OUTPUT_FORMATS:
        errors.append(f"Invalid log output format: {config.logging.output_format!r}")

    if config.logging.level not in SUPPORTED_LOG_LEVELS:
        errors.append(f"Invalid log level: {config.logging.level!r}")

    if config.logging.audit_mode and not config.logging.audit_signing_key:
        errors.append("Audit mode requires an audit signing key")

    for tld in config.suspicious_tlds:
        if not tld or tld != tld.lower() or tld.startswith("."):
            errors.append(f"Suspicious TLD must be lowercase without leading dot: {tld!r}")

    return errors


def config_to_dict(config: IntelConfig) -> dict:
    """Serialize a configuration to a JSON-compatible dictionary."""
    return {
        "similarity": {
            "threshold": config.similarity.threshold,
        },
        "logging": {
            "enabled": config.logging.enabled,
            "level": config.logging.level,
            "audit_mode": config.logging.audit_mode,
            "audit_signing_key": config.logging.audit_signing_key,
            "output_format": config.logging.output_format,
        },
        "suspicious_tlds": list(config.suspicious_tlds),
        "trusted_domains": list(config.trusted_domains),
        "blocked_domains": list(config.blocked_domains),
        "classifier": config.classifier,
        "language": config.language,
    }


def config_from_dict(data: dict) -> IntelConfig:
    """
    Build a configuration from a dictionary, filling gaps with defaults.

    Raises:
        ConfigurationError: If a section has the wrong type
    """
    defaults = IntelConfig()
    try:
        similarity_data = data.get("similarity", {})
        logging_data = data.get("logging", {})

        return IntelConfig(
            similarity=SimilarityConfig(
                threshold=float(similarity_data.get("threshold", defaults.similarity.threshold)),
            ),
            logging=LoggingConfig(
                enabled=bool(logging_data.get("enabled", False)),
                level=logging_data.get("level", "info"),
                audit_mode=bool(logging_data.get("audit_mode", False)),
                audit_signing_key=logging_data.get("audit_signing_key"),
                output_format=logging_data.get("output_format", "text"),
            ),
            suspicious_tlds=list(data.get("suspicious_tlds", defaults.suspicious_tlds)),
            trusted_domains=list(data.get("trusted_domains", [])),
            blocked_domains=list(data.get("blocked_domains", [])),
            classifier=data.get("classifier", defaults.classifier),
            language=data.get("language", defaults.language),
        )
    except (AttributeError, TypeError, ValueError) as e:
        raise ConfigurationError(
            code=DomainErrorCode.INVALID_CONFIG.value,
            message=f"Malformed configuration: {e}",
            details={"error": str(e)},
        )


def load_config_from_file(config_path: Path) -> Optional[IntelConfig]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        IntelConfig if loaded successfully, None otherwise
    """
    if not config_path.exists():
        return None

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return config_from_dict(data)
    except (OSError, json.JSONDecodeError, ConfigurationError):
        return None


def save_config_to_file(config: IntelConfig, config_path: Path) -> bool:
    """
    Save configuration to a JSON file.

    Args:
        config: Configuration to save
        config_path: Destination path

    Returns:
        True if saved successfully, False otherwise
    """
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config_to_dict(config), f, indent=2, ensure_ascii=False)
        return True
    except OSError:
        return False


def parse_domain_list(env_val: Optional[str]) -> list[str]:
    """
    Split a comma, semicolon or whitespace separated list.

    Entries are lowercased, de-duplicated in order, and '#'-prefixed
    entries are skipped.
    """
    if not env_val:
        return []
    raw = [p.strip() for chunk in env_val.replace(";", ",").split(",") for p in chunk.split()]
    seen, out = set(), []
    for item in raw:
        if not item or item.startswith("#"):
            continue
        lc = item.lower()
        if lc not in seen:
            out.append(lc)
            seen.add(lc)
    return out


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def load_config_from_env(
    dotenv_path: Optional[Path] = None,
    base: Optional[IntelConfig] = None,
) -> IntelConfig:
    """
    Load configuration from DOMAIN_INTEL_* environment variables.

    Variables from a .env file are loaded first without overriding the
    real environment.

    Args:
        dotenv_path: Explicit .env file (searched upward from cwd if omitted)
        base: Configuration to override (defaults if omitted)

    Returns:
        IntelConfig with environment overrides applied
    """
    load_dotenv(dotenv_path=dotenv_path, override=False)
    config = base or IntelConfig()

    suspicious = parse_domain_list(os.getenv(f"{ENV_PREFIX}SUSPICIOUS_TLDS"))
    trusted = parse_domain_list(os.getenv(f"{ENV_PREFIX}TRUSTED_DOMAINS"))
    blocked = parse_domain_list(os.getenv(f"{ENV_PREFIX}BLOCKED_DOMAINS"))
    audit_key = os.getenv(f"{ENV_PREFIX}AUDIT_KEY", "").strip()

    return IntelConfig(
        similarity=SimilarityConfig(
            threshold=_float_env(f"{ENV_PREFIX}SIMILARITY_THRESHOLD", config.similarity.threshold),
        ),
        logging=LoggingConfig(
            enabled=(os.getenv(f"{ENV_PREFIX}LOG", "1" if config.logging.enabled else "0") == "1"),
            level=(os.getenv(f"{ENV_PREFIX}LOG_LEVEL") or config.logging.level).lower(),
            audit_mode=bool(audit_key) or config.logging.audit_mode,
            audit_signing_key=audit_key or config.logging.audit_signing_key,
            output_format=(os.getenv(f"{ENV_PREFIX}LOG_FORMAT") or config.logging.output_format).lower(),
        ),
        suspicious_tlds=[t.strip(".") for t in suspicious] or config.suspicious_tlds,
        trusted_domains=trusted or config.trusted_domains,
        blocked_domains=blocked or config.blocked_domains,
        classifier=(os.getenv(f"{ENV_PREFIX}CLASSIFIER") or config.classifier).lower(),
        language=(os.getenv(f"{ENV_PREFIX}LANG") or config.language).lower(),
    )
