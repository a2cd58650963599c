"""
Internationalization (i18n) module for the domain intelligence library.

Provides translations for all user-facing messages in German (de) and English (en).
"""

from typing import Optional


# Supported languages
SUPPORTED_LANGUAGES = frozenset({"de", "en"})
DEFAULT_LANGUAGE = "de"


# Translation dictionary with all messages
# Structure: {message_key: {language_code: translated_message}}
TRANSLATIONS: dict[str, dict[str, str]] = {
    # Similarity reasons
    "reason.one-edit": {
        "de": "Ein Zeichen ersetzt, hinzugefügt oder entfernt",
        "en": "One character substitution, addition, or deletion",
    },
    "reason.adjacent-transposition": {
        "de": "Zwei benachbarte Zeichen vertauscht",
        "en": "Adjacent character transposition",
    },
    "reason.homoglyph-substitution": {
        "de": "Verwendung optisch ähnlicher Zeichen",
        "en": "Use of visually similar characters",
    },
    "reason.tld-variation": {
        "de": "Gleicher Name mit anderer TLD",
        "en": "TLD variation",
    },
    "reason.high-overall-similarity": {
        "de": "Hohe Gesamtähnlichkeit",
        "en": "High overall similarity",
    },
    "reason.none": {
        "de": "Keine Auffälligkeit",
        "en": "No finding",
    },

    # Verdict labels
    "verdict.typosquatting": {
        "de": "Typosquatting-Verdacht",
        "en": "Suspected typosquatting",
    },
    "verdict.not_typosquatting": {
        "de": "Kein Typosquatting erkannt",
        "en": "No typosquatting detected",
    },
    "verdict.phishing": {
        "de": "Möglicher Phishing-Versuch gegen {target}",
        "en": "Potential phishing attempt against {target}",
    },
    "verdict.not_phishing": {
        "de": "Kein Phishing-Verdacht gegen {target}",
        "en": "No phishing suspected against {target}",
    },
    "verdict.contains_target": {
        "de": "Domain enthält '{target}' (schwaches Signal)",
        "en": "Domain contains '{target}' (low-confidence signal)",
    },
    "verdict.safe": {
        "de": "Keine Warnsignale (heuristisch, keine Garantie)",
        "en": "No warning signs (heuristic, not a guarantee)",
    },
    "verdict.unsafe": {
        "de": "Unsicher",
        "en": "Unsafe",
    },
    "verdict.trusted": {
        "de": "Vertrauenswürdig",
        "en": "Trusted",
    },
    "verdict.blacklisted": {
        "de": "Gesperrt",
        "en": "Blacklisted",
    },
    "verdict.unlisted": {
        "de": "In keiner Liste",
        "en": "Not on any list",
    },

    # Parse output
    "parse.root_domain": {
        "de": "Stammdomain",
        "en": "Root domain",
    },
    "parse.subdomains": {
        "de": "Subdomains",
        "en": "Subdomains",
    },
    "parse.suffix": {
        "de": "Öffentliches Suffix",
        "en": "Public suffix",
    },
    "parse.ip": {
        "de": "IP-Adresse ({version})",
        "en": "IP address ({version})",
    },
    "parse.local": {
        "de": "Lokale oder nicht gelistete Domain",
        "en": "Local or unlisted domain",
    },
    "parse.score": {
        "de": "Ähnlichkeit: {score:.2f}",
        "en": "Similarity: {score:.2f}",
    },

    # Errors
    "error.invalid_hostname": {
        "de": "Ungültiger Hostname: {error}",
        "en": "Invalid hostname: {error}",
    },
    "error.config_load": {
        "de": "Konfiguration konnte nicht aus {path} geladen werden",
        "en": "Could not load config from {path}",
    },
    "error.config_invalid": {
        "de": "Konfiguration ungültig: {error}",
        "en": "Invalid configuration: {error}",
    },

    # Self-test messages
    "selftest.starting": {
        "de": "Starte Selbsttest...",
        "en": "Starting self-test...",
    },
    "selftest.probe_ok": {
        "de": "✓ {probe}",
        "en": "✓ {probe}",
    },
    "selftest.probe_failed": {
        "de": "✗ {probe}: erwartet {expected}, erhalten {actual}",
        "en": "✗ {probe}: expected {expected}, got {actual}",
    },
    "selftest.passed": {
        "de": "Selbsttest erfolgreich",
        "en": "Self-test passed",
    },
    "selftest.failed": {
        "de": "Selbsttest fehlgeschlagen",
        "en": "Self-test failed",
    },
}


def get_message(
    key: str,
    language: Optional[str] = None,
    **kwargs,
) -> str:
    """
    Get a translated message by key.

    Args:
        key: The message key (e.g., 'reason.one-edit')
        language: Language code ('de' or 'en'). Defaults to DEFAULT_LANGUAGE.
        **kwargs: Format arguments for the message template

    Returns:
        The translated and formatted message string.
        If the key is not found, returns the key itself.
        If the language is not found, falls back to DEFAULT_LANGUAGE.

    Examples:
        >>> get_message('verdict.trusted', 'en')
        'Trusted'
        >>> get_message('verdict.phishing', 'de', target='paypal.com')
        'Möglicher Phishing-Versuch gegen paypal.com'
    """
    if language is None or language not in SUPPORTED_LANGUAGES:
        language = DEFAULT_LANGUAGE

    translations = TRANSLATIONS.get(key)
    if translations is None:
        return key

    message = translations.get(language)
    if message is None:
        message = translations.get(DEFAULT_LANGUAGE)
    if message is None:
        return key

    if kwargs:
        try:
            message = message.format(**kwargs)
        except (KeyError, ValueError):
            # Leave the template as-is if the arguments don't fit
            pass

    return message


def get_all_message_keys() -> set[str]:
    """Get all available message keys."""
    return set(TRANSLATIONS.keys())


def has_translation(key: str, language: str) -> bool:
    """
    Check if a translation exists for a key and language.

    Args:
        key: The message key
        language: The language code

    Returns:
        True if translation exists, False otherwise.
    """
    translations = TRANSLATIONS.get(key)
    if translations is None:
        return False
    return language in translations


def get_missing_translations(language: str) -> set[str]:
    """Get all message keys that are missing translations for a language."""
    return {
        key for key, translations in TRANSLATIONS.items()
        if language not in translations
    }


def validate_translations() -> dict[str, set[str]]:
    """
    Validate that all languages have all translations.

    Returns:
        Dictionary mapping language codes to sets of missing message keys.
        Empty sets indicate complete translations.
    """
    return {
        language: get_missing_translations(language)
        for language in SUPPORTED_LANGUAGES
    }
