"""
Suffix Registry - Built-in public suffix table for the static classifier.

This module groups the suffixes the StaticSuffixClassifier knows about:
- Generic TLDs (gTLDs): .com, .net, .org, .info, etc.
- New gTLDs: .app, .dev, .io, .xyz, etc.
- Country Code TLDs (ccTLDs): .de, .uk, .fr, .jp, etc.
- Multi-label country suffixes: .co.uk, .com.au, .co.jp, etc.

It is a curated subset, not a copy of the Public Suffix List. Callers that
need full coverage use the TLDExtractClassifier instead.
"""

# Length ceilings from RFC 1035
MAX_DOMAIN_LENGTH = 253
MAX_LABEL_LENGTH = 63

# Prefix of ASCII-compatible encoded (Punycode) labels
ACE_PREFIX = "xn--"

# TLDs frequently seen in abuse reports
SUSPICIOUS_TLDS = frozenset({
    "top", "xyz", "club", "work", "date", "racing", "stream", "bid",
    "review", "trade", "party", "science", "loan", "download",
    "accountant", "win", "gq", "ml", "cf", "ga", "tk",
})

# ============================================================================
# GENERIC TLDs (gTLDs)
# ============================================================================
GENERIC_SUFFIXES = [
    "com", "net", "org", "info", "biz", "name", "mobi", "pro",
    "edu", "gov", "mil", "int", "arpa",
]


# ============================================================================
# NEW gTLDs
# ============================================================================
NEW_GENERIC_SUFFIXES = [
    "io", "co", "app", "dev", "ai", "tech", "cloud", "digital", "software",
    "systems", "network", "solutions", "agency", "studio", "design", "media",
    "xyz", "online", "site", "store", "shop", "club", "live", "life", "world",
    "today", "space", "fun", "top", "vip", "one", "blog", "news", "email",
    "link", "click", "work", "date", "racing", "stream", "bid", "review",
    "trade", "party", "science", "loan", "download", "accountant", "win",
]


# ============================================================================
# COUNTRY CODE TLDs (ccTLDs)
# ============================================================================
COUNTRY_SUFFIXES = [
    "de", "at", "ch", "eu", "uk", "fr", "it", "es", "nl", "be", "lu", "pl",
    "cz", "sk", "hu", "ro", "bg", "gr", "pt", "ie", "dk", "se", "no", "fi",
    "is", "ee", "lv", "lt", "ru", "ua", "by", "tr", "us", "ca", "mx", "br",
    "ar", "cl", "jp", "cn", "kr", "in", "au", "nz", "za", "tv", "me", "cc",
    "ws", "gq", "ml", "cf", "ga", "tk", "su",
    "xn--p1ai", "рф",  # .рф, ACE and Unicode form
]


# ============================================================================
# MULTI-LABEL COUNTRY SUFFIXES
# ============================================================================
MULTI_LABEL_SUFFIXES = [
    "co.uk", "org.uk", "ac.uk", "gov.uk", "me.uk", "ltd.uk", "plc.uk",
    "com.au", "net.au", "org.au", "edu.au", "gov.au",
    "co.jp", "ne.jp", "or.jp", "ac.jp",
    "co.nz", "org.nz", "net.nz",
    "com.br", "net.br", "org.br",
    "com.cn", "net.cn", "org.cn",
    "co.in", "net.in", "org.in",
    "co.za", "org.za",
    "com.mx", "com.ar", "com.tr", "co.kr", "or.kr",
]


def get_all_suffixes() -> frozenset[str]:
    """
    Get every suffix in the registry.

    Returns:
        Frozen set of lowercase suffixes, single and multi-label.
    """
    return frozenset(
        GENERIC_SUFFIXES
        + NEW_GENERIC_SUFFIXES
        + COUNTRY_SUFFIXES
        + MULTI_LABEL_SUFFIXES
    )
