"""
Similarity Engine for typosquatting detection.

This module compares two root domains with several string signals and
produces a SimilarityVerdict. Reasons are checked in a fixed priority
order and the first match wins:

1. One edit (Levenshtein distance of exactly 1)
2. One adjacent transposition ('gogole' for 'google')
3. Homoglyph substitution (Cyrillic 'о' for Latin 'o', '0' for 'o')
4. TLD variation ('example.net' for 'example.com')
5. High overall similarity (score above the configured threshold)

The score is reported whatever the reason. If a domain cannot be parsed
the verdict degrades to "not typosquatting".
"""

from typing import Optional

from .domain_parser import DomainParser
from .enums import SimilarityReason
from .exceptions import DomainIntelError
from .models import SimilarityVerdict
from .normalizer import DomainNormalizer
from .subdomain_ops import SubdomainOperations


DEFAULT_SIMILARITY_THRESHOLD = 0.8

# Base character -> visually confusable single characters
HOMOGLYPHS: dict[str, str] = {
    "a": "аąàáâãäåɑ",
    "b": "dʙЬßɓ",
    "c": "ϲсƈ",
    "d": "bԁɗ",
    "e": "еēĕėęёєəɇ",
    "g": "qɢɡց",
    "h": "һհᏂ",
    "i": "1l|íïıɩ",
    "j": "јʝ",
    "k": "κкⲕḳ",
    "l": "1i|ⅼӏḷ",
    "m": "nṃ",
    "n": "mrńņṇṅ",
    "o": "0оοөōȯọỏơ",
    "p": "рρṗṕ",
    "q": "gզ",
    "r": "ʀɼɽ",
    "s": "ѕśṣṡ5",
    "t": "τтţṭț",
    "u": "μυцùúûüǔụ",
    "v": "νѵ",
    "w": "ѡԝẁẃẅ",
    "x": "хҳẋ",
    "y": "үƴỷỵỳý",
    "z": "ʐżźᴢ2",
}


def _build_homoglyph_pairs(table: dict[str, str]) -> frozenset[tuple[str, str]]:
    pairs = set()
    for base, variants in table.items():
        if len(base) != 1:
            raise ValueError(f"Homoglyph base must be one character: {base!r}")
        for variant in variants:
            if variant == base:
                raise ValueError(f"Homoglyph {base!r} lists itself as a variant")
            pairs.add((base, variant))
            pairs.add((variant, base))
    return frozenset(pairs)


HOMOGLYPH_PAIRS = _build_homoglyph_pairs(HOMOGLYPHS)


def levenshtein(a: str, b: str) -> int:
    """
    Edit distance between two strings.

    Counts single-character insertions, deletions and substitutions over
    Unicode code points. Keeps one row of the DP table, sized by the
    shorter string.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(
                    previous[j - 1],  # substitution
                    current[j - 1],  # insertion
                    previous[j],  # deletion
                ))
        previous = current

    return previous[-1]


def is_adjacent_transposition(a: str, b: str) -> bool:
    """
    Check whether b is a with exactly one pair of neighbouring characters swapped.

    Args:
        a: First string, e.g. 'google'
        b: Second string, e.g. 'gogole'

    Returns:
        True only for a single adjacent swap with everything else equal
    """
    if len(a) != len(b):
        return False

    i = 0
    swapped = False
    while i < len(a):
        if a[i] == b[i]:
            i += 1
            continue
        if swapped or i + 1 >= len(a):
            return False
        if a[i] != b[i + 1] or a[i + 1] != b[i]:
            return False
        swapped = True
        i += 2

    return swapped


def is_homoglyph_variant(a: str, b: str) -> bool:
    """
    Check whether a and b differ only by look-alike characters.

    Args:
        a: First string, e.g. 'google'
        b: Second string, e.g. 'gооgle' (Cyrillic 'о')

    Returns:
        True if equal length, every differing position is a known
        homoglyph pair, and at least one position differs
    """
    if len(a) != len(b):
        return False

    substitutions = 0
    for char_a, char_b in zip(a, b):
        if char_a == char_b:
            continue
        if (char_a, char_b) not in HOMOGLYPH_PAIRS:
            return False
        substitutions += 1

    return substitutions > 0


class SimilarityEngine:
    """
    Multi-signal similarity scoring between two domains.

    Domains are normalized and reduced to their root domains before
    comparison, so 'login.paypa1.com' is compared as 'paypa1.com'.
    """

    def __init__(
        self,
        parser: DomainParser,
        normalizer: Optional[DomainNormalizer] = None,
        subdomain_ops: Optional[SubdomainOperations] = None,
        threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    ) -> None:
        """
        Initialize engine.

        Args:
            parser: Domain parser used for root and TLD extraction
            normalizer: Domain normalizer (a fresh one if omitted)
            subdomain_ops: Subdomain operations over the same parser
            threshold: Score above which any pair counts as typosquatting
        """
        self._parser = parser
        self._normalizer = normalizer or DomainNormalizer(ip_classifier=parser.ip_classifier)
        self._subdomain_ops = subdomain_ops or SubdomainOperations(parser)
        self._threshold = threshold

    @property
    def threshold(self) -> float:
        return self._threshold

    def is_tld_variation(self, domain_a: str, domain_b: str) -> bool:
        """
        Check whether two domains share a registrable label but not a suffix.

        Returns False when either domain fails to parse or is an IP.
        """
        try:
            info_a = self._parser.parse(domain_a)
            info_b = self._parser.parse(domain_b)
        except DomainIntelError:
            return False

        if info_a.is_ip or info_b.is_ip:
            return False
        if not info_a.sld or not info_b.sld:
            return False

        return info_a.sld == info_b.sld and info_a.tld != info_b.tld

    def analyze(self, domain_a: str, domain_b: str) -> SimilarityVerdict:
        """
        Compare two domains for typosquatting.

        Args:
            domain_a: First domain or URL
            domain_b: Second domain or URL

        Returns:
            SimilarityVerdict with score, flag and the highest-priority reason
        """
        normalized_a = self._normalizer.normalize(domain_a)
        normalized_b = self._normalizer.normalize(domain_b)

        try:
            root_a = self._subdomain_ops.root_domain(normalized_a)
            root_b = self._subdomain_ops.root_domain(normalized_b)
        except DomainIntelError:
            return SimilarityVerdict(score=self.score(normalized_a, normalized_b))

        if root_a == root_b:
            return SimilarityVerdict(score=1.0)

        distance = levenshtein(root_a, root_b)
        score = 1 - distance / max(len(root_a), len(root_b))

        reason = self._reason(distance, score, root_a, root_b, normalized_a, normalized_b)
        return SimilarityVerdict(
            score=score,
            is_typosquatting=reason is not None,
            reason=reason,
        )

    @staticmethod
    def score(a: str, b: str) -> float:
        """Similarity score in [0, 1] derived from edit distance."""
        longest = max(len(a), len(b))
        if longest == 0:
            return 1.0
        return 1 - levenshtein(a, b) / longest

    def _reason(
        self,
        distance: int,
        score: float,
        root_a: str,
        root_b: str,
        normalized_a: str,
        normalized_b: str,
    ) -> Optional[SimilarityReason]:
        if distance == 1:
            return SimilarityReason.ONE_EDIT
        if is_adjacent_transposition(root_a, root_b):
            return SimilarityReason.ADJACENT_TRANSPOSITION
        if is_homoglyph_variant(root_a, root_b):
            return SimilarityReason.HOMOGLYPH_SUBSTITUTION
        if self.is_tld_variation(normalized_a, normalized_b):
            return SimilarityReason.TLD_VARIATION
        if score > self._threshold:
            return SimilarityReason.HIGH_OVERALL_SIMILARITY
        return None
