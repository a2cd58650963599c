"""
Public suffix classification.

The parser never owns suffix data. It asks an injected
PublicSuffixClassifier how many trailing labels of a domain form the
public suffix, which keeps the core free of global state and lets tests
run against synthetic tables.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

import tldextract

from .models import SuffixClassification
from .suffix_registry import get_all_suffixes


class PublicSuffixClassifier(ABC):
    """Lookup that splits a domain into subdomain, registrable and suffix labels."""

    @abstractmethod
    def classify(self, domain: str) -> SuffixClassification:
        """
        Classify a bare hostname (no scheme, path or port).

        Args:
            domain: Hostname such as 'www.example.co.uk'

        Returns:
            SuffixClassification with LISTED, NOT_LISTED or INVALID status
        """
        pass


def _has_empty_label(domain: str) -> bool:
    return not domain or any(not label for label in domain.split("."))


class StaticSuffixClassifier(PublicSuffixClassifier):
    """
    Classifier backed by an in-memory suffix table.

    Uses longest-suffix matching, so 'example.co.uk' resolves to the
    registrable label 'example' under 'co.uk' when both 'uk' and 'co.uk'
    are in the table.
    """

    def __init__(self, suffixes: Optional[Iterable[str]] = None) -> None:
        """
        Initialize classifier with a suffix table.

        Args:
            suffixes: Suffixes without leading dot (e.g. ['com', 'co.uk']).
                Defaults to the built-in suffix registry.
        """
        source = get_all_suffixes() if suffixes is None else suffixes
        self._suffixes = frozenset(s.lower().strip(".") for s in source if s.strip("."))
        self._max_depth = max(
            (s.count(".") + 1 for s in self._suffixes),
            default=0,
        )

    @property
    def suffixes(self) -> frozenset[str]:
        return self._suffixes

    def classify(self, domain: str) -> SuffixClassification:
        if _has_empty_label(domain):
            return SuffixClassification.invalid()

        labels = domain.split(".")
        lowered = [label.lower() for label in labels]

        suffix_length = 0
        for depth in range(min(self._max_depth, len(labels)), 0, -1):
            if ".".join(lowered[-depth:]) in self._suffixes:
                suffix_length = depth
                break

        if suffix_length == 0:
            return SuffixClassification.not_listed()

        # Nothing left to register under the suffix
        if suffix_length >= len(labels):
            return SuffixClassification.invalid()

        registrable_index = len(labels) - suffix_length - 1
        return SuffixClassification.listed(
            subdomain_labels=labels[:registrable_index],
            registrable_label=labels[registrable_index],
            suffix_labels=labels[registrable_index + 1:],
        )


class TLDExtractClassifier(PublicSuffixClassifier):
    """
    Classifier backed by tldextract and its bundled Public Suffix List snapshot.

    No suffix list URLs are configured, so tldextract never fetches over the
    network; it reads its local cache or the snapshot shipped with the
    package.
    """

    def __init__(
        self,
        include_private_domains: bool = False,
        extractor: Optional[tldextract.TLDExtract] = None,
    ) -> None:
        """
        Initialize classifier.

        Args:
            include_private_domains: Treat PSL private entries (e.g.
                'github.io') as public suffixes
            extractor: Preconfigured TLDExtract instance to use instead
        """
        self._extractor = extractor or tldextract.TLDExtract(
            suffix_list_urls=(),
            include_psl_private_domains=include_private_domains,
        )

    def classify(self, domain: str) -> SuffixClassification:
        if _has_empty_label(domain):
            return SuffixClassification.invalid()

        result = self._extractor(domain)

        if not result.suffix:
            return SuffixClassification.not_listed()

        if not result.domain:
            return SuffixClassification.invalid()

        return SuffixClassification.listed(
            subdomain_labels=result.subdomain.split(".") if result.subdomain else [],
            registrable_label=result.domain,
            suffix_labels=result.suffix.split("."),
        )
