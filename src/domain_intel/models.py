"""
Data models for the domain intelligence library.

Every model is an immutable value object created by a single parse or
evaluate call and owned by the caller afterwards.
"""

from dataclasses import dataclass
from typing import Optional

from .enums import IpVersion, SimilarityReason, SuffixStatus


@dataclass(frozen=True)
class DomainLabel:
    """One dot-separated segment of a parsed domain."""

    text: str
    level: int  # 0 = subdomain nearest the registrable label, increasing to the right
    is_public_suffix: bool = False
    is_registrable: bool = False


@dataclass(frozen=True)
class ParsedDomain:
    """Decomposition of one domain string into its hierarchy of labels."""

    full_domain: str  # Host part of the input (scheme and path removed)
    labels: tuple[DomainLabel, ...] = ()
    tld: str = ""  # Joined public suffix labels, e.g. 'co.uk'
    sld: Optional[str] = None  # Registrable label, e.g. 'example'
    subdomain: Optional[str] = None  # Joined subdomain labels, e.g. 'a.b'
    is_ip: bool = False
    is_local: bool = False
    is_valid: bool = True

    @property
    def registrable_label(self) -> Optional[DomainLabel]:
        """The single label flagged registrable, if any."""
        for label in self.labels:
            if label.is_registrable:
                return label
        return None

    @property
    def suffix_labels(self) -> tuple[DomainLabel, ...]:
        """Public suffix labels in source order."""
        return tuple(label for label in self.labels if label.is_public_suffix)

    @property
    def subdomain_labels(self) -> tuple[DomainLabel, ...]:
        """Labels that are neither registrable nor public suffix, outermost first."""
        return tuple(
            label for label in self.labels
            if not label.is_public_suffix and not label.is_registrable
        )


@dataclass(frozen=True)
class IpAddress:
    """Classification of an IPv4 or IPv6 literal."""

    address: str
    version: IpVersion
    is_private: bool = False
    is_loopback: bool = False
    is_multicast: bool = False
    subnet: Optional[str] = None  # Reserved for callers, never computed here

    @property
    def is_unsafe(self) -> bool:
        """True for addresses not meant to be reached on the public internet."""
        return self.is_private or self.is_loopback or self.is_multicast


@dataclass(frozen=True)
class SuffixClassification:
    """Answer of a PublicSuffixClassifier for one domain."""

    status: SuffixStatus
    subdomain_labels: tuple[str, ...] = ()
    registrable_label: Optional[str] = None
    suffix_labels: tuple[str, ...] = ()

    @classmethod
    def listed(
        cls,
        subdomain_labels: list[str],
        registrable_label: str,
        suffix_labels: list[str],
    ) -> "SuffixClassification":
        return cls(
            status=SuffixStatus.LISTED,
            subdomain_labels=tuple(subdomain_labels),
            registrable_label=registrable_label,
            suffix_labels=tuple(suffix_labels),
        )

    @classmethod
    def not_listed(cls) -> "SuffixClassification":
        return cls(status=SuffixStatus.NOT_LISTED)

    @classmethod
    def invalid(cls) -> "SuffixClassification":
        return cls(status=SuffixStatus.INVALID)


@dataclass(frozen=True)
class SimilarityVerdict:
    """Result of comparing two root domains for typosquatting."""

    score: float  # 1.0 means identical root domains
    is_typosquatting: bool = False
    reason: Optional[SimilarityReason] = None

    def __post_init__(self) -> None:
        if self.is_typosquatting and self.reason is None:
            raise ValueError("A typosquatting verdict requires a reason")

    def to_dict(self) -> dict:
        """Convert verdict to dictionary for serialization."""
        return {
            "score": self.score,
            "is_typosquatting": self.is_typosquatting,
            "reason": self.reason.value if self.reason else None,
        }


@dataclass(frozen=True)
class PhishingAssessment:
    """
    Phishing signals for a domain measured against a target.

    contains_target is a separate low-confidence signal: a short target can
    appear inside unrelated domains ('a.com' inside 'banana.com').
    """

    domain: str
    target: str
    contains_target: bool
    verdict: SimilarityVerdict

    @property
    def is_potential_phishing(self) -> bool:
        return self.contains_target or self.verdict.is_typosquatting

    def to_dict(self) -> dict:
        """Convert assessment to dictionary for serialization."""
        return {
            "domain": self.domain,
            "target": self.target,
            "is_potential_phishing": self.is_potential_phishing,
            "contains_target": self.contains_target,
            "similarity": self.verdict.to_dict(),
        }
