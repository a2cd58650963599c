"""
Threat Evaluator for impersonation and general safety checks.

This module combines the similarity engine with IP, locality and
suspicious-TLD signals. Its answers are advisory heuristics for link
scanners and redirect validators, not security guarantees: a domain that
passes is_safe() can still be malicious.

When an internal parse fails, each check falls back to its cautious
default (not safe, not typosquatting) instead of raising.
"""

from typing import Iterable, Optional

from .audit_logger import AuditLogger
from .domain_parser import DomainParser
from .exceptions import DomainIntelError
from .models import PhishingAssessment, SimilarityVerdict
from .normalizer import DomainNormalizer
from .similarity import SimilarityEngine
from .suffix_registry import SUSPICIOUS_TLDS


class ThreatEvaluator:
    """
    Answers "is domain A impersonating domain B" and "is this domain safe".

    The phishing check flags a domain when it contains the target as a
    substring (a low-confidence signal, reported separately in
    PhishingAssessment) or when the similarity engine sees typosquatting.
    """

    COMPONENT = "threat_evaluator"

    def __init__(
        self,
        parser: DomainParser,
        similarity: SimilarityEngine,
        normalizer: Optional[DomainNormalizer] = None,
        suspicious_tlds: Optional[Iterable[str]] = None,
        logger: Optional[AuditLogger] = None,
    ) -> None:
        """
        Initialize evaluator.

        Args:
            parser: Domain parser for locality and suffix lookups
            similarity: Similarity engine for typosquatting verdicts
            normalizer: Domain normalizer (a fresh one if omitted)
            suspicious_tlds: Suffixes treated as unsafe (defaults to the
                built-in abuse list)
            logger: Optional audit logger for verdicts
        """
        self._parser = parser
        self._similarity = similarity
        self._ip_classifier = parser.ip_classifier
        self._normalizer = normalizer or DomainNormalizer(ip_classifier=self._ip_classifier)
        source = SUSPICIOUS_TLDS if suspicious_tlds is None else suspicious_tlds
        self._suspicious_tlds = frozenset(tld.lower().strip(".") for tld in source)
        self._logger = logger

    @property
    def suspicious_tlds(self) -> frozenset[str]:
        return self._suspicious_tlds

    def is_safe(self, domain: str, *, protocol_secure: bool = True) -> bool:
        """
        Heuristic safety gate for a domain.

        A domain is unsafe when the caller reports an insecure protocol
        origin, when it is a private, loopback or multicast IP, when it is
        local or unlisted, or when its suffix is in the suspicious set.

        Args:
            domain: Domain or URL to check
            protocol_secure: Caller-supplied signal about the URL's protocol

        Returns:
            True if no unsafe signal fired; False otherwise or on parse failure
        """
        safe, reason = self._safety(domain, protocol_secure)
        if self._logger:
            self._logger.log_verdict(self.COMPONENT, "is_safe", domain, safe, reason=reason)
        return safe

    def _safety(self, domain: str, protocol_secure: bool) -> tuple[bool, Optional[str]]:
        if not protocol_secure:
            return False, "insecure_protocol"

        normalized = self._normalizer.normalize(domain)

        ip_info = self._ip_classifier.classify(normalized)
        if ip_info is not None:
            if ip_info.is_unsafe:
                return False, "unsafe_ip"
            return True, None

        try:
            info = self._parser.parse(normalized)
        except DomainIntelError as e:
            if self._logger:
                self._logger.log_degraded(self.COMPONENT, "is_safe", domain, e)
            return False, "unparseable"

        if info.is_local:
            return False, "local"

        if info.tld and info.tld.lower() in self._suspicious_tlds:
            return False, "suspicious_tld"

        return True, None

    def assess_phishing(self, domain: str, target: str) -> PhishingAssessment:
        """
        Measure a domain against the target it might impersonate.

        Args:
            domain: Domain under suspicion, e.g. 'paypal-secure.com'
            target: Legitimate domain, e.g. 'paypal.com'

        Returns:
            PhishingAssessment with the containment signal and similarity verdict
        """
        normalized_domain = self._normalizer.normalize(domain)
        normalized_target = self._normalizer.normalize(target)

        if (
            self._ip_classifier.is_ip(normalized_domain)
            or self._ip_classifier.is_ip(normalized_target)
        ):
            return PhishingAssessment(
                domain=normalized_domain,
                target=normalized_target,
                contains_target=False,
                verdict=SimilarityVerdict(score=0.0),
            )

        contains_target = (
            bool(normalized_target)
            and normalized_target in normalized_domain
            and normalized_domain != normalized_target
        )

        return PhishingAssessment(
            domain=normalized_domain,
            target=normalized_target,
            contains_target=contains_target,
            verdict=self._similarity.analyze(normalized_domain, normalized_target),
        )

    def is_potential_phishing(self, domain: str, target: str) -> bool:
        """
        Check whether a domain may be impersonating a target.

        Args:
            domain: Domain under suspicion
            target: Legitimate domain

        Returns:
            True if the domain contains the target or is a typosquat of it
        """
        assessment = self.assess_phishing(domain, target)
        if self._logger:
            self._logger.log_verdict(
                self.COMPONENT,
                "is_potential_phishing",
                domain,
                assessment.is_potential_phishing,
                target=target,
                contains_target=assessment.contains_target,
                reason=assessment.verdict.reason.value if assessment.verdict.reason else None,
                score=assessment.verdict.score,
            )
        return assessment.is_potential_phishing
