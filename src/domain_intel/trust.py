"""
Allow-list and block-list membership.

A domain matches a list entry when, after normalizing both sides, it is
equal to the entry, ends with '.' + entry, or shares the entry's root
domain. IP literals only ever match by exact string equality.
"""

from typing import Iterable, Optional

from .audit_logger import AuditLogger
from .exceptions import DomainIntelError
from .ip_classifier import IpClassifier
from .normalizer import DomainNormalizer
from .subdomain_ops import SubdomainOperations


class TrustEvaluator:
    """Decides allow-list and block-list membership by domain equivalence."""

    COMPONENT = "trust_evaluator"

    def __init__(
        self,
        subdomain_ops: SubdomainOperations,
        normalizer: Optional[DomainNormalizer] = None,
        logger: Optional[AuditLogger] = None,
    ) -> None:
        """
        Initialize evaluator.

        Args:
            subdomain_ops: Subdomain operations used for root-domain folding
            normalizer: Domain normalizer (a fresh one if omitted)
            logger: Optional audit logger for verdicts
        """
        self._subdomain_ops = subdomain_ops
        self._ip_classifier: IpClassifier = subdomain_ops.parser.ip_classifier
        self._normalizer = normalizer or DomainNormalizer(ip_classifier=self._ip_classifier)
        self._logger = logger

    def is_trusted(self, domain: str, allow_list: Iterable[str]) -> bool:
        """
        Check whether a domain belongs to an allow-list.

        Args:
            domain: Domain or URL to check
            allow_list: Trusted domains, e.g. ['example.com']

        Returns:
            True on match; False otherwise, including when nothing parses
        """
        return self._check("is_trusted", domain, allow_list)

    def is_blacklisted(self, domain: str, block_list: Iterable[str]) -> bool:
        """
        Check whether a domain belongs to a block-list.

        Args:
            domain: Domain or URL to check
            block_list: Blocked domains, e.g. ['blocked.com']

        Returns:
            True on match; False otherwise, including when nothing parses
        """
        return self._check("is_blacklisted", domain, block_list)

    def find_match(self, domain: str, entries: Iterable[str]) -> Optional[str]:
        """
        Find the first list entry the domain matches.

        Args:
            domain: Domain or URL to check
            entries: Allow-list or block-list entries

        Returns:
            The matching entry as given, or None
        """
        candidate = self._normalizer.normalize(domain)
        if not candidate:
            return None

        if self._ip_classifier.is_ip(candidate):
            for entry in entries:
                if self._normalizer.normalize(entry) == candidate:
                    return entry
            return None

        candidate_root = self._root_or_none(candidate)

        for entry in entries:
            normalized_entry = self._normalizer.normalize(entry)
            if not normalized_entry:
                continue
            if candidate == normalized_entry:
                return entry
            if candidate.endswith(f".{normalized_entry}"):
                return entry
            if candidate_root is None or self._ip_classifier.is_ip(normalized_entry):
                continue
            if candidate_root == self._root_or_none(normalized_entry):
                return entry

        return None

    def _check(self, check: str, domain: str, entries: Iterable[str]) -> bool:
        entries = list(entries)
        match = self.find_match(domain, entries)
        if self._logger:
            self._logger.log_verdict(
                self.COMPONENT,
                check,
                domain,
                match is not None,
                matched_entry=match,
            )
        return match is not None

    def _root_or_none(self, domain: str) -> Optional[str]:
        try:
            return self._subdomain_ops.root_domain(domain)
        except DomainIntelError as e:
            if self._logger:
                self._logger.log_degraded(self.COMPONENT, "root_domain", domain, e)
            return None
