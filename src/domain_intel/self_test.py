"""
Self-Test module for the domain intelligence library.

Validates the configuration and runs a handful of known-answer probes
against the configured public suffix classifier, so a broken or empty
suffix table is caught before any verdict is trusted.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .config import IntelConfig, validate_config
from .exceptions import DomainIntelError
from .i18n import get_message
from .intel import DomainIntel
from .suffix import PublicSuffixClassifier


@dataclass
class ProbeResult:
    """Result of a single known-answer probe."""

    name: str
    expected: object
    actual: object
    success: bool
    error: Optional[str] = None


@dataclass
class ConfigValidationResult:
    """Result of configuration validation."""

    valid: bool
    errors: list[str] = field(default_factory=list)


@dataclass
class SelfTestResult:
    """Complete self-test result."""

    success: bool
    config_validation: ConfigValidationResult
    probe_results: list[ProbeResult] = field(default_factory=list)
    total_duration_ms: float = 0.0

    @property
    def failed_probes(self) -> list[ProbeResult]:
        """Return list of failed probes."""
        return [r for r in self.probe_results if not r.success]


class SelfTest:
    """
    Self-test for the domain intelligence library.

    Performs:
    1. Configuration validation
    2. Known-answer probes for root extraction, locality, IP
       classification and similarity
    """

    def __init__(
        self,
        config: IntelConfig,
        classifier: Optional[PublicSuffixClassifier] = None,
    ) -> None:
        """
        Initialize the self-test.

        Args:
            config: Configuration to validate
            classifier: Classifier to probe (built from config if omitted)
        """
        self._config = config
        self._classifier = classifier

    def run(self) -> SelfTestResult:
        """
        Run the complete self-test.

        Returns:
            SelfTestResult with validation and probe results
        """
        start_time = time.perf_counter()

        errors = validate_config(self._config)
        config_result = ConfigValidationResult(valid=not errors, errors=errors)

        # Probes need a working facade, which an invalid config cannot build
        if not config_result.valid:
            return SelfTestResult(
                success=False,
                config_validation=config_result,
                total_duration_ms=self._elapsed_ms(start_time),
            )

        intel = DomainIntel(classifier=self._classifier, config=self._config, logger=None)
        probe_results = [
            self._probe(name, expected, check, intel)
            for name, expected, check in self._probes()
        ]

        return SelfTestResult(
            success=all(r.success for r in probe_results),
            config_validation=config_result,
            probe_results=probe_results,
            total_duration_ms=self._elapsed_ms(start_time),
        )

    @staticmethod
    def _probes() -> list[tuple[str, object, Callable[[DomainIntel], object]]]:
        return [
            ("root_domain(www.example.com)", "example.com",
             lambda intel: intel.root_domain("www.example.com")),
            ("subdomains(a.b.example.com)", ["a", "b"],
             lambda intel: intel.subdomains("a.b.example.com")),
            ("parse(localhost).is_local", True,
             lambda intel: intel.parse("localhost").is_local),
            ("classify_ip(192.168.1.1).is_private", True,
             lambda intel: intel.classify_ip("192.168.1.1").is_private),
            ("analyze_similarity(paypal.com, paypa1.com).reason", "one-edit",
             lambda intel: intel.analyze_similarity("paypal.com", "paypa1.com").reason.value),
        ]

    @staticmethod
    def _probe(
        name: str,
        expected: object,
        check: Callable[[DomainIntel], object],
        intel: DomainIntel,
    ) -> ProbeResult:
        try:
            actual = check(intel)
        except (DomainIntelError, AttributeError) as e:
            return ProbeResult(
                name=name,
                expected=expected,
                actual=None,
                success=False,
                error=str(e),
            )
        return ProbeResult(
            name=name,
            expected=expected,
            actual=actual,
            success=actual == expected,
        )

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return (time.perf_counter() - start_time) * 1000


def format_self_test_result(result: SelfTestResult, language: str = "de") -> list[str]:
    """
    Render a self-test result as output lines.

    Args:
        result: Self-test result
        language: Output language

    Returns:
        Lines ready for printing
    """
    lines = [get_message("selftest.starting", language)]

    for error in result.config_validation.errors:
        lines.append(get_message("error.config_invalid", language, error=error))

    for probe in result.probe_results:
        if probe.success:
            lines.append(get_message("selftest.probe_ok", language, probe=probe.name))
        else:
            lines.append(get_message(
                "selftest.probe_failed",
                language,
                probe=probe.name,
                expected=probe.expected,
                actual=probe.error or probe.actual,
            ))

    key = "selftest.passed" if result.success else "selftest.failed"
    lines.append(get_message(key, language))
    return lines


def run_self_test(
    config: IntelConfig,
    classifier: Optional[PublicSuffixClassifier] = None,
    print_output: bool = True,
    language: Optional[str] = None,
) -> SelfTestResult:
    """
    Run the self-test and optionally print the results.

    Args:
        config: Configuration to validate and probe
        classifier: Classifier to probe (built from config if omitted)
        print_output: Whether to print results to stdout
        language: Output language (defaults to config.language)

    Returns:
        SelfTestResult
    """
    result = SelfTest(config, classifier).run()

    if print_output:
        for line in format_self_test_result(result, language or config.language):
            print(line)

    return result
