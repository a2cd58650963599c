"""
Tests for the self-test module.

Covers configuration validation, the known-answer probes and the
rendering of results.
"""

from domain_intel.config import IntelConfig, create_default_config
from domain_intel.self_test import (
    ProbeResult,
    SelfTest,
    format_self_test_result,
    run_self_test,
)
from domain_intel.suffix import StaticSuffixClassifier


def static_config(**overrides) -> IntelConfig:
    config = create_default_config(language="en", classifier="static")
    for name, value in overrides.items():
        setattr(config, name, value)
    return config


class TestSelfTestProperty:
    """
    Tests for SelfTest.run().

    **Feature: domain-intel, Property 28: Self-test fails on an invalid configuration or a broken classifier**
    """

    def test_static_classifier_passes(self) -> None:
        result = SelfTest(static_config()).run()

        assert result.success
        assert result.config_validation.valid
        assert result.probe_results
        assert result.failed_probes == []
        assert result.total_duration_ms >= 0

    def test_invalid_config_skips_probes(self) -> None:
        """
        Property 28a: An invalid configuration fails before any probe runs.

        **Feature: domain-intel, Property 28: Self-test fails on an invalid configuration or a broken classifier**
        """
        result = SelfTest(static_config(language="fr")).run()

        assert not result.success
        assert not result.config_validation.valid
        assert result.config_validation.errors
        assert result.probe_results == []

    def test_empty_suffix_table_fails_probes(self) -> None:
        """
        Property 28b: A classifier that knows no suffixes fails the root probe.

        **Feature: domain-intel, Property 28: Self-test fails on an invalid configuration or a broken classifier**
        """
        result = SelfTest(static_config(), classifier=StaticSuffixClassifier([])).run()

        assert not result.success
        failed = {probe.name: probe for probe in result.failed_probes}
        assert failed["root_domain(www.example.com)"].actual == "www.example.com"


class TestSelfTestOutput:
    """Tests for result formatting and printing."""

    def test_format_passed(self) -> None:
        result = SelfTest(static_config()).run()

        lines = format_self_test_result(result, "en")

        assert lines[0] == "Starting self-test..."
        assert lines[-1] == "Self-test passed"
        assert len(lines) == len(result.probe_results) + 2
        assert all(line.startswith("✓") for line in lines[1:-1])

    def test_format_failed_probe_in_german(self) -> None:
        result = SelfTest(static_config(), classifier=StaticSuffixClassifier([])).run()

        lines = format_self_test_result(result, "de")

        assert lines[-1] == "Selbsttest fehlgeschlagen"
        assert any(line.startswith("✗ root_domain") and "erwartet example.com" in line for line in lines)

    def test_format_probe_error(self) -> None:
        result = SelfTest(static_config()).run()
        result.probe_results.append(ProbeResult(
            name="broken", expected=True, actual=None, success=False, error="boom",
        ))
        result.success = False

        lines = format_self_test_result(result, "en")

        assert "✗ broken: expected True, got boom" in lines

    def test_run_self_test_prints(self, capsys) -> None:
        result = run_self_test(static_config(), print_output=True)

        out = capsys.readouterr().out
        assert result.success
        assert "Self-test passed" in out

    def test_run_self_test_quiet(self, capsys) -> None:
        run_self_test(static_config(), print_output=False)

        assert capsys.readouterr().out == ""

    def test_language_override(self, capsys) -> None:
        run_self_test(static_config(), print_output=True, language="de")

        assert "Selbsttest erfolgreich" in capsys.readouterr().out


def test_default_config_is_valid_for_self_test() -> None:
    result = SelfTest(IntelConfig(classifier="static")).run()
    assert result.success
