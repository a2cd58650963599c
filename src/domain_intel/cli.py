"""
Command-line interface for the domain intelligence library.

This module provides the main CLI entry point with commands for:
- parse: Decompose a domain into its label hierarchy
- normalize: Print the canonical form of a domain
- punycode: Convert a domain to or from Punycode
- similarity: Compare two domains for typosquatting
- check: Evaluate a domain against allow/block lists and safety heuristics
- phishing: Check whether a domain may impersonate a target
- self-test: Run known-answer probes against the configured classifier
- config: Configuration management
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .config import (
    IntelConfig,
    create_default_config,
    load_config_from_env,
    load_config_from_file,
    save_config_to_file,
    validate_config,
)
from .exceptions import DomainIntelError
from .i18n import get_message
from .intel import DomainIntel
from .self_test import run_self_test


DEFAULT_CONFIG_PATH = Path.home() / ".domain_intel" / "config.json"


def _load_config(args: argparse.Namespace) -> Optional[IntelConfig]:
    if getattr(args, "config", None):
        config = load_config_from_file(Path(args.config))
        if config is None:
            print(
                get_message("error.config_load", args.language, path=args.config),
                file=sys.stderr,
            )
            return None
        return config
    return load_config_from_env()


def _build_intel(args: argparse.Namespace) -> Optional[DomainIntel]:
    config = _load_config(args)
    if config is None:
        return None
    if args.language:
        config.language = args.language
    try:
        return DomainIntel(config=config)
    except DomainIntelError as e:
        print(get_message("error.config_invalid", args.language, error=e.message), file=sys.stderr)
        return None


def _language(args: argparse.Namespace, intel: DomainIntel) -> str:
    return args.language or intel.config.language


def _emit_json(payload: dict) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _reason_text(reason, language: str) -> str:
    key = f"reason.{reason.value}" if reason else "reason.none"
    return get_message(key, language)


def cmd_parse(args: argparse.Namespace) -> int:
    """Handle the 'parse' command."""
    intel = _build_intel(args)
    if intel is None:
        return 1
    lang = _language(args, intel)

    try:
        parsed = intel.parse(args.domain)
    except DomainIntelError as e:
        if args.json:
            _emit_json(e.to_dict())
        else:
            print(get_message("error.invalid_hostname", lang, error=e.message), file=sys.stderr)
        return 1

    ip_info = intel.classify_ip(parsed.full_domain) if parsed.is_ip else None
    root = intel.root_domain(parsed.full_domain)
    subs = intel.subdomains(parsed.full_domain)

    if args.json:
        _emit_json({
            "domain": parsed.full_domain,
            "root_domain": root,
            "subdomains": subs,
            "tld": parsed.tld,
            "sld": parsed.sld,
            "is_ip": parsed.is_ip,
            "is_local": parsed.is_local,
            "labels": [
                {
                    "text": label.text,
                    "level": label.level,
                    "is_public_suffix": label.is_public_suffix,
                    "is_registrable": label.is_registrable,
                }
                for label in parsed.labels
            ],
            "ip": {
                "version": ip_info.version.value,
                "is_private": ip_info.is_private,
                "is_loopback": ip_info.is_loopback,
                "is_multicast": ip_info.is_multicast,
            } if ip_info else None,
        })
        return 0

    print(parsed.full_domain)
    if ip_info:
        print(f"  {get_message('parse.ip', lang, version=ip_info.version.value)}")
        return 0
    print(f"  {get_message('parse.root_domain', lang)}: {root}")
    print(f"  {get_message('parse.suffix', lang)}: {parsed.tld or '-'}")
    print(f"  {get_message('parse.subdomains', lang)}: {', '.join(subs) or '-'}")
    if parsed.is_local:
        print(f"  {get_message('parse.local', lang)}")
    return 0


def cmd_normalize(args: argparse.Namespace) -> int:
    """Handle the 'normalize' command."""
    intel = _build_intel(args)
    if intel is None:
        return 1
    print(intel.normalize(args.domain))
    return 0


def cmd_punycode(args: argparse.Namespace) -> int:
    """Handle the 'punycode' command."""
    intel = _build_intel(args)
    if intel is None:
        return 1

    try:
        if args.direction == "encode":
            print(intel.to_punycode(args.domain))
        else:
            print(intel.from_punycode(args.domain))
    except DomainIntelError as e:
        print(e.message, file=sys.stderr)
        return 1
    return 0


def cmd_similarity(args: argparse.Namespace) -> int:
    """Handle the 'similarity' command."""
    intel = _build_intel(args)
    if intel is None:
        return 1
    lang = _language(args, intel)

    verdict = intel.analyze_similarity(args.domain_a, args.domain_b)

    if args.json:
        _emit_json(verdict.to_dict())
    else:
        key = "verdict.typosquatting" if verdict.is_typosquatting else "verdict.not_typosquatting"
        print(get_message(key, lang))
        print(f"  {get_message('parse.score', lang, score=verdict.score)}")
        print(f"  {_reason_text(verdict.reason, lang)}")

    return 1 if verdict.is_typosquatting else 0


def cmd_check(args: argparse.Namespace) -> int:
    """Handle the 'check' command."""
    intel = _build_intel(args)
    if intel is None:
        return 1
    lang = _language(args, intel)

    trusted = intel.is_trusted(args.domain, args.trusted or None)
    blacklisted = intel.is_blacklisted(args.domain, args.blocked or None)
    safe = intel.is_safe(args.domain, protocol_secure=not args.insecure)

    if args.json:
        _emit_json({
            "domain": intel.normalize(args.domain),
            "is_trusted": trusted,
            "is_blacklisted": blacklisted,
            "is_safe": safe,
        })
    else:
        if blacklisted:
            print(get_message("verdict.blacklisted", lang))
        elif trusted:
            print(get_message("verdict.trusted", lang))
        else:
            print(get_message("verdict.unlisted", lang))
        print(get_message("verdict.safe" if safe else "verdict.unsafe", lang))

    return 1 if blacklisted or not safe else 0


def cmd_phishing(args: argparse.Namespace) -> int:
    """Handle the 'phishing' command."""
    intel = _build_intel(args)
    if intel is None:
        return 1
    lang = _language(args, intel)

    assessment = intel.assess_phishing(args.domain, args.target)

    if args.json:
        _emit_json(assessment.to_dict())
    else:
        key = "verdict.phishing" if assessment.is_potential_phishing else "verdict.not_phishing"
        print(get_message(key, lang, target=assessment.target))
        if assessment.contains_target:
            print(f"  {get_message('verdict.contains_target', lang, target=assessment.target)}")
        print(f"  {get_message('parse.score', lang, score=assessment.verdict.score)}")
        print(f"  {_reason_text(assessment.verdict.reason, lang)}")

    return 1 if assessment.is_potential_phishing else 0


def cmd_self_test(args: argparse.Namespace) -> int:
    """Handle the 'self-test' command."""
    config = _load_config(args)
    if config is None:
        return 1

    result = run_self_test(
        config=config,
        print_output=True,
        language=args.language or config.language,
    )
    return 0 if result.success else 1


def cmd_config(args: argparse.Namespace) -> int:
    """Handle the 'config' command."""
    config_path = Path(args.path) if args.path else DEFAULT_CONFIG_PATH

    if args.action == "show":
        config = load_config_from_file(config_path)
        if config is None:
            print(f"No configuration found at: {config_path}")
            print("Use 'config init' to create a default configuration.")
            return 1

        print(f"Configuration from: {config_path}")
        print(f"  Language: {config.language}")
        print(f"  Classifier: {config.classifier}")
        print(f"  Similarity threshold: {config.similarity.threshold}")
        print(f"  Suspicious TLDs: {', '.join(config.suspicious_tlds)}")
        print(f"  Trusted domains: {len(config.trusted_domains)}")
        print(f"  Blocked domains: {len(config.blocked_domains)}")
        print(f"  Logging: {config.logging.enabled} ({config.logging.level})")
        print(f"  Audit mode: {config.logging.audit_mode}")
        return 0

    elif args.action == "init":
        if config_path.exists() and not args.force:
            print(f"Configuration already exists at: {config_path}")
            print("Use --force to overwrite.")
            return 1

        config = create_default_config(language=args.language or "de")
        if save_config_to_file(config, config_path):
            print(f"Configuration created at: {config_path}")
            return 0
        return 1

    elif args.action == "validate":
        config = load_config_from_file(config_path)
        if config is None:
            print(f"Error: Could not load config from {config_path}", file=sys.stderr)
            return 1

        errors = validate_config(config)
        if errors:
            for error in errors:
                print(f"Error: {error}", file=sys.stderr)
            return 1

        print(f"Configuration at {config_path} is valid.")
        return 0

    return 1


def _add_common_arguments(parser: argparse.ArgumentParser, json_output: bool = True) -> None:
    parser.add_argument(
        "--config", "-c",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--language", "-l",
        choices=["de", "en"],
        default=None,
        help="Output language (default: from configuration)",
    )
    if json_output:
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print machine-readable JSON",
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="domain-intel",
        description="Offline domain parsing, typosquatting and trust evaluation",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'parse' command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Decompose a domain into subdomains, registrable label and suffix",
    )
    parse_parser.add_argument("domain", help="Domain or URL (e.g., https://a.example.co.uk)")
    _add_common_arguments(parse_parser)
    parse_parser.set_defaults(func=cmd_parse)

    # 'normalize' command
    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Print the canonical comparable form of a domain",
    )
    normalize_parser.add_argument("domain", help="Domain or URL")
    _add_common_arguments(normalize_parser, json_output=False)
    normalize_parser.set_defaults(func=cmd_normalize)

    # 'punycode' command
    punycode_parser = subparsers.add_parser(
        "punycode",
        help="Convert a domain to or from Punycode",
    )
    punycode_parser.add_argument(
        "direction",
        choices=["encode", "decode"],
        help="'encode' to xn-- form, 'decode' to Unicode",
    )
    punycode_parser.add_argument("domain", help="Domain to convert")
    _add_common_arguments(punycode_parser, json_output=False)
    punycode_parser.set_defaults(func=cmd_punycode)

    # 'similarity' command
    similarity_parser = subparsers.add_parser(
        "similarity",
        help="Compare two domains for typosquatting",
    )
    similarity_parser.add_argument("domain_a", help="First domain")
    similarity_parser.add_argument("domain_b", help="Second domain")
    _add_common_arguments(similarity_parser)
    similarity_parser.set_defaults(func=cmd_similarity)

    # 'check' command
    check_parser = subparsers.add_parser(
        "check",
        help="Evaluate a domain against allow/block lists and safety heuristics",
    )
    check_parser.add_argument("domain", help="Domain or URL to check")
    check_parser.add_argument(
        "--trusted", "-t",
        nargs="*",
        default=None,
        help="Trusted domains (default: from configuration)",
    )
    check_parser.add_argument(
        "--blocked", "-b",
        nargs="*",
        default=None,
        help="Blocked domains (default: from configuration)",
    )
    check_parser.add_argument(
        "--insecure",
        action="store_true",
        help="The link was reached over an insecure protocol",
    )
    _add_common_arguments(check_parser)
    check_parser.set_defaults(func=cmd_check)

    # 'phishing' command
    phishing_parser = subparsers.add_parser(
        "phishing",
        help="Check whether a domain may impersonate a target domain",
    )
    phishing_parser.add_argument("domain", help="Suspicious domain")
    phishing_parser.add_argument("target", help="Legitimate domain")
    _add_common_arguments(phishing_parser)
    phishing_parser.set_defaults(func=cmd_phishing)

    # 'self-test' command
    self_test_parser = subparsers.add_parser(
        "self-test",
        help="Run known-answer probes against the configured classifier",
    )
    _add_common_arguments(self_test_parser, json_output=False)
    self_test_parser.set_defaults(func=cmd_self_test)

    # 'config' command
    config_parser = subparsers.add_parser(
        "config",
        help="Configuration management",
    )
    config_parser.add_argument(
        "action",
        choices=["show", "init", "validate"],
        help="Configuration action",
    )
    config_parser.add_argument(
        "--path", "-p",
        help="Path to configuration file",
    )
    config_parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Force overwrite existing configuration",
    )
    config_parser.add_argument(
        "--language", "-l",
        choices=["de", "en"],
        default=None,
        help="Default language for new configuration",
    )
    config_parser.set_defaults(func=cmd_config)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
