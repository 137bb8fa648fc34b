"""Command line entry point.

Usage:
    goto-critic tree.yaml
    goto-critic --profile critic.yaml --verbose 5 lib/*.json
    goto-critic --severity stern --theme bugs --theme trw --statistics dumps/*.yaml
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import ConfigError, Profile, build_policies, load_profile
from .critic import Critic
from .loader import TreeError, load_document
from .policy import parse_severity
from .report import Statistics, format_violations, resolve_format


def _severity_arg(value: str):
    try:
        return parse_severity(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goto-critic",
        description="Report Perl goto statements that jump into a block",
    )
    parser.add_argument("trees", nargs="+", type=Path, help="JSON or YAML tree dumps")
    parser.add_argument("--profile", type=Path, default=None, help="YAML profile")
    parser.add_argument(
        "--severity",
        type=_severity_arg,
        default=None,
        help="Minimum severity to report, 1-5 or gentle|stern|harsh|cruel|brutal",
    )
    parser.add_argument(
        "--theme",
        action="append",
        default=None,
        help="Only run policies carrying this theme (repeatable)",
    )
    parser.add_argument(
        "--verbose",
        default=None,
        help="Verbosity level (1-5, 8) or a custom format such as '%%f:%%l:%%m\\n'",
    )
    parser.add_argument("--statistics", action="store_true", help="Print a summary")
    parser.add_argument("--debug", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        fmt = resolve_format(args.verbose)
        profile = load_profile(args.profile) if args.profile else Profile()
        if args.severity is not None:
            profile.severity = args.severity
        if args.theme is not None:
            profile.theme = args.theme
        critic = Critic(profile, build_policies(profile))
    except (ConfigError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    stats = Statistics()
    failed = False
    found = False

    for path in args.trees:
        try:
            document = load_document(path)
        except TreeError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            failed = True
            continue

        violations = critic.critique(document)
        stats.add(violations)
        if violations:
            found = True
            sys.stdout.write(format_violations(violations, fmt))
        else:
            print(f"{path} source OK")

    if args.statistics:
        sys.stdout.write("\n" + stats.summary())

    if failed:
        sys.exit(2)
    sys.exit(1 if found else 0)


if __name__ == "__main__":
    main()
