"""Formatting violations for humans.

Formats use Perl::Critic's escapes:

    %f  file name          %m  description
    %l  line               %e  explanation
    %c  column             %s  severity
    %p  policy name        %r  source of the offending statement
    %%  a literal percent sign
"""

import re
from collections import Counter
from dataclasses import dataclass, field

from .policy import Violation

VERBOSITY = {
    1: "%f:%l:%c:%m\n",
    2: "%f: (%l:%c) %m\n",
    3: "%m at %f line %l\n",
    4: "%m at line %l, column %c.  %e.  (Severity: %s)\n",
    5: "%f: %m at line %l, column %c.  %e.  (Severity: %s)\n",
    8: "[%p] %m at line %l, column %c.  (Severity: %s)\n",
}
DEFAULT_VERBOSITY = 4

ESCAPE = re.compile(r"%(.)")


def resolve_format(verbosity: int | str | None) -> str:
    """A verbosity level or a custom format string -> format string."""
    if verbosity is None:
        return VERBOSITY[DEFAULT_VERBOSITY]
    if isinstance(verbosity, int) or verbosity.isdigit():
        level = int(verbosity)
        if level not in VERBOSITY:
            raise ValueError(f"unknown verbosity level: {level}")
        return VERBOSITY[level]
    # Custom formats come from the command line with escaped newlines.
    return verbosity.replace("\\n", "\n").replace("\\t", "\t")


def format_violation(violation: Violation, fmt: str) -> str:
    values = {
        "f": violation.filename or "",
        "l": "" if violation.line is None else str(violation.line),
        "c": "" if violation.column is None else str(violation.column),
        "m": violation.description,
        "e": violation.explanation,
        "s": str(int(violation.severity)),
        "p": violation.policy,
        "r": violation.source,
        "%": "%",
    }

    def substitute(match: re.Match) -> str:
        return values.get(match.group(1), match.group(0))

    return ESCAPE.sub(substitute, fmt)


def format_violations(violations: list[Violation], verbosity: int | str | None = None) -> str:
    fmt = resolve_format(verbosity)
    return "".join(format_violation(v, fmt) for v in violations)


@dataclass
class Statistics:
    """Counts accumulated over a run."""

    files: int = 0
    by_severity: Counter = field(default_factory=Counter)
    by_policy: Counter = field(default_factory=Counter)

    @property
    def violations(self) -> int:
        return sum(self.by_severity.values())

    def add(self, violations: list[Violation]) -> None:
        self.files += 1
        for v in violations:
            self.by_severity[int(v.severity)] += 1
            self.by_policy[v.policy] += 1

    def summary(self) -> str:
        lines = [f"{self.files} files.", f"{self.violations} violations."]
        for severity in sorted(self.by_severity, reverse=True):
            lines.append(f"  {self.by_severity[severity]:>5} severity {severity}")
        for policy, count in sorted(self.by_policy.items()):
            lines.append(f"  {count:>5} {policy}")
        return "\n".join(lines) + "\n"
