"""Tests for violation formatting."""

import pytest

from gotocritic.policy import Severity, Violation
from gotocritic.report import (
    VERBOSITY,
    Statistics,
    format_violation,
    format_violations,
    resolve_format,
)


@pytest.fixture
def violation():
    return Violation(
        policy="ControlStructures::ProhibitGotoIntoBlock",
        description="Do not enter a block via a goto",
        explanation="Entering a block via a goto is unsupported",
        severity=Severity.HIGH,
        filename="lib/Foo.pm",
        line=12,
        column=5,
        source="goto FOO;",
    )


class TestFormat:
    def test_default_verbosity(self, violation):
        assert format_violations([violation]) == (
            "Do not enter a block via a goto at line 12, column 5.  "
            "Entering a block via a goto is unsupported.  (Severity: 4)\n"
        )

    def test_levels(self, violation):
        assert format_violation(violation, VERBOSITY[1]) == "lib/Foo.pm:12:5:Do not enter a block via a goto\n"
        assert format_violation(violation, VERBOSITY[3]) == "Do not enter a block via a goto at lib/Foo.pm line 12\n"
        assert format_violation(violation, VERBOSITY[8]).startswith("[ControlStructures::ProhibitGotoIntoBlock] ")

    def test_custom_format(self, violation):
        fmt = resolve_format(r"%l|%r|100%%|%z\n")
        assert format_violation(violation, fmt) == "12|goto FOO;|100%|%z\n"

    def test_missing_location(self, violation):
        bare = violation.model_copy(update={"filename": None, "line": None, "column": None})
        assert format_violation(bare, VERBOSITY[1]) == ":::Do not enter a block via a goto\n"

    def test_level_from_string(self):
        assert resolve_format("5") == VERBOSITY[5]
        assert resolve_format(None) == VERBOSITY[4]

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            resolve_format(7)


class TestStatistics:
    def test_summary(self, violation):
        stats = Statistics()
        stats.add([violation, violation.model_copy(update={"severity": Severity.HIGHEST})])
        stats.add([])
        assert stats.files == 2
        assert stats.violations == 2
        summary = stats.summary()
        assert summary.startswith("2 files.\n2 violations.\n")
        assert "1 severity 5" in summary
        assert "2 ControlStructures::ProhibitGotoIntoBlock" in summary
