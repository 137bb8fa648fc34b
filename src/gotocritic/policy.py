"""Policy base class, severities and violations."""

from enum import IntEnum
from typing import ClassVar

from pydantic import BaseModel

from .tree import Document, Element


class Severity(IntEnum):
    LOWEST = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4
    HIGHEST = 5


# Perl::Critic names for minimum-severity settings
SEVERITY_NAMES = {
    "brutal": Severity.LOWEST,
    "cruel": Severity.LOW,
    "harsh": Severity.MEDIUM,
    "stern": Severity.HIGH,
    "gentle": Severity.HIGHEST,
}


def parse_severity(value: int | str) -> Severity:
    """Accept 1-5, "3", or a name such as "harsh"."""
    if isinstance(value, str):
        name = value.strip().lower()
        if name in SEVERITY_NAMES:
            return SEVERITY_NAMES[name]
        if not name.isdigit():
            raise ValueError(f"invalid severity: {value!r}")
        value = int(name)
    try:
        return Severity(value)
    except ValueError:
        raise ValueError(f"severity must be between 1 and 5, got {value}") from None


class Violation(BaseModel):
    """A single finding, anchored at a source element."""

    policy: str
    description: str
    explanation: str
    severity: Severity
    filename: str | None = None
    line: int | None = None
    column: int | None = None
    source: str = ""  # text of the anchor element

    @property
    def sort_key(self) -> tuple[str, int, int, str]:
        return (self.filename or "", self.line or 0, self.column or 0, self.policy)


class Policy:
    """Base class for policies.

    Subclasses set `name` and override the hooks below; violates() builds
    its findings with violation(), passing the description and explanation.
    The driver calls prepare_to_scan_document() once per document; when it
    returns False the document is skipped. Otherwise violates() is called
    for every element of the applies_to() class.
    """

    name: ClassVar[str] = ""

    def __init__(self) -> None:
        self._severity: Severity | None = None
        self._themes: set[str] | None = None
        self.maximum_violations_per_document: int | None = None

    def supported_parameters(self) -> tuple[str, ...]:
        return ()

    def default_severity(self) -> Severity:
        return Severity.LOWEST

    def default_themes(self) -> tuple[str, ...]:
        return ()

    def applies_to(self) -> type[Element]:
        return Element

    def prepare_to_scan_document(self, document: Document) -> bool:
        return True

    def violates(self, element: Element, document: Document) -> list[Violation]:
        raise NotImplementedError

    # Standard options, set from the profile

    @property
    def severity(self) -> Severity:
        if self._severity is not None:
            return self._severity
        return self.default_severity()

    @severity.setter
    def severity(self, value: Severity) -> None:
        self._severity = value

    @property
    def themes(self) -> set[str]:
        if self._themes is not None:
            return set(self._themes)
        return set(self.default_themes())

    def set_themes(self, themes: list[str]) -> None:
        self._themes = set(themes)

    def add_themes(self, themes: list[str]) -> None:
        self._themes = self.themes | set(themes)

    def violation(self, description: str, explanation: str, element: Element) -> Violation:
        line, column = element.location
        top = element.top()
        filename = top.filename if isinstance(top, Document) else None
        return Violation(
            policy=self.name,
            description=description,
            explanation=explanation,
            severity=self.severity,
            filename=filename,
            line=line,
            column=column,
            source=element.content(),
        )
