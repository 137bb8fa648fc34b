"""ControlStructures::ProhibitGotoIntoBlock - do not enter a block via a goto.

Entering a block via ``goto`` is deprecated as of Perl v5.37.10 and becomes
fatal in v5.44: any initialization the block does is skipped.

Note that ``perldoc -f goto`` allows jumping into the *first* operand of a
binary operator, as in ``do { FOO: 1 } + 2``. This policy does not model
operator positions and flags such code anyway. The same goes for a jump from
one branch of an if/elsif chain into a label in another branch.
"""

import logging

from ..policy import Policy, Severity, Violation
from ..tree import Block, BreakStatement, Document, Element, Label, Node, Word

logger = logging.getLogger(__name__)

DESCRIPTION = "Do not enter a block via a goto"
EXPLANATION = (
    "Entering a block via a goto is unsupported, "
    "and will become a fatal error in Perl v5.44."
)

GOTO = "goto"
COLON = ":"

LabelTable = dict[str, list[Element]]


def containing_block(element: Element) -> Element:
    """The innermost block around *element*, or the tree root."""
    for node in element.ancestors():
        if isinstance(node, Block):
            return node
    return element.top()


def containing_blocks(element: Element) -> list[Element]:
    """Every block around *element*, innermost first, then the tree root."""
    blocks: list[Element] = [node for node in element.ancestors() if isinstance(node, Block)]
    blocks.append(element.top())
    return blocks


def index_labels(document: Node) -> LabelTable | None:
    """Map each label (with its colon) to the blocks it is defined in.

    Returns None when the document has no labels at all.
    """
    table: LabelTable = {}
    for label in document.find(Label):
        table.setdefault(label.content(), []).append(containing_block(label))
    return table or None


def goto_target(statement: Element) -> str | None:
    """The label key a ``goto LABEL`` statement jumps to, else None."""
    if not isinstance(statement, Node):
        return None
    schildren = statement.schildren()
    if len(schildren) < 2:
        return None
    keyword, target = schildren[0], schildren[1]
    if not isinstance(keyword, Word) or keyword.content() != GOTO:
        return None
    # goto &sub, goto $x, goto EXPR
    if not isinstance(target, Word):
        return None
    return target.content() + COLON


def enters_block(statement: Element, labels: LabelTable) -> bool:
    """True if *statement* is a goto whose target is in a block it is not in."""
    target = goto_target(statement)
    if target is None or target not in labels:
        return False

    scopes = containing_blocks(statement)
    for label_block in labels[target]:
        if any(scope is label_block for scope in scopes):
            return False
    return True


def find_violations(document: Document) -> list[Element]:
    """Every goto statement in *document* that enters a block."""
    labels = index_labels(document)
    if labels is None:
        return []
    return [stmt for stmt in document.find(BreakStatement) if enters_block(stmt, labels)]


class ProhibitGotoIntoBlock(Policy):
    """Do not enter a block via a goto."""

    name = "ControlStructures::ProhibitGotoIntoBlock"

    def __init__(self) -> None:
        super().__init__()
        self._labels: LabelTable = {}

    def default_severity(self) -> Severity:
        return Severity.HIGH

    def default_themes(self) -> tuple[str, ...]:
        return ("bugs", "trw")

    def applies_to(self) -> type[Element]:
        return BreakStatement

    def prepare_to_scan_document(self, document: Document) -> bool:
        self._labels = index_labels(document) or {}
        logger.debug(
            "%s: %d distinct labels in %s",
            self.name,
            len(self._labels),
            document.filename or "<document>",
        )
        return bool(self._labels)

    def violates(self, element: Element, document: Document) -> list[Violation]:
        if not enters_block(element, self._labels):
            return []
        return [self.violation(DESCRIPTION, EXPLANATION, element)]
