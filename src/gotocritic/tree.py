"""Document model for parsed Perl source.

The shape follows PPI: a Document holds Statements, Statements hold Tokens
and Structures, Structures (blocks, lists, constructors) hold Statements.
Whitespace, comments and POD are kept so that content() reproduces the
source, but they are not "significant" and schildren() skips them.

Children are owned by their parent; `parent` is a plain back reference used
only for walking upward. Nodes compare by identity: two blocks with the same
text at different positions are different scopes.

Example:
    doc = Document(
        CompoundStatement(Label("FOO:"), Whitespace(" "), Block()),
        Whitespace(" "),
        BreakStatement(Word("goto"), Whitespace(" "), Word("FOO"), Punctuation(";")),
    )
    doc.find(Label)  # [<Label 'FOO:'>]
"""

from collections.abc import Iterator


class Element:
    """Base class for everything that can appear in a document."""

    significant = True

    def __init__(self) -> None:
        self.parent: "Node | None" = None

    @property
    def kind(self) -> str:
        return type(self).__name__

    def content(self) -> str:
        raise NotImplementedError

    def ancestors(self) -> Iterator["Node"]:
        """Yield each enclosing node, innermost first."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def top(self) -> "Element":
        """The root of the tree this element belongs to."""
        node: Element = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def location(self) -> tuple[int | None, int | None]:
        return None, None

    @property
    def line(self) -> int | None:
        return self.location[0]

    @property
    def column(self) -> int | None:
        return self.location[1]

    def __repr__(self) -> str:
        text = self.content()
        if len(text) > 40:
            text = text[:37] + "..."
        return f"<{self.kind} {text!r}>"


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


class Token(Element):
    """A leaf carrying literal source text."""

    def __init__(self, content: str, line: int | None = None, column: int | None = None):
        super().__init__()
        self._content = content
        self._line = line
        self._column = column

    def content(self) -> str:
        return self._content

    @property
    def location(self) -> tuple[int | None, int | None]:
        return self._line, self._column


class Whitespace(Token):
    significant = False


class Comment(Token):
    significant = False


class Pod(Token):
    significant = False


class Word(Token):
    """Bareword: keywords, sub names, package names, label targets."""


class Label(Token):
    """Label definition, including its trailing colon (``FOO:``)."""


class Symbol(Token):
    """Variable such as ``$x``, ``@list`` or ``%hash``."""


class Cast(Token):
    """Sigil used as a cast, e.g. the ``&`` in ``goto &sub``."""


class Operator(Token):
    pass


class Number(Token):
    pass


class Quote(Token):
    """Any quoted string literal."""


class Punctuation(Token):
    """Statement terminator ``;`` and other structural punctuation."""


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


class Node(Element):
    """An element with ordered children."""

    def __init__(self, *children: Element):
        super().__init__()
        self.children: list[Element] = []
        for child in children:
            self.add(child)

    def add(self, child: Element) -> Element:
        if child.parent is not None:
            raise ValueError(f"{child!r} already belongs to {child.parent!r}")
        child.parent = self
        self.children.append(child)
        return child

    def schildren(self) -> list[Element]:
        """Children that are not whitespace, comments or POD."""
        return [c for c in self.children if c.significant]

    def content(self) -> str:
        return "".join(c.content() for c in self.children)

    def elements(self) -> Iterator[Element]:
        """Every descendant in depth-first pre-order (self excluded)."""
        stack = list(reversed(self.children))
        while stack:
            element = stack.pop()
            yield element
            if isinstance(element, Node):
                stack.extend(reversed(element.children))

    def find(self, kind: "type[Element] | str") -> list[Element]:
        """All descendants of the given class (or class name), in pre-order."""
        cls = kind_class(kind) if isinstance(kind, str) else kind
        return [e for e in self.elements() if isinstance(e, cls)]

    @property
    def location(self) -> tuple[int | None, int | None]:
        for element in self.elements():
            if isinstance(element, Token):
                return element.location
        return None, None


class Document(Node):
    """Root of one source unit; also the outermost implicit scope."""

    def __init__(self, *children: Element, filename: str | None = None):
        super().__init__(*children)
        self.filename = filename


class Statement(Node):
    pass


class BreakStatement(Statement):
    """Flow control statement: goto, last, next, redo, return."""


class CompoundStatement(Statement):
    """if/unless/while/until/for/foreach, or a labelled bare block."""


class SubStatement(Statement):
    """Named sub declaration, ``sub name { ... }``."""


class IncludeStatement(Statement):
    """use/no/require."""


class VariableStatement(Statement):
    """my/our/local/state declaration."""


class Structure(Node):
    """A bracketed node; the brackets are not children."""

    brackets = ("", "")

    def content(self) -> str:
        start, finish = self.brackets
        return start + super().content() + finish


class Block(Structure):
    """Brace-delimited lexical scope."""

    brackets = ("{", "}")


class Constructor(Structure):
    """Anonymous hash or array constructor."""

    brackets = ("{", "}")


class ListStructure(Structure):
    brackets = ("(", ")")


class Condition(Structure):
    """Parenthesised condition of a compound statement."""

    brackets = ("(", ")")


class Subscript(Structure):
    brackets = ("[", "]")


KINDS: dict[str, type[Element]] = {
    cls.__name__: cls
    for cls in (
        Whitespace,
        Comment,
        Pod,
        Word,
        Label,
        Symbol,
        Cast,
        Operator,
        Number,
        Quote,
        Punctuation,
        Document,
        Statement,
        BreakStatement,
        CompoundStatement,
        SubStatement,
        IncludeStatement,
        VariableStatement,
        Block,
        Constructor,
        ListStructure,
        Condition,
        Subscript,
    )
}


def kind_class(name: str) -> type[Element]:
    """Look up an element class by its name (``"Label"`` -> Label)."""
    try:
        return KINDS[name]
    except KeyError:
        raise KeyError(f"unknown element kind: {name!r}") from None
