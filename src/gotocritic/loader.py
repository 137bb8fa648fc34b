"""Load documents from tree dumps written by an external parser.

A dump is JSON or YAML describing the document top-down:

    filename: lib/Foo.pm
    children:
      - kind: CompoundStatement
        children:
          - {kind: Label, content: "FOO:", line: 1, column: 1}
          - {kind: Whitespace, content: " "}
          - kind: Block
            children: []

Tokens carry `content` (and optionally `line`/`column`); nodes carry
`children`. Kinds are the class names in gotocritic.tree.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from . import tree


class TreeError(Exception):
    pass


class NodeSpec(BaseModel):
    """One element of a tree dump."""

    kind: str
    content: str | None = None
    line: int | None = None
    column: int | None = None
    children: list["NodeSpec"] = []


class DocumentSpec(BaseModel):
    filename: str | None = None
    children: list[NodeSpec] = []


NodeSpec.model_rebuild()


def _build(spec: NodeSpec, where: str) -> tree.Element:
    try:
        cls = tree.kind_class(spec.kind)
    except KeyError as exc:
        raise TreeError(f"{where}: {exc.args[0]}") from None

    if cls is tree.Document:
        raise TreeError(f"{where}: Document may only appear at the root")

    if issubclass(cls, tree.Token):
        if spec.content is None:
            raise TreeError(f"{where}: {spec.kind} token needs content")
        if spec.children:
            raise TreeError(f"{where}: {spec.kind} token cannot have children")
        return cls(spec.content, line=spec.line, column=spec.column)

    if spec.content is not None:
        raise TreeError(f"{where}: {spec.kind} node cannot have content")
    node = cls()
    for i, child in enumerate(spec.children):
        node.add(_build(child, f"{where}.children[{i}]"))
    return node


def build_document(data: dict[str, Any], filename: str | None = None) -> tree.Document:
    """Build a Document from an already-decoded tree dump."""
    try:
        spec = DocumentSpec.model_validate(data)
    except ValidationError as exc:
        raise TreeError(f"invalid tree dump: {exc}") from exc

    document = tree.Document(filename=spec.filename or filename)
    for i, child in enumerate(spec.children):
        document.add(_build(child, f"children[{i}]"))
    return document


def load_document(path: str | Path) -> tree.Document:
    """Read a .json, .yaml or .yml tree dump."""
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as exc:
        raise TreeError(f"{path}: {exc.strerror or exc}") from exc

    try:
        if path.suffix == ".json":
            data = json.loads(text)
        else:
            # BaseLoader keeps every scalar a string: `no`, `on`, `1` are tokens here
            data = yaml.load(text, Loader=yaml.BaseLoader)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise TreeError(f"{path}: {exc}") from exc

    if not isinstance(data, dict):
        raise TreeError(f"{path}: expected a mapping at the top level")
    try:
        return build_document(data, filename=str(path))
    except TreeError as exc:
        raise TreeError(f"{path}: {exc}") from exc
