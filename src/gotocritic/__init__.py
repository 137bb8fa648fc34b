"""goto-critic: find Perl gotos that jump into a block.

Pipeline: external parser -> tree dump -> Document -> policies -> violations.

Example:
    from gotocritic import Critic, load_document

    document = load_document("Foo.pm.yaml")
    for violation in Critic().critique(document):
        print(violation.line, violation.description)
"""

__version__ = "0.1.0"

from .config import ConfigError, PolicyConfig, Profile, build_policies, load_profile
from .critic import Critic
from .loader import TreeError, build_document, load_document
from .policies import POLICIES, ProhibitGotoIntoBlock, all_policies
from .policies.prohibit_goto_into_block import (
    containing_block,
    containing_blocks,
    enters_block,
    find_violations,
    index_labels,
)
from .policy import Policy, Severity, Violation
from .report import Statistics, format_violation, format_violations
from .tree import Block, BreakStatement, Document, Element, Label, Node

__all__ = [
    # Tree
    "Document",
    "Element",
    "Node",
    "Block",
    "Label",
    "BreakStatement",
    # Load
    "load_document",
    "build_document",
    "TreeError",
    # Policies
    "Policy",
    "Severity",
    "Violation",
    "POLICIES",
    "ProhibitGotoIntoBlock",
    "all_policies",
    "index_labels",
    "containing_block",
    "containing_blocks",
    "enters_block",
    "find_violations",
    # Configure
    "Profile",
    "PolicyConfig",
    "ConfigError",
    "load_profile",
    "build_policies",
    # Run
    "Critic",
    # Report
    "Statistics",
    "format_violation",
    "format_violations",
]
