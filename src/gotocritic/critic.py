"""Critic: applies configured policies to documents.

Example:
    from gotocritic import Critic, load_document

    critic = Critic()
    for violation in critic.critique(load_document("tree.yaml")):
        print(violation.description, violation.line)
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from .config import Profile, build_policies, load_profile
from .loader import load_document
from .policy import Policy, Violation
from .tree import Document

logger = logging.getLogger(__name__)


class Critic:
    """Runs a fixed set of policies over one document at a time.

    Policies keep per-document state between prepare_to_scan_document() and
    violates(), so a Critic must not be shared between threads.
    """

    def __init__(self, profile: Profile | None = None, policies: list[Policy] | None = None):
        self.profile = profile or Profile()
        self.policies = policies if policies is not None else build_policies(self.profile)

    @classmethod
    def from_profile_file(cls, path: str | Path) -> "Critic":
        return cls(load_profile(path))

    def critique(self, document: Document) -> list[Violation]:
        """All violations in *document*, sorted by position."""
        violations: list[Violation] = []
        for policy in self.policies:
            violations.extend(self._apply(policy, document))
        return sorted(violations, key=lambda v: v.sort_key)

    def critique_all(self, documents: Iterable[Document]) -> list[Violation]:
        violations: list[Violation] = []
        for document in documents:
            violations.extend(self.critique(document))
        return violations

    def critique_file(self, path: str | Path) -> list[Violation]:
        return self.critique(load_document(path))

    def _apply(self, policy: Policy, document: Document) -> list[Violation]:
        name = document.filename or "<document>"
        if not policy.prepare_to_scan_document(document):
            logger.debug("%s: nothing to check in %s", policy.name, name)
            return []

        limit = policy.maximum_violations_per_document
        found: list[Violation] = []
        for element in document.find(policy.applies_to()):
            found.extend(policy.violates(element, document))
            if limit is not None and len(found) >= limit:
                logger.debug("%s: stopped at %d violations in %s", policy.name, limit, name)
                return found[:limit]
        return found
