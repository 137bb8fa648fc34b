"""Registry of available policies, keyed by policy name."""

from ..policy import Policy
from .prohibit_goto_into_block import ProhibitGotoIntoBlock

POLICIES: dict[str, type[Policy]] = {
    ProhibitGotoIntoBlock.name: ProhibitGotoIntoBlock,
}


def policy_class(name: str) -> type[Policy]:
    try:
        return POLICIES[name]
    except KeyError:
        raise KeyError(f"unknown policy: {name!r}") from None


def all_policies() -> list[Policy]:
    """A fresh instance of every registered policy."""
    return [cls() for cls in POLICIES.values()]


__all__ = ["POLICIES", "ProhibitGotoIntoBlock", "all_policies", "policy_class"]
