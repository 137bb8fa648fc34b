"""Profile loading: minimum severity, theme selection, per-policy options.

Profiles are YAML:

    severity: harsh
    theme: [bugs]
    policies:
      ControlStructures::ProhibitGotoIntoBlock:
        severity: 5
        add_themes: [core]
        maximum_violations_per_document: 10

Keys under a policy other than the standard options are policy parameters
and must be listed in the policy's supported_parameters().
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .policies import POLICIES, policy_class
from .policy import Policy, Severity, parse_severity


class ConfigError(Exception):
    pass


def _severity(value: Any) -> Any:
    if value is None or isinstance(value, Severity):
        return value
    if isinstance(value, (int, str)) and not isinstance(value, bool):
        return parse_severity(value)
    return value


class PolicyConfig(BaseModel):
    """Standard options for one policy; extra keys are policy parameters."""

    model_config = ConfigDict(extra="allow")

    enabled: bool = True
    severity: Severity | None = None
    set_themes: list[str] | None = None
    add_themes: list[str] = []
    maximum_violations_per_document: int | None = Field(default=None, ge=1)

    @field_validator("severity", mode="before")
    @classmethod
    def check_severity(cls, value: Any) -> Any:
        return _severity(value)

    @property
    def parameters(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class Profile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    severity: Severity = Severity.LOWEST
    theme: list[str] = []
    policies: dict[str, PolicyConfig] = {}

    @field_validator("severity", mode="before")
    @classmethod
    def check_severity(cls, value: Any) -> Any:
        return _severity(value)

    @field_validator("theme", mode="before")
    @classmethod
    def split_theme(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.split()
        return value

    @field_validator("policies", mode="before")
    @classmethod
    def empty_sections(cls, value: Any) -> Any:
        # A bare "Policy::Name:" line means default options
        if isinstance(value, dict):
            return {name: {} if options is None else options for name, options in value.items()}
        return value

    @field_validator("policies")
    @classmethod
    def known_policies(cls, value: dict[str, PolicyConfig]) -> dict[str, PolicyConfig]:
        for name in value:
            if name not in POLICIES:
                raise ValueError(f"unknown policy: {name}")
        return value


def load_profile(path: str | Path) -> Profile:
    """Read a YAML profile. An empty file gives the default profile."""
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"{path}: {exc.strerror or exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: {exc}") from exc

    if data is None:
        return Profile()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    try:
        return Profile.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def configure(policy: Policy, config: PolicyConfig) -> Policy:
    """Apply standard options to *policy*; reject unsupported parameters."""
    supported = set(policy.supported_parameters())
    for name in config.parameters:
        if name not in supported:
            raise ConfigError(f"{policy.name} does not support parameter {name!r}")

    if config.severity is not None:
        policy.severity = config.severity
    if config.set_themes is not None:
        policy.set_themes(config.set_themes)
    if config.add_themes:
        policy.add_themes(config.add_themes)
    policy.maximum_violations_per_document = config.maximum_violations_per_document
    return policy


def build_policies(profile: Profile) -> list[Policy]:
    """Instantiate and configure every enabled policy the profile selects."""
    policies = []
    for name in POLICIES:
        config = profile.policies.get(name, PolicyConfig())
        if not config.enabled:
            continue
        policy = configure(policy_class(name)(), config)
        if policy.severity < profile.severity:
            continue
        if not set(profile.theme) <= policy.themes:
            continue
        policies.append(policy)
    return policies
