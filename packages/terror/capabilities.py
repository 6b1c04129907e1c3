"""Deployment capability set for optional error-object fields.

Each capability switches one optional field or behavior on or off for a whole
deployment. The deployment set is resolved once from configuration and cached;
callers that host several deployments may pass an explicit ``Capabilities``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterable

from .exceptions import CapabilityDisabledError
from .logging import get_logger

logger = get_logger(__name__)


class Capability(str, Enum):
    """Names of the optional capabilities."""

    TIMESTAMP = "timestamp"
    IDENTIFIER = "identifier"
    REFERENCE = "reference"
    TAGS = "tags"


@dataclass(frozen=True)
class Capabilities:
    """Resolved on/off state of every capability."""

    timestamp: bool = False
    identifier: bool = False
    reference: bool = True
    tags: bool = True

    @classmethod
    def none(cls) -> Capabilities:
        """Return a set with every capability disabled."""
        return cls(timestamp=False, identifier=False, reference=False, tags=False)

    @classmethod
    def all(cls) -> Capabilities:
        """Return a set with every capability enabled."""
        return cls(timestamp=True, identifier=True, reference=True, tags=True)

    @classmethod
    def of(cls, names: Iterable[Capability | str]) -> Capabilities:
        """Return a set enabling exactly the named capabilities."""
        enabled = {Capability(name).value for name in names}
        return cls(**{item.value: item.value in enabled for item in Capability})

    def enabled(self, capability: Capability | str) -> bool:
        """Return ``True`` when ``capability`` is switched on."""
        return bool(getattr(self, Capability(capability).value))

    def require(self, capability: Capability | str) -> None:
        """Raise ``CapabilityDisabledError`` unless ``capability`` is on."""
        name = Capability(capability).value
        if not self.enabled(name):
            raise CapabilityDisabledError(
                message=f"capability {name!r} is disabled for this deployment",
                capability=name,
            )


@lru_cache(maxsize=1)
def deployment_capabilities() -> Capabilities:
    """Resolve the deployment capability set from configuration, once."""
    from .config import load_settings

    resolved = load_settings().capabilities.to_capabilities()
    logger.debug("resolved deployment capabilities: %s", _enabled_names(resolved) or "none")
    return resolved


def resolve(capabilities: Capabilities | None) -> Capabilities:
    """Return ``capabilities`` or the deployment set when ``None``."""
    return deployment_capabilities() if capabilities is None else capabilities


def _enabled_names(capabilities: Capabilities) -> str:
    return ",".join(item.value for item in Capability if capabilities.enabled(item))
