"""
Partial profile updates and the applier that merges and re-signs them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import FossilSettings
from ..logging import get_logger
from .display import Display
from .model import STANDARD_ATTRIBUTES, Profile, Publisher, StandardAttributeString, utc_now
from .signing import SecretStore, SigningError

logger = get_logger(__name__)


class ProfileUpdateError(Exception):
    """Raised when an update cannot be merged into or signed on a profile."""


@dataclass
class AttributeUpdate:
    """New value and/or display for a single attribute. ``None`` leaves it untouched."""

    value: str | None = None
    display: Display | None = None

    def changes(self, attribute: StandardAttributeString) -> bool:
        return (self.value is not None and self.value != attribute.value) or (
            self.display is not None and self.display != attribute.metadata.display
        )


@dataclass
class ProfileUpdate:
    """A partial update keyed by attribute name."""

    attributes: dict[str, AttributeUpdate] = field(default_factory=dict)

    @property
    def primary_username(self) -> str | None:
        update = self.attributes.get("primary_username")
        return update.value if update else None

    def changed_attributes(self, profile: Profile) -> list[str]:
        """Names of the attributes this update would modify on ``profile``."""
        changed = []
        for name, update in self.attributes.items():
            if name not in STANDARD_ATTRIBUTES:
                raise ProfileUpdateError(f"unknown attribute: {name}")
            if update.changes(profile.attribute(name)):
                changed.append(name)
        return changed


def _sign_attribute(
    attribute: StandardAttributeString, secret_store: SecretStore, publisher: str
) -> None:
    attribute.signature.publisher = Publisher(
        alg=secret_store.algorithm,
        typ="JWS",
        name=publisher,
        value=secret_store.sign(attribute.signing_payload()),
    )


def apply_update(
    update: ProfileUpdate,
    profile: Profile,
    secret_store: SecretStore,
    fossil: FossilSettings,
) -> Profile:
    """
    Merge ``update`` into a copy of ``profile`` and re-sign changed attributes.

    An attribute may only be written when the trust configuration lists it as
    writable and it is not already owned by another publisher. Attributes the
    update leaves unchanged keep their existing signatures.

    Args:
        update: The partial update to apply
        profile: The caller's current, unfiltered profile
        secret_store: Signing material of the profile store
        fossil: Trust configuration for the publishing authority

    Returns:
        The updated profile copy

    Raises:
        ProfileUpdateError: If an attribute is not writable or cannot be signed
    """
    updated = profile.model_copy(deep=True)
    changed = update.changed_attributes(updated)
    now = utc_now()

    for name in changed:
        if name not in fossil.writable_attributes:
            raise ProfileUpdateError(f"{name} is not writable by {fossil.publisher}")

        attribute = updated.attribute(name)
        owner = attribute.signature.publisher.name
        if owner and owner != fossil.publisher:
            raise ProfileUpdateError(f"{name} is published by {owner}, not {fossil.publisher}")

        change = update.attributes[name]
        if change.value is not None:
            attribute.value = change.value
        if change.display is not None:
            attribute.metadata.display = change.display
        if attribute.metadata.created is None:
            attribute.metadata.created = now
        attribute.metadata.last_modified = now

        try:
            _sign_attribute(attribute, secret_store, fossil.publisher)
        except SigningError as e:
            raise ProfileUpdateError(f"unable to sign {name}: {e}") from e

    logger.debug("Applied profile update", changed_attributes=changed)
    return updated
