"""
Profile record as stored in and served by the CIS profile store.

Each attribute is wrapped with metadata (including its display level) and a
signature block naming the publisher that last wrote it.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from .display import Display

# Attributes of the profile that are standard (string valued) attributes.
STANDARD_ATTRIBUTES = (
    "user_id",
    "primary_username",
    "primary_email",
    "first_name",
    "last_name",
    "alternative_name",
    "pronouns",
    "fun_title",
    "description",
    "location",
    "timezone",
    "picture",
)


def utc_now() -> datetime:
    return datetime.now(UTC)


class Publisher(BaseModel):
    """Signature made by a single publishing authority."""

    alg: str = "HS256"
    typ: str = "JWS"
    name: str = ""
    value: str = ""


class Signature(BaseModel):
    publisher: Publisher = Field(default_factory=Publisher)
    additional: list[Publisher] = Field(default_factory=list)


class Metadata(BaseModel):
    classification: str = "PUBLIC"
    created: datetime | None = None
    last_modified: datetime | None = None
    verified: bool = False
    display: Display | None = None


class StandardAttributeString(BaseModel):
    """A single signed, display-tagged string attribute."""

    metadata: Metadata = Field(default_factory=Metadata)
    signature: Signature = Field(default_factory=Signature)
    value: str | None = None

    def visible_at(self, display: Display) -> bool:
        """Whether a viewer filtered at ``display`` may see this attribute."""
        if self.metadata.display is None:
            return display is Display.PRIVATE
        return self.metadata.display <= display

    def signing_payload(self) -> dict:
        """The attribute as JSON without its signature block."""
        return self.model_dump(mode="json", exclude={"signature"})


class Profile(BaseModel):
    """A directory profile."""

    user_id: StandardAttributeString = Field(default_factory=StandardAttributeString)
    primary_username: StandardAttributeString = Field(default_factory=StandardAttributeString)
    primary_email: StandardAttributeString = Field(default_factory=StandardAttributeString)
    first_name: StandardAttributeString = Field(default_factory=StandardAttributeString)
    last_name: StandardAttributeString = Field(default_factory=StandardAttributeString)
    alternative_name: StandardAttributeString = Field(default_factory=StandardAttributeString)
    pronouns: StandardAttributeString = Field(default_factory=StandardAttributeString)
    fun_title: StandardAttributeString = Field(default_factory=StandardAttributeString)
    description: StandardAttributeString = Field(default_factory=StandardAttributeString)
    location: StandardAttributeString = Field(default_factory=StandardAttributeString)
    timezone: StandardAttributeString = Field(default_factory=StandardAttributeString)
    picture: StandardAttributeString = Field(default_factory=StandardAttributeString)

    def attribute(self, name: str) -> StandardAttributeString:
        if name not in STANDARD_ATTRIBUTES:
            raise KeyError(name)
        return getattr(self, name)

    def is_empty(self) -> bool:
        """True for the placeholder profile the person API returns for unknown users."""
        return self.user_id.value is None

    def filtered(self, display: Display) -> Profile:
        """Return a copy with every attribute above ``display`` blanked out."""
        copy = self.model_copy(deep=True)
        for name in STANDARD_ATTRIBUTES:
            attribute = copy.attribute(name)
            if not attribute.visible_at(display):
                setattr(copy, name, StandardAttributeString(metadata=attribute.metadata))
        return copy

    def to_json(self) -> dict:
        return self.model_dump(mode="json")
