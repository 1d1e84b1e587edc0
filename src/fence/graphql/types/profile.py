"""
Profile GraphQL type definitions
"""

from __future__ import annotations

from dataclasses import fields
from datetime import datetime

import strawberry

from ...profile.display import Display
from ...profile.model import Profile as ProfileModel
from ...profile.model import StandardAttributeString as AttributeModel
from ...profile.update import AttributeUpdate, ProfileUpdate


@strawberry.type
class StandardAttributeString:
    """A profile attribute with its display level."""

    value: str | None
    display: Display | None
    verified: bool
    last_modified: datetime | None
    publisher: str | None

    @classmethod
    def from_model(cls, attribute: AttributeModel) -> StandardAttributeString:
        return cls(
            value=attribute.value,
            display=attribute.metadata.display,
            verified=attribute.metadata.verified,
            last_modified=attribute.metadata.last_modified,
            publisher=attribute.signature.publisher.name or None,
        )


@strawberry.type
class Profile:
    """Profile type for GraphQL API."""

    user_id: StandardAttributeString
    primary_username: StandardAttributeString
    primary_email: StandardAttributeString
    first_name: StandardAttributeString
    last_name: StandardAttributeString
    alternative_name: StandardAttributeString
    pronouns: StandardAttributeString
    fun_title: StandardAttributeString
    description: StandardAttributeString
    location: StandardAttributeString
    timezone: StandardAttributeString
    picture: StandardAttributeString

    @classmethod
    def from_model(cls, profile: ProfileModel) -> Profile:
        return cls(
            user_id=StandardAttributeString.from_model(profile.user_id),
            primary_username=StandardAttributeString.from_model(profile.primary_username),
            primary_email=StandardAttributeString.from_model(profile.primary_email),
            first_name=StandardAttributeString.from_model(profile.first_name),
            last_name=StandardAttributeString.from_model(profile.last_name),
            alternative_name=StandardAttributeString.from_model(profile.alternative_name),
            pronouns=StandardAttributeString.from_model(profile.pronouns),
            fun_title=StandardAttributeString.from_model(profile.fun_title),
            description=StandardAttributeString.from_model(profile.description),
            location=StandardAttributeString.from_model(profile.location),
            timezone=StandardAttributeString.from_model(profile.timezone),
            picture=StandardAttributeString.from_model(profile.picture),
        )


@strawberry.input
class InputStandardAttributeString:
    """New value and/or display for one attribute."""

    value: str | None = None
    display: Display | None = None


@strawberry.input
class InputProfile:
    """Partial profile update. Omitted attributes are left untouched."""

    primary_username: InputStandardAttributeString | None = None
    first_name: InputStandardAttributeString | None = None
    last_name: InputStandardAttributeString | None = None
    alternative_name: InputStandardAttributeString | None = None
    pronouns: InputStandardAttributeString | None = None
    fun_title: InputStandardAttributeString | None = None
    description: InputStandardAttributeString | None = None
    location: InputStandardAttributeString | None = None
    timezone: InputStandardAttributeString | None = None
    picture: InputStandardAttributeString | None = None

    def to_update(self) -> ProfileUpdate:
        attributes = {}
        for f in fields(self):
            attribute = getattr(self, f.name)
            if attribute is not None:
                attributes[f.name] = AttributeUpdate(
                    value=attribute.value, display=attribute.display
                )
        return ProfileUpdate(attributes=attributes)
