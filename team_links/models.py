"""Data models for team-links."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from team_links.markup import MarkupNode, element


@dataclass(frozen=True)
class ProfileLinkConfiguration:
    """Input to a single profile-link render.

    The identifier is taken verbatim: no trimming, escaping or format checks.
    """

    identifier: str

    def __post_init__(self) -> None:
        if not isinstance(self.identifier, str):
            raise TypeError(
                f"identifier must be str, got {type(self.identifier).__name__}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ProfileLinkConfiguration:
        return cls(identifier=data["identifier"])


@dataclass(frozen=True)
class RenderedLink:
    """A hyperlink to an external profile, decorated with a fixed icon."""

    target: str
    content: MarkupNode

    def to_node(self) -> MarkupNode:
        return element("a", {"href": self.target}, self.content)


@dataclass
class TeamMember:
    """One already-resolved entry from config/team.yaml."""

    name: str
    title: str = ""
    github: Optional[str] = None
    bio: str = ""

    # Derived at load time
    slug: str = ""

    def __post_init__(self) -> None:
        if not self.slug:
            from slugify import slugify  # type: ignore[import-untyped]

            self.slug = slugify(self.name)
