"""Profile link renderer.

Turns a GitHub handle into ``<a href="https://github.com/<handle>"><svg/></a>``.
The handle is appended to the prefix as-is: ``"a/b"`` yields
``https://github.com/a/b``. Callers pass handles they already trust.
"""
from __future__ import annotations

from team_links.models import ProfileLinkConfiguration, RenderedLink
from team_links.tokens import GITHUB_MARK, GITHUB_PROFILE_URL_PREFIX, VectorIcon


class ProfileLinkRenderer:
    """Stateless renderer; one instance may be shared across threads."""

    def __init__(
        self,
        url_prefix: str = GITHUB_PROFILE_URL_PREFIX,
        icon: VectorIcon = GITHUB_MARK,
    ) -> None:
        self.url_prefix = url_prefix
        self.icon = icon
        # Immutable tree, so every render can hand out the same instance
        self._icon_node = icon.to_node()

    def render(self, config: ProfileLinkConfiguration) -> RenderedLink:
        return RenderedLink(
            target=self.url_prefix + config.identifier,
            content=self._icon_node,
        )


_DEFAULT_RENDERER = ProfileLinkRenderer()


def render_profile_link(identifier: str) -> RenderedLink:
    """Render a GitHub profile link for *identifier* with the default tokens."""
    return _DEFAULT_RENDERER.render(ProfileLinkConfiguration(identifier=identifier))
