"""team-links – GitHub profile links for team-member pages."""
from __future__ import annotations

from team_links.markup import MarkupNode, element, render_html
from team_links.models import ProfileLinkConfiguration, RenderedLink, TeamMember
from team_links.renderer import ProfileLinkRenderer, render_profile_link

__all__ = [
    "MarkupNode",
    "ProfileLinkConfiguration",
    "ProfileLinkRenderer",
    "RenderedLink",
    "TeamMember",
    "element",
    "render_html",
    "render_profile_link",
]
