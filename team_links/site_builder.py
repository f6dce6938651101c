"""Team page builder.

Mounts one profile link per team member into templates/team.html and writes
site/team.html. Bios are Markdown and rendered to HTML fragments.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import markdown as md_lib
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from team_links.logger import get_logger
from team_links.markup import render_html
from team_links.models import ProfileLinkConfiguration, TeamMember
from team_links.renderer import ProfileLinkRenderer

log = get_logger(__name__)

MD_EXTENSIONS = ["extra", "sane_lists"]

PAGE_TEMPLATE = "team.html"
PAGE_FILENAME = "team.html"


def _render_markdown(text: str) -> Markup:
    """Convert a bio written in Markdown to an HTML fragment."""
    return Markup(md_lib.markdown(text, extensions=MD_EXTENSIONS))


class TeamPageBuilder:
    """Builds the team page from a list of already-resolved members."""

    def __init__(
        self,
        site_dir: Path,
        templates_dir: Path,
        renderer: Optional[ProfileLinkRenderer] = None,
    ) -> None:
        self.site_dir = site_dir
        self.templates_dir = templates_dir
        self.renderer = renderer or ProfileLinkRenderer()

        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
        )
        self.env.globals["profile_link"] = self.profile_link
        self.env.filters["markdown"] = _render_markdown

    # ── Public API ────────────────────────────────────────────────────────────

    def profile_link(self, identifier: str) -> Markup:
        """Serialized ``<a>`` for *identifier*, safe to drop into a template."""
        link = self.renderer.render(ProfileLinkConfiguration(identifier=identifier))
        return render_html(link.to_node())

    def render_page(self, members: list[TeamMember]) -> str:
        template = self.env.get_template(PAGE_TEMPLATE)
        return template.render(
            members=members,
            page_title="Our Team",
        )

    def build(self, members: list[TeamMember]) -> Path:
        """Render the page and write it to ``site_dir/team.html``."""
        self.site_dir.mkdir(parents=True, exist_ok=True)
        html = self.render_page(members)

        out_path = self.site_dir / PAGE_FILENAME
        out_path.write_text(html, encoding="utf-8")

        log.info(
            "Team page built",
            members=len(members),
            with_github=sum(1 for m in members if m.github is not None),
            path=str(out_path),
        )
        return out_path
