"""Tests for the team page builder."""
from team_links.config_loader import load_team
from team_links.models import TeamMember
from team_links.renderer import ProfileLinkRenderer
from team_links.site_builder import TeamPageBuilder


class TestTeamPageBuilder:
    """Tests for TeamPageBuilder."""

    def test_build_writes_page(self, tmp_path, templates_dir, roster_file):
        """Test build() writes team.html with one link per GitHub handle."""
        builder = TeamPageBuilder(site_dir=tmp_path / "site", templates_dir=templates_dir)

        out_path = builder.build(load_team(roster_file))

        assert out_path == tmp_path / "site" / "team.html"
        html = out_path.read_text(encoding="utf-8")
        assert html.count('<a href="https://github.com/octocat">') == 1
        assert html.count("<svg") == 1
        assert 'id="member-alex-mercer"' in html
        assert "<strong>publishing pipeline</strong>" in html
        assert "Kenji Tanaka" in html

    def test_roster_order_kept(self, tmp_path, templates_dir):
        """Test members appear in the order given."""
        members = [TeamMember(name="Zed", github="zed"), TeamMember(name="Amy", github="amy")]
        html = TeamPageBuilder(tmp_path, templates_dir).render_page(members)

        assert html.index("https://github.com/zed") < html.index("https://github.com/amy")

    def test_empty_handle_still_linked(self, tmp_path, templates_dir):
        """Test an empty handle renders the bare prefix link."""
        html = TeamPageBuilder(tmp_path, templates_dir).render_page([TeamMember(name="Blank", github="")])

        assert '<a href="https://github.com/">' in html

    def test_names_are_escaped(self, tmp_path, templates_dir):
        """Test member text goes through Jinja2 autoescaping."""
        html = TeamPageBuilder(tmp_path, templates_dir).render_page([TeamMember(name="<script>")])

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_custom_renderer(self, tmp_path, templates_dir):
        """Test the builder uses the renderer it was given."""
        builder = TeamPageBuilder(
            tmp_path,
            templates_dir,
            renderer=ProfileLinkRenderer(url_prefix="https://gitlab.com/"),
        )

        assert 'href="https://gitlab.com/octocat"' in builder.profile_link("octocat")
