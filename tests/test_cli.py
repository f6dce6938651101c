"""Tests for scripts/build_team_page.py."""
import pytest

from scripts import build_team_page


@pytest.fixture
def cli(monkeypatch, tmp_path, reset_logging):
    monkeypatch.setattr(build_team_page, "LOG_DIR", tmp_path / "logs")
    return build_team_page


class TestBuildTeamPage:
    """Tests for main()."""

    def test_builds_page(self, cli, tmp_path, roster_file):
        """Test the default mode writes team.html."""
        site_dir = tmp_path / "site"

        code = cli.main(["--config", str(roster_file), "--site-dir", str(site_dir)])

        assert code == 0
        assert (site_dir / "team.html").exists()
        assert (tmp_path / "logs" / "team_links.jsonl").exists()

    def test_links_only(self, cli, roster_file, capsys):
        """Test --links-only prints nothing but one anchor per GitHub handle."""
        code = cli.main(["--config", str(roster_file), "--links-only"])

        assert code == 0
        captured = capsys.readouterr()
        lines = captured.out.splitlines()
        assert len(lines) == 1
        assert lines[0].startswith('<a href="https://github.com/octocat">')
        assert lines[0].endswith("</a>")
        assert "Team roster loaded" in captured.err

    def test_missing_roster(self, cli, tmp_path):
        """Test a missing roster exits with 1."""
        assert cli.main(["--config", str(tmp_path / "missing.yaml")]) == 1

    def test_empty_roster(self, cli, tmp_path):
        """Test an empty roster exits with 1."""
        path = tmp_path / "team.yaml"
        path.write_text("members: []\n", encoding="utf-8")

        assert cli.main(["--config", str(path)]) == 1

    def test_null_members(self, cli, tmp_path):
        """Test a roster with an empty 'members:' key exits with 1."""
        path = tmp_path / "team.yaml"
        path.write_text("members:\n", encoding="utf-8")

        assert cli.main(["--config", str(path)]) == 1
