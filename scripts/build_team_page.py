#!/usr/bin/env python3
"""Build the team page (or just the profile links) from the team roster.

Usage:
    python -m scripts.build_team_page               # write site/team.html
    python -m scripts.build_team_page --links-only  # print one <a> per member

Environment variables:
    LOG_LEVEL        Optional: DEBUG | INFO | WARNING (default: INFO)
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# ── Make sure the project root is on sys.path ────────────────────────────────
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from team_links.config_loader import load_team
from team_links.logger import LOG_FILENAME, configure_logging, get_logger
from team_links.markup import render_html
from team_links.renderer import render_profile_link
from team_links.site_builder import TeamPageBuilder

# ── Path constants ────────────────────────────────────────────────────────────
CONFIG_PATH   = PROJECT_ROOT / "config" / "team.yaml"
SITE_DIR      = PROJECT_ROOT / "site"
TEMPLATES_DIR = PROJECT_ROOT / "templates"
LOG_DIR       = PROJECT_ROOT / "logs"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="team-links page builder")
    parser.add_argument(
        "--config",
        type=Path,
        default=CONFIG_PATH,
        help="Team roster YAML file.",
    )
    parser.add_argument(
        "--site-dir",
        type=Path,
        default=SITE_DIR,
        help="Output directory for team.html.",
    )
    parser.add_argument(
        "--links-only",
        action="store_true",
        help="Print one serialized profile link per member instead of building the page.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(os.environ.get("LOG_LEVEL", "INFO"), log_file=LOG_DIR / LOG_FILENAME)
    log = get_logger("build_team_page")

    try:
        members = load_team(args.config)
    except FileNotFoundError as exc:
        log.error("Team roster not found", error=str(exc))
        return 1

    if not members:
        log.error("No team members loaded — check the roster file", path=str(args.config))
        return 1

    if args.links_only:
        for member in members:
            if member.github is None:
                continue
            print(render_html(render_profile_link(member.github).to_node()))
        return 0

    builder = TeamPageBuilder(site_dir=args.site_dir, templates_dir=TEMPLATES_DIR)
    builder.build(members)

    log.info("Team page finished successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
