"""Loads config/team.yaml into TeamMember dataclasses."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from team_links.logger import get_logger
from team_links.models import TeamMember

log = get_logger(__name__)

# YAML scalars that read naturally as a handle (``github: 1234`` is a valid login)
_SCALAR_HANDLE_TYPES = (str, int, float, bool)


def _read_members(raw: Any, config_path: Path) -> list[Any]:
    if raw is None:
        return []
    if not isinstance(raw, dict):
        log.warning(
            "Roster is not a mapping, ignoring it",
            path=str(config_path),
            found=type(raw).__name__,
        )
        return []

    raw_members = raw.get("members") or []
    if not isinstance(raw_members, list):
        log.warning(
            "Roster 'members' is not a list, ignoring it",
            path=str(config_path),
            found=type(raw_members).__name__,
        )
        return []
    return raw_members


def _dedupe_slugs(members: list[TeamMember]) -> None:
    """Suffix repeated slugs (``-2``, ``-3``, ...) so page anchors stay unique."""
    seen: dict[str, int] = {}
    taken = {m.slug for m in members}
    for member in members:
        count = seen.get(member.slug, 0) + 1
        seen[member.slug] = count
        if count == 1:
            continue
        base = member.slug
        candidate = f"{base}-{count}"
        while candidate in taken:
            count += 1
            candidate = f"{base}-{count}"
        seen[base] = count
        taken.add(candidate)
        member.slug = candidate


def load_team(config_path: Path) -> list[TeamMember]:
    """Parse team.yaml and return members in file order.

    GitHub handles are linked as written. Scalar handles are read as text;
    entries without a string name or with a list/mapping handle are skipped
    with a warning.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Team roster not found: {config_path}")

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    raw_members = _read_members(raw, config_path)

    members: list[TeamMember] = []
    for i, item in enumerate(raw_members):
        try:
            name = item["name"]
            if not isinstance(name, str):
                raise TypeError(f"name must be a string, got {type(name).__name__}")
            github = item.get("github")
            if github is not None and not isinstance(github, _SCALAR_HANDLE_TYPES):
                raise TypeError(f"github must be a scalar, got {type(github).__name__}")
            member = TeamMember(
                name=name,
                title=item.get("title", "") or "",
                github=None if github is None else str(github),
                bio=item.get("bio", "") or "",
            )
            members.append(member)
        except (KeyError, TypeError, AttributeError) as exc:
            log.warning(
                "Skipping malformed team member",
                index=i,
                item=item,
                error=str(exc),
            )

    _dedupe_slugs(members)
    log.info("Team roster loaded", count=len(members), path=str(config_path))
    return members
