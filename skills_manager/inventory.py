"""Global skill repository scanning."""

import logging
from dataclasses import replace
from pathlib import Path

from skills_manager.constants import (
    GLOBAL_SKILLS_RELATIVE_PATH,
    NO_DESCRIPTION_PLACEHOLDER,
    SKILL_FILENAME,
)
from skills_manager.detection import agent_skills_dir, detect_agents
from skills_manager.errors import GlobalSkillMissingError
from skills_manager.filesystem import EntryKind, entry_kind, list_visible_dirs
from skills_manager.models import Agent, Inventory, Skill
from skills_manager.skills.models import SkillMetadata
from skills_manager.skills.parser import parse_skill_md

logger = logging.getLogger(__name__)


def global_skills_dir(home: Path) -> Path:
    return home / GLOBAL_SKILLS_RELATIVE_PATH


def load_skill_metadata(skill_dir: Path, dir_name: str) -> SkillMetadata:
    """Read ``SKILL.md`` from ``skill_dir``, substituting display fallbacks.

    An empty name becomes ``dir_name`` and an empty description becomes the
    placeholder text. A missing or unreadable descriptor gets both.
    """
    descriptor = skill_dir / SKILL_FILENAME
    try:
        text = descriptor.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("No readable descriptor at %s: %s", descriptor, exc)
        return SkillMetadata(name=dir_name, description=NO_DESCRIPTION_PLACEHOLDER)

    metadata = parse_skill_md(text)
    if not metadata.name:
        metadata = replace(metadata, name=dir_name)
    if not metadata.description:
        metadata = replace(metadata, description=NO_DESCRIPTION_PLACEHOLDER)
    return metadata


def list_global_skill_names(home: Path) -> list[str]:
    return [child.name for child in list_visible_dirs(global_skills_dir(home))]


def scan_inventory(home: Path) -> Inventory:
    agents = detect_agents(home)
    detected = [agent for agent in agents if agent.detected]
    skills = [
        _build_skill(home, skill_dir, detected)
        for skill_dir in list_visible_dirs(global_skills_dir(home))
    ]
    logger.debug(
        "Scanned %d global skills across %d detected agents",
        len(skills),
        len(detected),
    )
    return Inventory(agents=agents, skills=skills)


def find_skill(home: Path, skill_name: str) -> Skill:
    for skill in scan_inventory(home).skills:
        if skill.name == skill_name:
            return skill
    raise GlobalSkillMissingError(skill_name)


def _build_skill(home: Path, skill_dir: Path, detected: list[Agent]) -> Skill:
    name = skill_dir.name
    linked: list[str] = []
    symlinked: list[str] = []
    for agent in detected:
        kind = entry_kind(agent_skills_dir(home, agent) / name)
        if kind == EntryKind.SYMLINK:
            linked.append(agent.id)
            symlinked.append(agent.id)
        elif kind == EntryKind.DIRECTORY:
            linked.append(agent.id)

    return Skill(
        name=name,
        metadata=load_skill_metadata(skill_dir, name),
        linked_agents=linked,
        symlinked_agents=symlinked,
    )
