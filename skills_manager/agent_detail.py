"""Per-agent view of installed, local and available skills."""

import logging
from pathlib import Path

from skills_manager.catalog import find_agent_definition
from skills_manager.detection import agent_skills_dir, detect_agents
from skills_manager.errors import AgentNotFoundError
from skills_manager.filesystem import (
    EntryKind,
    entry_kind,
    list_visible_entries,
    read_link_target,
)
from skills_manager.inventory import (
    global_skills_dir,
    list_global_skill_names,
    load_skill_metadata,
)
from skills_manager.models import AgentDetail, AgentSkill, AgentSkillStatus

logger = logging.getLogger(__name__)


def resolve_agent_detail(home: Path, agent_id: str) -> AgentDetail:
    if find_agent_definition(agent_id) is None:
        raise AgentNotFoundError(agent_id)
    agent = next(item for item in detect_agents(home) if item.id == agent_id)

    global_names = set(list_global_skill_names(home))
    skills: list[AgentSkill] = []
    seen: set[str] = set()

    if agent.detected:
        for entry in list_visible_entries(agent_skills_dir(home, agent)):
            skill = _installed_skill(entry, in_global=entry.name in global_names)
            if skill is None:
                continue
            skills.append(skill)
            seen.add(skill.name)

    global_root = global_skills_dir(home)
    for name in global_names - seen:
        skills.append(
            AgentSkill(
                name=name,
                metadata=load_skill_metadata(global_root / name, name),
                status=AgentSkillStatus.NOT_INSTALLED,
                source_path=None,
                in_global=True,
            )
        )

    skills.sort(key=lambda item: item.name)
    return AgentDetail(agent=agent, skills=skills)


def _installed_skill(entry: Path, in_global: bool) -> AgentSkill | None:
    name = entry.name
    kind = entry_kind(entry)
    if kind == EntryKind.SYMLINK:
        try:
            target = read_link_target(entry)
        except OSError:
            target = "unknown"
        return AgentSkill(
            name=name,
            metadata=load_skill_metadata(_resolve_or_self(entry), name),
            status=AgentSkillStatus.SYMLINK,
            source_path=target,
            in_global=in_global,
        )
    if kind == EntryKind.DIRECTORY:
        return AgentSkill(
            name=name,
            metadata=load_skill_metadata(entry, name),
            status=AgentSkillStatus.LOCAL,
            source_path=str(entry.absolute()),
            in_global=in_global,
        )
    return None


def _resolve_or_self(entry: Path) -> Path:
    try:
        return entry.resolve(strict=True)
    except (OSError, RuntimeError):
        logger.debug("Dangling symlink, loading metadata from link path: %s", entry)
        return entry
