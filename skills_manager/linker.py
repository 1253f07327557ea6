"""Create and remove skill symlinks in agent directories.

Batch operations never stop at the first agent failure. Each agent's outcome is
recorded in the returned :class:`BatchResult` and whatever already succeeded
stays in place.
"""

import logging
import os
from pathlib import Path

from skills_manager.catalog import AGENT_CATALOG, find_agent_definition
from skills_manager.detection import agent_skills_dir, detect_agents
from skills_manager.errors import (
    AgentNotFoundError,
    AlreadyExistsError,
    GlobalSkillMissingError,
    InvalidSkillNameError,
    IsSymlinkError,
    LinkFailureError,
    NotADirectoryPathError,
    SkillIOError,
    SkillNotFoundError,
)
from skills_manager.filesystem import (
    EntryKind,
    copy_tree,
    entry_kind,
    path_exists,
    remove_tree,
)
from skills_manager.inventory import global_skills_dir
from skills_manager.models import AgentDefinition, BatchResult, FailedOperation

logger = logging.getLogger(__name__)

TARGET_OCCUPIED_ERROR = "A file or directory already exists at the target path"


def toggle_skill(home: Path, agent_id: str, skill_name: str, enable: bool) -> None:
    _require_skill_name(skill_name)
    definition = _require_agent(agent_id)
    agent_skill_path = agent_skills_dir(home, definition) / skill_name

    if enable:
        global_skill_path = _require_global_skill(home, skill_name)
        try:
            agent_skill_path.parent.mkdir(parents=True, exist_ok=True)
            agent_skill_path.symlink_to(global_skill_path)
        except OSError as exc:
            raise LinkFailureError(agent_skill_path, str(exc)) from exc
        logger.info("Linked %s -> %s", agent_skill_path, global_skill_path)
        return

    if entry_kind(agent_skill_path) == EntryKind.MISSING:
        logger.debug("Nothing to unlink at %s", agent_skill_path)
        return
    try:
        agent_skill_path.unlink()
    except OSError as exc:
        raise LinkFailureError(
            agent_skill_path, str(exc), action="Failed to unlink"
        ) from exc
    logger.info("Unlinked %s", agent_skill_path)


def link_skill_to_all(home: Path, skill_name: str) -> BatchResult:
    _require_skill_name(skill_name)
    global_skill_path = _require_global_skill(home, skill_name)
    result = BatchResult()

    for agent in detect_agents(home):
        if not agent.detected:
            continue

        target = agent_skills_dir(home, agent) / skill_name
        kind = entry_kind(target)
        if kind == EntryKind.SYMLINK:
            result.success.append(agent.id)
            continue
        if kind != EntryKind.MISSING:
            result.failed.append(FailedOperation(agent.id, TARGET_OCCUPIED_ERROR))
            continue

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            result.failed.append(
                FailedOperation(agent.id, f"Failed to create parent directory: {exc}")
            )
            continue

        try:
            target.symlink_to(global_skill_path)
        except OSError as exc:
            result.failed.append(
                FailedOperation(agent.id, f"Failed to create symlink: {exc}")
            )
            continue
        logger.info("Linked %s -> %s", target, global_skill_path)
        result.success.append(agent.id)

    return result


def unlink_skill_from_all(home: Path, skill_name: str) -> BatchResult:
    _require_skill_name(skill_name)
    result = BatchResult()

    for definition in AGENT_CATALOG:
        target = agent_skills_dir(home, definition) / skill_name
        kind = entry_kind(target)
        if kind == EntryKind.MISSING:
            continue
        if kind != EntryKind.SYMLINK:
            logger.debug("Leaving non-symlink entry untouched: %s", target)
            continue

        try:
            target.unlink()
        except OSError as exc:
            result.failed.append(
                FailedOperation(definition.id, f"Failed to remove symlink: {exc}")
            )
            continue
        logger.info("Unlinked %s", target)
        result.success.append(definition.id)

    return result


def promote_local_to_global(home: Path, agent_id: str, skill_name: str) -> Path:
    _require_skill_name(skill_name)
    definition = _require_agent(agent_id)
    local_skill_path = _require_local_skill(home, definition, skill_name)

    global_root = global_skills_dir(home)
    global_skill_path = global_root / skill_name
    if entry_kind(global_skill_path) != EntryKind.MISSING:
        raise AlreadyExistsError(global_skill_path)

    try:
        global_root.mkdir(parents=True, exist_ok=True)
        copy_tree(local_skill_path, global_skill_path)
    except OSError as exc:
        raise SkillIOError(
            global_skill_path, str(exc), action="Failed to copy skill"
        ) from exc
    logger.info("Promoted %s to %s", local_skill_path, global_skill_path)
    return global_skill_path


def delete_local_skill(home: Path, agent_id: str, skill_name: str) -> None:
    _require_skill_name(skill_name)
    definition = _require_agent(agent_id)
    local_skill_path = _require_local_skill(home, definition, skill_name)
    try:
        remove_tree(local_skill_path)
    except OSError as exc:
        raise SkillIOError(
            local_skill_path, str(exc), action="Failed to delete directory"
        ) from exc
    logger.info("Deleted local skill %s", local_skill_path)


def _require_skill_name(skill_name: str) -> None:
    """Reject names that are not a single visible entry of a skills directory."""
    separators = {"/", "\0", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if (
        not skill_name
        or skill_name.startswith(".")
        or any(char in separators for char in skill_name)
    ):
        raise InvalidSkillNameError(skill_name)


def _require_agent(agent_id: str) -> AgentDefinition:
    definition = find_agent_definition(agent_id)
    if definition is None:
        raise AgentNotFoundError(agent_id)
    return definition


def _require_global_skill(home: Path, skill_name: str) -> Path:
    global_skill_path = global_skills_dir(home) / skill_name
    if not path_exists(global_skill_path):
        raise GlobalSkillMissingError(skill_name)
    return global_skill_path.absolute()


def _require_local_skill(
    home: Path, definition: AgentDefinition, skill_name: str
) -> Path:
    local_skill_path = agent_skills_dir(home, definition) / skill_name
    kind = entry_kind(local_skill_path)
    if kind == EntryKind.SYMLINK:
        raise IsSymlinkError(local_skill_path)
    if kind == EntryKind.MISSING:
        raise SkillNotFoundError(local_skill_path)
    if kind != EntryKind.DIRECTORY:
        raise NotADirectoryPathError(local_skill_path)
    return local_skill_path
