from pathlib import Path

from skills_manager.catalog import AGENT_CATALOG
from skills_manager.filesystem import path_exists
from skills_manager.models import Agent, AgentDefinition


def agent_skills_dir(home: Path, definition: AgentDefinition | Agent) -> Path:
    return home / definition.relative_path


def detect_agents(home: Path) -> list[Agent]:
    return [
        Agent(
            id=definition.id,
            display_name=definition.display_name,
            relative_path=definition.relative_path,
            detected=path_exists(agent_skills_dir(home, definition)),
        )
        for definition in AGENT_CATALOG
    ]
