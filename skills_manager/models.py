from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from skills_manager.skills.models import SkillMetadata


class AgentSkillStatus(str, Enum):
    SYMLINK = "symlink"
    LOCAL = "local"
    NOT_INSTALLED = "not_installed"


@dataclass(frozen=True)
class AgentDefinition:
    id: str
    display_name: str
    relative_path: str


@dataclass(frozen=True)
class Agent:
    id: str
    display_name: str
    relative_path: str
    detected: bool

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.display_name,
            "path": self.relative_path,
            "detected": self.detected,
        }


@dataclass(frozen=True)
class Skill:
    name: str
    metadata: SkillMetadata
    linked_agents: list[str] = field(default_factory=list)
    symlinked_agents: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "metadata": self.metadata.as_dict(),
            "linked_agents": list(self.linked_agents),
            "symlinked_agents": list(self.symlinked_agents),
        }


@dataclass(frozen=True)
class AgentSkill:
    name: str
    metadata: SkillMetadata
    status: AgentSkillStatus
    source_path: Optional[str]
    in_global: bool

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "metadata": self.metadata.as_dict(),
            "status": self.status.value,
            "source_path": self.source_path,
            "in_global": self.in_global,
        }


@dataclass(frozen=True)
class AgentDetail:
    agent: Agent
    skills: list[AgentSkill]

    def as_dict(self) -> dict[str, Any]:
        return {
            "agent": self.agent.as_dict(),
            "skills": [skill.as_dict() for skill in self.skills],
        }


@dataclass(frozen=True)
class Inventory:
    agents: list[Agent]
    skills: list[Skill]

    def detected_agents(self) -> list[Agent]:
        return [agent for agent in self.agents if agent.detected]

    def as_dict(self) -> dict[str, Any]:
        return {
            "agents": [agent.as_dict() for agent in self.agents],
            "skills": [skill.as_dict() for skill in self.skills],
        }


@dataclass(frozen=True)
class FailedOperation:
    agent_id: str
    error: str

    def as_dict(self) -> dict[str, str]:
        return {
            "agent_id": self.agent_id,
            "error": self.error,
        }


@dataclass
class BatchResult:
    success: list[str] = field(default_factory=list)
    failed: list[FailedOperation] = field(default_factory=list)

    def failed_ids(self) -> list[str]:
        return [item.agent_id for item in self.failed]

    def as_dict(self) -> dict[str, Any]:
        return {
            "success": list(self.success),
            "failed": [item.as_dict() for item in self.failed],
        }
