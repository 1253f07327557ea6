from enum import Enum

from skills_manager.models import AgentSkillStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


AGENT_SKILL_STATUS_STYLE = {
    AgentSkillStatus.SYMLINK: UIStyle.GREEN.value,
    AgentSkillStatus.LOCAL: UIStyle.CYAN.value,
    AgentSkillStatus.NOT_INSTALLED: UIStyle.DIM.value,
}
