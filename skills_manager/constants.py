from typing import Final


SKILL_FILENAME: Final[str] = "SKILL.md"
GLOBAL_SKILLS_RELATIVE_PATH: Final[str] = ".agents/skills"
NO_DESCRIPTION_PLACEHOLDER: Final[str] = "No description available"

HOME_ENV_VAR: Final[str] = "SKILLS_MANAGER_HOME"
