from pathlib import Path


class SkillsManagerError(Exception):
    """Base user-facing application error."""


class AgentNotFoundError(SkillsManagerError):
    def __init__(self, agent_id: str) -> None:
        self.agent_id = agent_id
        super().__init__(f"Agent '{agent_id}' not found")


class GlobalSkillMissingError(SkillsManagerError):
    def __init__(self, skill_name: str) -> None:
        self.skill_name = skill_name
        super().__init__(f"Global skill '{skill_name}' does not exist")


class SkillPathError(SkillsManagerError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class AlreadyExistsError(SkillPathError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Skill already exists in global skills")


class IsSymlinkError(SkillPathError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Path is a symlink, not a local skill")


class NotADirectoryPathError(SkillPathError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Path is not a directory")


class SkillNotFoundError(SkillPathError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Skill directory not found")


class SkillIOError(SkillPathError):
    def __init__(self, path: Path, detail: str, action: str = "Filesystem operation failed") -> None:
        self.detail = detail
        super().__init__(path=path, message=f"{action} ({detail})")


class LinkFailureError(SkillIOError):
    def __init__(self, path: Path, detail: str, action: str = "Failed to link") -> None:
        super().__init__(path=path, detail=detail, action=action)


class InvalidSkillNameError(SkillsManagerError):
    def __init__(self, skill_name: str) -> None:
        self.skill_name = skill_name
        super().__init__(f"Invalid skill name '{skill_name}'")
