from skills_manager.tui.renderers import SkillsConsoleUI

__all__ = ["SkillsConsoleUI"]
