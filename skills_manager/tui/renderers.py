from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from skills_manager.models import AgentDetail, BatchResult, Inventory, Skill
from skills_manager.tui.enums import UIStyle
from skills_manager.tui.sections import UISection
from skills_manager.tui.tables import (
    AgentSkillsTable,
    AgentsTable,
    BatchTable,
    SkillsTable,
)
from skills_manager.utils import compact_home_path, compact_home_paths_in_text


class SkillsConsoleUI:
    def __init__(self, console: Console | None = None, home: Optional[Path] = None) -> None:
        self.console = console or Console()
        self.home = home

    def render_agents(self, inventory: Inventory) -> None:
        self.console.print(
            UISection.wrap(
                "agents",
                AgentsTable.agents_table(inventory.agents),
                style=UIStyle.BLUE.value,
            )
        )

    def render_inventory(self, inventory: Inventory) -> None:
        self.console.print(
            UISection.wrap(
                "overview",
                SkillsTable.summary_block(inventory),
                style=UIStyle.BLUE.value,
            )
        )
        if not inventory.skills:
            self.console.print(
                UISection.note(
                    "skills",
                    "No skills found in the global skills directory.",
                    style=UIStyle.YELLOW.value,
                )
            )
            return

        self.console.print(
            UISection.wrap(
                "global skills",
                SkillsTable.skills_table(inventory.skills),
                style=UIStyle.CYAN.value,
            )
        )

    def render_skill(self, skill: Skill, inventory: Inventory) -> None:
        self.console.print(
            UISection.wrap(
                escape(skill.name),
                SkillsTable.skill_detail(skill, inventory.agents),
                style=UIStyle.CYAN.value,
            )
        )

    def render_agent_detail(self, detail: AgentDetail) -> None:
        agent = detail.agent
        state = "detected" if agent.detected else "not detected"
        location = compact_home_path(self._agent_dir(agent.relative_path), self.home)
        subtitle = f"{escape(location)} ({state})"
        if not detail.skills:
            self.console.print(
                UISection.note(
                    agent.display_name,
                    "No skills installed or available.",
                    style=UIStyle.YELLOW.value,
                )
            )
            return

        self.console.print(
            UISection.wrap(
                agent.display_name,
                AgentSkillsTable.skills_table(detail.skills),
                style=UIStyle.BLUE.value if agent.detected else UIStyle.DIM.value,
                subtitle=subtitle,
            )
        )

    def render_batch_result(self, mode: str, skill_name: str, result: BatchResult) -> None:
        self.console.print(
            UISection.wrap(
                f"{mode}: {escape(skill_name)}",
                BatchTable.stats_panel_body(result),
                style=UIStyle.GREEN.value if not result.failed else UIStyle.RED.value,
            )
        )
        if not result.success and not result.failed:
            self.console.print(
                UISection.note("agents", "No agents were affected.", style=UIStyle.DIM.value)
            )
        if result.failed:
            self.console.print(
                UISection.bullets(
                    "failures",
                    [
                        f"{item.agent_id}: {escape(compact_home_paths_in_text(item.error, self.home))}"
                        for item in result.failed
                    ],
                    style=UIStyle.RED.value,
                )
            )

    def render_done(self, title: str, message: str, path: Optional[Path] = None) -> None:
        body = escape(message)
        if path is not None:
            body = f"{body}\n{escape(compact_home_path(path, self.home))}"
        self.console.print(UISection.note(title, body, style=UIStyle.GREEN.value))

    def _agent_dir(self, relative_path: str) -> Path:
        root = self.home if self.home is not None else Path.home()
        return root / relative_path
