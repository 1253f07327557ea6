from rich.markup import escape
from rich.table import Column, Table

from skills_manager.models import Agent, AgentSkill, BatchResult, Inventory, Skill
from skills_manager.tui.enums import AGENT_SKILL_STATUS_STYLE, UIStyle


class AgentsTable:
    @staticmethod
    def agents_table(agents: list[Agent]) -> Table:
        table = Table(
            Column(header="Agent", width=16),
            Column(header="Name", width=16),
            Column(header="Status", width=14),
            Column(header="Path", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for agent in agents:
            if agent.detected:
                status = f"[{UIStyle.GREEN.value}]detected[/{UIStyle.GREEN.value}]"
            else:
                status = f"[{UIStyle.DIM.value}]not detected[/{UIStyle.DIM.value}]"
            table.add_row(agent.id, agent.display_name, status, f"~/{agent.relative_path}")
        return table


class SkillsTable:
    @staticmethod
    def summary_block(inventory: Inventory):
        detected = inventory.detected_agents()
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Skills", str(len(inventory.skills)))
        table.add_row("Agents", f"{len(detected)} detected of {len(inventory.agents)}")
        return table

    @staticmethod
    def skills_table(skills: list[Skill]) -> Table:
        table = Table(
            Column(header="Skill", width=24),
            Column(header="Description", overflow="ellipsis"),
            Column(header="Linked", width=8, justify="right"),
            Column(header="Local", width=8, justify="right"),
            expand=True,
            header_style="bold",
        )
        for skill in sorted(skills, key=lambda item: item.name):
            local_count = len(skill.linked_agents) - len(skill.symlinked_agents)
            table.add_row(
                escape(skill.name),
                escape(skill.metadata.description),
                str(len(skill.symlinked_agents)),
                str(local_count),
            )
        return table

    @staticmethod
    def skill_detail(skill: Skill, agents: list[Agent]):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column(overflow="fold")
        table.add_row("Directory", escape(skill.name))
        table.add_row("Name", escape(skill.metadata.name))
        table.add_row("Description", escape(skill.metadata.description))
        table.add_row("Allowed tools", escape(", ".join(skill.metadata.allowed_tools)) or "-")

        symlinked = set(skill.symlinked_agents)
        linked = set(skill.linked_agents)
        rows = []
        for agent in agents:
            if agent.id in symlinked:
                rows.append(f"{agent.id} (symlink)")
            elif agent.id in linked:
                rows.append(f"{agent.id} (local)")
        table.add_row("Installed in", ", ".join(rows) or "-")
        return table


class AgentSkillsTable:
    @staticmethod
    def skills_table(skills: list[AgentSkill]) -> Table:
        table = Table(
            Column(header="Skill", width=24),
            Column(header="Status", width=14),
            Column(header="Global", width=7),
            Column(header="Source", overflow="ellipsis", max_width=48),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for skill in skills:
            style = AGENT_SKILL_STATUS_STYLE.get(skill.status, UIStyle.WHITE.value)
            table.add_row(
                escape(skill.name),
                f"[{style}]{skill.status.value}[/{style}]",
                "yes" if skill.in_global else "no",
                escape(skill.source_path or ""),
                escape(skill.metadata.description),
            )
        return table


class BatchTable:
    @staticmethod
    def stats_panel_body(result: BatchResult) -> Table:
        table = Table(show_header=False, box=None)
        table.add_row("[bold]success[/bold]", str(len(result.success)))
        table.add_row("[bold]failed[/bold]", str(len(result.failed)))
        if result.success:
            table.add_row("[bold]agents[/bold]", ", ".join(result.success))
        return table
