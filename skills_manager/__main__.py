import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import click
from rich.console import Console

from skills_manager.agent_detail import resolve_agent_detail
from skills_manager.catalog import AGENT_IDS
from skills_manager.constants import HOME_ENV_VAR
from skills_manager.errors import SkillsManagerError
from skills_manager.inventory import find_skill, scan_inventory
from skills_manager.linker import (
    delete_local_skill,
    link_skill_to_all,
    promote_local_to_global,
    toggle_skill,
    unlink_skill_from_all,
)
from skills_manager.skills.parser import format_skill_md
from skills_manager.tui import SkillsConsoleUI
from skills_manager.utils import configure_logging, resolve_home


def _agent_argument() -> Callable:
    return click.argument(
        "agent_id",
        metavar="AGENT",
        type=click.Choice(AGENT_IDS, case_sensitive=False),
    )


def _json_option() -> Callable:
    return click.option(
        "--json", "as_json", is_flag=True, help="Print machine-readable JSON."
    )


def _home_from_obj(obj: Dict[str, Any]) -> Path:
    return obj["home"]


def _ui_from_obj(obj: Dict[str, Any]) -> SkillsConsoleUI:
    return SkillsConsoleUI(Console(), home=_home_from_obj(obj))


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


def _run(operation: Callable[[], Any]) -> Any:
    try:
        return operation()
    except SkillsManagerError as exc:
        raise click.ClickException(str(exc))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--home",
    type=click.Path(path_type=Path, file_okay=False),
    envvar=HOME_ENV_VAR,
    default=None,
    help=f"Home root holding agent and skill directories (env: {HOME_ENV_VAR}).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log filesystem changes.")
@click.pass_context
def cli(ctx: click.Context, home: Optional[Path], verbose: bool) -> None:
    """Share one skills repository with every coding agent via symlinks."""
    configure_logging(verbose)
    ctx.obj = {"home": resolve_home(home)}


@cli.command(help="List known agents and whether they are detected.")
@_json_option()
@click.pass_obj
def agents(obj: Dict[str, Any], as_json: bool) -> None:
    inventory = scan_inventory(_home_from_obj(obj))
    if as_json:
        _echo_json([agent.as_dict() for agent in inventory.agents])
        return
    _ui_from_obj(obj).render_agents(inventory)


@cli.command("list", help="List global skills and where they are installed.")
@_json_option()
@click.pass_obj
def list_skills(obj: Dict[str, Any], as_json: bool) -> None:
    inventory = scan_inventory(_home_from_obj(obj))
    if as_json:
        _echo_json(inventory.as_dict())
        return
    _ui_from_obj(obj).render_inventory(inventory)


@cli.command(help="Show one global skill.")
@click.argument("skill_name", metavar="SKILL")
@click.option(
    "--frontmatter",
    is_flag=True,
    help="Print the skill metadata as canonical SKILL.md frontmatter.",
)
@click.pass_obj
def show(obj: Dict[str, Any], skill_name: str, frontmatter: bool) -> None:
    home = _home_from_obj(obj)
    skill = _run(lambda: find_skill(home, skill_name))
    if frontmatter:
        click.echo(format_skill_md(skill.metadata), nl=False)
        return
    _ui_from_obj(obj).render_skill(skill, scan_inventory(home))


@cli.command(help="Show every skill visible to one agent.")
@_agent_argument()
@_json_option()
@click.pass_obj
def agent(obj: Dict[str, Any], agent_id: str, as_json: bool) -> None:
    detail = _run(lambda: resolve_agent_detail(_home_from_obj(obj), agent_id.lower()))
    if as_json:
        _echo_json(detail.as_dict())
        return
    _ui_from_obj(obj).render_agent_detail(detail)


@cli.command(help="Link a global skill into one agent.")
@_agent_argument()
@click.argument("skill_name", metavar="SKILL")
@click.pass_obj
def link(obj: Dict[str, Any], agent_id: str, skill_name: str) -> None:
    agent_id = agent_id.lower()
    _run(lambda: toggle_skill(_home_from_obj(obj), agent_id, skill_name, enable=True))
    _ui_from_obj(obj).render_done("link", f"Linked {skill_name} into {agent_id}.")


@cli.command(help="Remove a skill entry from one agent.")
@_agent_argument()
@click.argument("skill_name", metavar="SKILL")
@click.pass_obj
def unlink(obj: Dict[str, Any], agent_id: str, skill_name: str) -> None:
    agent_id = agent_id.lower()
    _run(lambda: toggle_skill(_home_from_obj(obj), agent_id, skill_name, enable=False))
    _ui_from_obj(obj).render_done("unlink", f"Unlinked {skill_name} from {agent_id}.")


@cli.command("link-all", help="Link a global skill into every detected agent.")
@click.argument("skill_name", metavar="SKILL")
@_json_option()
@click.pass_obj
def link_all(obj: Dict[str, Any], skill_name: str, as_json: bool) -> None:
    result = _run(lambda: link_skill_to_all(_home_from_obj(obj), skill_name))
    if as_json:
        _echo_json(result.as_dict())
    else:
        _ui_from_obj(obj).render_batch_result("link-all", skill_name, result)
    if result.failed:
        raise click.exceptions.Exit(1)


@cli.command("unlink-all", help="Remove a skill's symlinks from every agent.")
@click.argument("skill_name", metavar="SKILL")
@_json_option()
@click.pass_obj
def unlink_all(obj: Dict[str, Any], skill_name: str, as_json: bool) -> None:
    result = _run(lambda: unlink_skill_from_all(_home_from_obj(obj), skill_name))
    if as_json:
        _echo_json(result.as_dict())
    else:
        _ui_from_obj(obj).render_batch_result("unlink-all", skill_name, result)
    if result.failed:
        raise click.exceptions.Exit(1)


@cli.command("delete-local", help="Delete a local (non-symlink) skill from an agent.")
@_agent_argument()
@click.argument("skill_name", metavar="SKILL")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def delete_local(obj: Dict[str, Any], agent_id: str, skill_name: str, yes: bool) -> None:
    agent_id = agent_id.lower()
    if not yes:
        click.confirm(
            f"Delete local skill '{skill_name}' from {agent_id}?", abort=True
        )
    _run(lambda: delete_local_skill(_home_from_obj(obj), agent_id, skill_name))
    _ui_from_obj(obj).render_done("delete", f"Deleted {skill_name} from {agent_id}.")


@cli.command(help="Copy a local agent skill into the global skills directory.")
@_agent_argument()
@click.argument("skill_name", metavar="SKILL")
@click.pass_obj
def promote(obj: Dict[str, Any], agent_id: str, skill_name: str) -> None:
    agent_id = agent_id.lower()
    target = _run(
        lambda: promote_local_to_global(_home_from_obj(obj), agent_id, skill_name)
    )
    _ui_from_obj(obj).render_done(
        "promote", f"Copied {skill_name} from {agent_id} to global skills.", path=target
    )


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
