from pathlib import Path

import pytest

from skills_manager.constants import NO_DESCRIPTION_PLACEHOLDER
from skills_manager.errors import GlobalSkillMissingError
from skills_manager.inventory import (
    find_skill,
    list_global_skill_names,
    load_skill_metadata,
    scan_inventory,
)
from skills_manager.skills.models import SkillMetadata


# --- load_skill_metadata ---


def test_load_metadata_from_frontmatter(create_global_skill) -> None:
    skill_dir = create_global_skill(
        "reviewer",
        "---\nname: Code Reviewer\ndescription: Reviews code\nallowed-tools:\n  - Read\n---\n",
    )

    metadata = load_skill_metadata(skill_dir, "reviewer")

    assert metadata == SkillMetadata(
        name="Code Reviewer", description="Reviews code", allowed_tools=["Read"]
    )


def test_load_metadata_from_headings(create_global_skill) -> None:
    skill_dir = create_global_skill(
        "heading",
        "# Heading Skill\n\nFrom a heading.\n\n## Allowed Tools\n- Bash\n",
    )

    metadata = load_skill_metadata(skill_dir, "heading")

    assert metadata == SkillMetadata(
        name="Heading Skill", description="From a heading.", allowed_tools=["Bash"]
    )


def test_missing_descriptor_uses_both_fallbacks(create_global_skill) -> None:
    skill_dir = create_global_skill("bare")

    metadata = load_skill_metadata(skill_dir, "bare")

    assert metadata == SkillMetadata(name="bare", description=NO_DESCRIPTION_PLACEHOLDER)


def test_empty_name_falls_back_to_directory_name(create_global_skill) -> None:
    skill_dir = create_global_skill("dir-name", "---\ndescription: Kept\n---\n")

    metadata = load_skill_metadata(skill_dir, "dir-name")

    assert metadata.name == "dir-name"
    assert metadata.description == "Kept"


def test_empty_description_falls_back_to_placeholder(create_global_skill) -> None:
    skill_dir = create_global_skill("named", "---\nname: Kept Name\n---\n")

    metadata = load_skill_metadata(skill_dir, "named")

    assert metadata.name == "Kept Name"
    assert metadata.description == NO_DESCRIPTION_PLACEHOLDER


def test_descriptor_without_heading_gets_both_fallbacks(create_global_skill) -> None:
    skill_dir = create_global_skill("prose", "Just some prose without structure.\n")

    metadata = load_skill_metadata(skill_dir, "prose")

    assert metadata == SkillMetadata(name="prose", description=NO_DESCRIPTION_PLACEHOLDER)


def test_undecodable_descriptor_uses_fallbacks(create_global_skill) -> None:
    skill_dir = create_global_skill("binary")
    (skill_dir / "SKILL.md").write_bytes(b"\xff\xfe\x00garbage")

    metadata = load_skill_metadata(skill_dir, "binary")

    assert metadata == SkillMetadata(name="binary", description=NO_DESCRIPTION_PLACEHOLDER)


# --- scan_inventory ---


def test_scan_with_no_repository(home: Path) -> None:
    inventory = scan_inventory(home)

    assert inventory.skills == []
    assert len(inventory.agents) == 27


def test_scan_skips_hidden_entries_and_files(home: Path, global_root: Path, create_global_skill) -> None:
    create_global_skill("visible")
    create_global_skill(".hidden")
    (global_root / "README.md").write_text("not a skill", encoding="utf-8")

    names = [skill.name for skill in scan_inventory(home).skills]

    assert names == ["visible"]
    assert list_global_skill_names(home) == ["visible"]


def test_scan_classifies_symlinked_and_local_installs(
    home: Path, create_global_skill, detect, agent_dir
) -> None:
    source = create_global_skill("shared", "---\nname: Shared\ndescription: d\n---\n")
    detect("cursor", "codex", "claude-code", "goose")
    (agent_dir("cursor") / "shared").symlink_to(source)
    (agent_dir("codex") / "shared").mkdir()
    (agent_dir("claude-code") / "shared").write_text("a file", encoding="utf-8")

    inventory = scan_inventory(home)

    [skill] = inventory.skills
    assert skill.name == "shared"
    assert skill.metadata.name == "Shared"
    assert skill.linked_agents == ["codex", "cursor"]
    assert skill.symlinked_agents == ["cursor"]
    assert set(skill.symlinked_agents) <= set(skill.linked_agents)


def test_scan_counts_broken_symlinks(home: Path, create_global_skill, detect, agent_dir) -> None:
    create_global_skill("gone")
    detect("cursor")
    (agent_dir("cursor") / "gone").symlink_to(home / "does-not-exist")

    [skill] = scan_inventory(home).skills

    assert skill.symlinked_agents == ["cursor"]


def test_scan_never_inspects_undetected_agents(home: Path, create_global_skill, agent_dir) -> None:
    create_global_skill("orphan")
    dangling = agent_dir("cursor")
    dangling.parent.mkdir(parents=True)
    dangling.symlink_to(home / "missing-target")

    [skill] = scan_inventory(home).skills

    assert skill.linked_agents == []
    assert skill.symlinked_agents == []


def test_find_skill(home: Path, create_global_skill) -> None:
    create_global_skill("present")

    assert find_skill(home, "present").name == "present"
    with pytest.raises(GlobalSkillMissingError):
        find_skill(home, "absent")
