from pathlib import Path

import pytest

from skills_manager.catalog import AGENT_CATALOG, AGENT_IDS, find_agent_definition
from skills_manager.detection import detect_agents


def test_catalog_has_unique_ids_and_paths() -> None:
    assert len(AGENT_CATALOG) == 27
    assert len(set(AGENT_IDS)) == len(AGENT_IDS)
    assert len({item.relative_path for item in AGENT_CATALOG}) == len(AGENT_CATALOG)
    for item in AGENT_CATALOG:
        assert item.id and item.display_name
        assert not item.relative_path.startswith("/")


def test_find_agent_definition() -> None:
    cursor = find_agent_definition("cursor")
    assert cursor is not None
    assert cursor.relative_path == ".cursor/skills"
    assert find_agent_definition("nope") is None


def test_no_agents_detected_in_empty_home(home: Path) -> None:
    agents = detect_agents(home)

    assert [agent.id for agent in agents] == list(AGENT_IDS)
    assert not any(agent.detected for agent in agents)


def test_nested_agent_paths_are_detected(home: Path, detect) -> None:
    detect("antigravity", "windsurf", "pi")

    detected = {agent.id for agent in detect_agents(home) if agent.detected}

    assert detected == {"antigravity", "windsurf", "pi"}


def test_parent_directory_alone_does_not_detect(home: Path) -> None:
    (home / ".gemini").mkdir()

    detected = {agent.id for agent in detect_agents(home) if agent.detected}

    assert "gemini-cli" not in detected
    assert "antigravity" not in detected


def test_symlinked_agent_directory_counts_as_detected(home: Path, agent_dir) -> None:
    real = home / "elsewhere"
    real.mkdir()
    link = agent_dir("cursor")
    link.parent.mkdir(parents=True)
    link.symlink_to(real)

    detected = {agent.id for agent in detect_agents(home) if agent.detected}

    assert detected == {"cursor"}


@pytest.mark.parametrize(
    "subset",
    [
        (),
        ("cursor",),
        ("amp", "opencode", "crush", "goose"),
        AGENT_IDS[::2],
        AGENT_IDS[1::3],
        AGENT_IDS,
    ],
)
def test_detection_matches_created_directories(home: Path, detect, subset) -> None:
    detect(*subset)

    agents = detect_agents(home)

    assert {agent.id for agent in agents if agent.detected} == set(subset)
    assert [agent.id for agent in agents] == list(AGENT_IDS)
