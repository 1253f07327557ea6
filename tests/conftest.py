import sys
from pathlib import Path
from typing import Any, Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from skills_manager.constants import HOME_ENV_VAR  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv(HOME_ENV_VAR, raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def home(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def global_root(home: Path) -> Path:
    return home / ".agents" / "skills"


@pytest.fixture
def create_global_skill(global_root: Path) -> Callable[..., Path]:
    def _create(name: str, descriptor: str | None = None) -> Path:
        skill_dir = global_root / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        if descriptor is not None:
            (skill_dir / "SKILL.md").write_text(descriptor, encoding="utf-8")
        return skill_dir

    return _create


@pytest.fixture
def agent_dir(home: Path) -> Callable[[str], Path]:
    from skills_manager.catalog import AGENT_CATALOG

    paths = {definition.id: definition.relative_path for definition in AGENT_CATALOG}

    def _path_for(agent_id: str) -> Path:
        return home / paths[agent_id]

    return _path_for


@pytest.fixture
def detect(agent_dir) -> Callable[..., list[Path]]:
    def _detect(*agent_ids: str) -> list[Path]:
        created = []
        for agent_id in agent_ids:
            path = agent_dir(agent_id)
            path.mkdir(parents=True, exist_ok=True)
            created.append(path)
        return created

    return _detect


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault(HOME_ENV_VAR, str(tmp_path))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
