import logging
import os
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

from skills_manager.constants import HOME_ENV_VAR


def resolve_home(explicit: Optional[Path] = None) -> Path:
    if explicit is not None:
        return explicit.expanduser().absolute()
    from_env = os.environ.get(HOME_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser().absolute()
    return Path.home()


def compact_home_path(path: str | Path, home: Optional[Path] = None) -> str:
    text = str(path)
    root = str(home if home is not None else Path.home())
    if text == root:
        return "~"
    home_prefix = f"{root}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str, home: Optional[Path] = None) -> str:
    root = str(home if home is not None else Path.home())
    if text == root:
        return "~"
    return text.replace(f"{root}/", "~/")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )
