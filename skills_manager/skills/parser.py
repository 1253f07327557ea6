"""Parse and format SKILL.md descriptors.

Two input formats are understood: YAML frontmatter between ``---`` lines, and a
heading-based layout used when no usable frontmatter is found. Output is always
frontmatter.
"""

from __future__ import annotations

from typing import Any, Optional

import yaml

from skills_manager.skills.models import SkillMetadata

_DELIMITER = "---"
_CLOSING_MARKER = "\n---"
_ALLOWED_TOOLS_KEY = "allowed-tools"
_ALLOWED_TOOLS_HEADING = "allowed tools"
_LIST_MARKERS = ("- ", "* ")
_NULL_TAG = "tag:yaml.org,2002:null"

_SPECIAL_CHARS = frozenset(":#[]{},&*!|>'\"%@`")
_SPECIAL_LEADING = frozenset("-? ")
_RESERVED_WORDS = frozenset({"true", "false", "yes", "no", "on", "off", "null", "~"})
_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
# Line separators and characters YAML does not accept raw in a document.
_UNICODE_ESCAPED = frozenset("\u2028\u2029\ufeff\ufffe\uffff")


class _FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps every plain scalar except null as a string."""


_FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag == _NULL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_skill_md(text: str) -> SkillMetadata:
    metadata = _parse_frontmatter(text)
    if metadata is not None:
        return metadata
    return _parse_heading_format(text)


def format_skill_md(metadata: SkillMetadata) -> str:
    lines = [
        _DELIMITER,
        f"name: {_format_scalar(metadata.name)}",
        f"description: {_format_scalar(metadata.description)}",
    ]
    if metadata.allowed_tools:
        lines.append(f"{_ALLOWED_TOOLS_KEY}:")
        for tool in metadata.allowed_tools:
            # A bare "- " item loads as null, so empty entries are always quoted.
            value = _quote(tool) if not tool else _format_scalar(tool)
            lines.append(f"  - {value}")
    lines.append(_DELIMITER)
    return "\n".join(lines) + "\n"


def _parse_frontmatter(text: str) -> Optional[SkillMetadata]:
    trimmed = text.lstrip()
    first_line, newline, rest = trimmed.partition("\n")
    if first_line.rstrip("\r") != _DELIMITER:
        return None

    after_opening = newline + rest
    closing = after_opening.find(_CLOSING_MARKER)
    if closing < 0:
        return None

    try:
        raw = yaml.load(after_opening[:closing], Loader=_FrontmatterLoader)
    except yaml.YAMLError:
        return None
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        return None

    name = raw.get("name")
    description = raw.get("description")
    tools = raw.get(_ALLOWED_TOOLS_KEY)
    if not _is_optional_str(name) or not _is_optional_str(description):
        return None
    if tools is not None and not _is_str_list(tools):
        return None

    return SkillMetadata(
        name=name or "",
        description=description or "",
        allowed_tools=list(tools or []),
    )


def _parse_heading_format(text: str) -> SkillMetadata:
    lines = [line.strip() for line in text.split("\n")]
    total = len(lines)
    index = 0

    name = ""
    while index < total:
        line = lines[index]
        index += 1
        if line.startswith("# "):
            name = line[2:].strip()
            break

    while index < total and not lines[index]:
        index += 1

    description_lines: list[str] = []
    while index < total and lines[index] and not lines[index].startswith("#"):
        description_lines.append(lines[index])
        index += 1

    allowed_tools: list[str] = []
    while index < total:
        line = lines[index]
        index += 1
        if line.startswith("#") and _ALLOWED_TOOLS_HEADING in line.lower():
            allowed_tools = _collect_list_items(lines[index:])
            break

    return SkillMetadata(
        name=name,
        description=" ".join(description_lines),
        allowed_tools=allowed_tools,
    )


def _collect_list_items(lines: list[str]) -> list[str]:
    items: list[str] = []
    for line in lines:
        if line.startswith("#"):
            break
        if line.startswith(_LIST_MARKERS):
            item = line[2:].strip()
            if item:
                items.append(item)
    return items


def _is_optional_str(value: Any) -> bool:
    return value is None or isinstance(value, str)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _format_scalar(value: str) -> str:
    if _needs_quoting(value):
        return _quote(value)
    return value


def _needs_quoting(value: str) -> bool:
    if not value:
        return False
    if any(char in _SPECIAL_CHARS for char in value):
        return True
    if value[0] in _SPECIAL_LEADING:
        return True
    if value.lower() in _RESERVED_WORDS:
        return True
    return not _loads_as_itself(value)


def _loads_as_itself(value: str) -> bool:
    """True when YAML reads the bare value back as the identical string."""
    try:
        return yaml.safe_load(value) == value
    except yaml.YAMLError:
        return False


def _quote(value: str) -> str:
    escaped = "".join(_escape_char(char) for char in value)
    return f'"{escaped}"'


def _escape_char(char: str) -> str:
    if char in _ESCAPES:
        return _ESCAPES[char]
    code = ord(char)
    if code < 0x20 or 0x7F <= code <= 0x9F:
        return f"\\x{code:02x}"
    if char in _UNICODE_ESCAPED or 0xD800 <= code <= 0xDFFF:
        return f"\\u{code:04x}"
    return char
