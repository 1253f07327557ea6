from typing import Final, Optional

from skills_manager.models import AgentDefinition


AGENT_CATALOG: Final[tuple[AgentDefinition, ...]] = (
    AgentDefinition("amp", "Amp", ".config/agents/skills"),
    AgentDefinition("antigravity", "Antigravity", ".gemini/antigravity/global_skills"),
    AgentDefinition("claude-code", "Claude Code", ".claude/skills"),
    AgentDefinition("clawdbot", "Clawdbot", ".clawdbot/skills"),
    AgentDefinition("cline", "Cline", ".cline/skills"),
    AgentDefinition("codex", "Codex", ".codex/skills"),
    AgentDefinition("command-code", "Command Code", ".commandcode/skills"),
    AgentDefinition("continue", "Continue", ".continue/skills"),
    AgentDefinition("crush", "Crush", ".config/crush/skills"),
    AgentDefinition("cursor", "Cursor", ".cursor/skills"),
    AgentDefinition("droid", "Droid", ".factory/skills"),
    AgentDefinition("gemini-cli", "Gemini CLI", ".gemini/skills"),
    AgentDefinition("github-copilot", "GitHub Copilot", ".copilot/skills"),
    AgentDefinition("goose", "Goose", ".config/goose/skills"),
    AgentDefinition("kilo-code", "Kilo Code", ".kilocode/skills"),
    AgentDefinition("kiro-cli", "Kiro CLI", ".kiro/skills"),
    AgentDefinition("mcpjam", "MCPJam", ".mcpjam/skills"),
    AgentDefinition("opencode", "OpenCode", ".config/opencode/skills"),
    AgentDefinition("openhands", "OpenHands", ".openhands/skills"),
    AgentDefinition("pi", "Pi", ".pi/agent/skills"),
    AgentDefinition("qoder", "Qoder", ".qoder/skills"),
    AgentDefinition("qwen-code", "Qwen Code", ".qwen/skills"),
    AgentDefinition("roo-code", "Roo Code", ".roo/skills"),
    AgentDefinition("trae", "Trae", ".trae/skills"),
    AgentDefinition("windsurf", "Windsurf", ".codeium/windsurf/skills"),
    AgentDefinition("zencoder", "Zencoder", ".zencoder/skills"),
    AgentDefinition("neovate", "Neovate", ".neovate/skills"),
)

AGENT_IDS: Final[tuple[str, ...]] = tuple(item.id for item in AGENT_CATALOG)


def find_agent_definition(agent_id: str) -> Optional[AgentDefinition]:
    for definition in AGENT_CATALOG:
        if definition.id == agent_id:
            return definition
    return None
