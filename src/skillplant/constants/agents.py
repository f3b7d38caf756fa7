"""Built-in agent skill directory conventions.

Each entry is ``(agent_type, display_name, skills_dir, global_skills_dir)``.
Project directories are relative to the working directory; global
directories are expanded against the user's home at lookup time.
"""

from __future__ import annotations

BUILTIN_AGENTS: tuple[tuple[str, str, str, str], ...] = (
    ("amp", "Amp", ".agents/skills", "~/.config/agents/skills"),
    ("antigravity", "Antigravity", ".agent/skills", "~/.gemini/antigravity/skills"),
    ("claude-code", "Claude Code", ".claude/skills", "~/.claude/skills"),
    ("codex", "Codex", ".codex/skills", "~/.codex/skills"),
    ("cursor", "Cursor", ".cursor/skills", "~/.cursor/skills"),
    ("gemini-cli", "Gemini CLI", ".gemini/skills", "~/.gemini/skills"),
    ("github-copilot", "GitHub Copilot", ".github/skills", "~/.copilot/skills"),
    ("goose", "Goose", ".goose/skills", "~/.config/goose/skills"),
    ("kilo", "Kilo Code", ".kilocode/skills", "~/.kilocode/skills"),
    ("opencode", "OpenCode", ".opencode/skill", "~/.config/opencode/skill"),
    ("roo", "Roo Code", ".roo/skills", "~/.roo/skills"),
    ("windsurf", "Windsurf", ".windsurf/skills", "~/.codeium/windsurf/skills"),
)
