"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKILLPLANT"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SKILLPLANT",
    "     // path-safe skill installs for coding agents",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} skill installer"))
