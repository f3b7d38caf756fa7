"""JSON output schema for install results."""

from __future__ import annotations

from skillplant.types import JsonObject

INSTALL_RESULT_SCHEMA: JsonObject = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["success", "path"],
    "additionalProperties": False,
    "properties": {
        "agent": {"type": "string"},
        "success": {"type": "boolean"},
        "path": {"type": "string"},
        "error": {"type": "string", "minLength": 1},
    },
}
