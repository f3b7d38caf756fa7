"""Cross-module type aliases."""

from __future__ import annotations

import os
from typing import TypeAlias

AgentType: TypeAlias = str
StrPath: TypeAlias = str | os.PathLike[str]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
