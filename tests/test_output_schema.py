"""Validate serialized install results against the published JSON schema."""

from __future__ import annotations

from pathlib import Path

import jsonschema
import pytest

from skillplant.constants.reporting import INSTALL_RESULT_SCHEMA
from skillplant.model import InstallResult


def test_schema_is_valid() -> None:
    jsonschema.Draft202012Validator.check_schema(INSTALL_RESULT_SCHEMA)


@pytest.mark.parametrize(
    "result",
    [
        InstallResult(success=True, path=Path("/skills/notes")),
        InstallResult(
            success=False,
            path=Path("/skills/x"),
            error="Invalid skill name: potential path traversal detected",
        ),
    ],
    ids=["success", "failure"],
)
def test_install_result_matches_schema(result: InstallResult) -> None:
    payload = result.to_dict()

    jsonschema.validate(instance=payload, schema=INSTALL_RESULT_SCHEMA)
    assert ("error" in payload) is (result.error is not None)


def test_schema_rejects_unknown_fields() -> None:
    payload = {**InstallResult(success=True, path=Path("/p")).to_dict(), "extra": 1}

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=payload, schema=INSTALL_RESULT_SCHEMA)
