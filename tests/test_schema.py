"""Tests for registry document parsing (core/schema.py).

Pure function tests: raw JSON-like data in, domain models or
``RegistryFormatError`` out.
"""

from __future__ import annotations

from typing import Any

import pytest

from talos.core.models import CommandBody, Registry, Step
from talos.core.schema import parse_registry
from talos.exceptions import RegistryFormatError


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def _raw_step(**overrides: Any) -> dict[str, Any]:
    step: dict[str, Any] = {
        "name": "serve",
        "options": ["--port"],
        "args": ["<dir>", "--quiet"],
        "action": "python",
    }
    step.update(overrides)
    return step


def _raw_document(**overrides: Any) -> dict[str, Any]:
    document: dict[str, Any] = {
        "name": "serve",
        "body": [
            {
                "version": "1.0.0",
                "label": "stable",
                "commands": [_raw_step()],
            }
        ],
    }
    document.update(overrides)
    return document


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------

class TestParseRegistry:
    def test_builds_domain_models(self) -> None:
        registry = parse_registry(_raw_document())
        assert registry == Registry(
            name="serve",
            body=(
                CommandBody(
                    version="1.0.0",
                    label="stable",
                    commands=(
                        Step(
                            name="serve",
                            options=("--port",),
                            args=("<dir>", "--quiet"),
                            action="python",
                        ),
                    ),
                ),
            ),
        )

    def test_label_is_optional(self) -> None:
        document = _raw_document(body=[{"version": "2", "commands": []}])
        registry = parse_registry(document)
        assert registry.body[0].label is None

    def test_null_label_is_treated_as_absent(self) -> None:
        document = _raw_document(body=[{"version": "2", "label": None, "commands": []}])
        assert parse_registry(document).body[0].label is None

    def test_empty_body_is_valid(self) -> None:
        registry = parse_registry(_raw_document(body=[]))
        assert registry.body == ()
        assert not registry

    def test_step_order_is_preserved(self) -> None:
        steps = [_raw_step(name=f"step-{i}") for i in range(4)]
        document = _raw_document(body=[{"version": "1", "commands": steps}])
        registry = parse_registry(document)
        assert [step.name for step in registry.body[0].commands] == [
            "step-0",
            "step-1",
            "step-2",
            "step-3",
        ]

    def test_extra_keys_are_ignored(self) -> None:
        registry = parse_registry(_raw_document(description="ignored"))
        assert registry.name == "serve"


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------

class TestParseRegistryErrors:
    def test_document_must_be_an_object(self) -> None:
        with pytest.raises(RegistryFormatError, match="document must be an object"):
            parse_registry(["not", "an", "object"])

    def test_name_must_be_a_string(self) -> None:
        with pytest.raises(RegistryFormatError, match="name must be a string"):
            parse_registry(_raw_document(name=3))

    def test_body_must_be_an_array(self) -> None:
        with pytest.raises(RegistryFormatError, match="body must be an array"):
            parse_registry(_raw_document(body={}))

    def test_version_is_required(self) -> None:
        document = _raw_document(body=[{"commands": []}])
        with pytest.raises(RegistryFormatError, match=r"body\[0\]\.version"):
            parse_registry(document)

    def test_label_must_be_a_string(self) -> None:
        document = _raw_document(body=[{"version": "1", "label": 1, "commands": []}])
        with pytest.raises(RegistryFormatError, match=r"body\[0\]\.label"):
            parse_registry(document)

    def test_step_must_be_an_object(self) -> None:
        document = _raw_document(body=[{"version": "1", "commands": ["ls"]}])
        with pytest.raises(RegistryFormatError, match=r"body\[0\]\.commands\[0\] must be an object"):
            parse_registry(document)

    def test_option_entries_must_be_strings(self) -> None:
        document = _raw_document(
            body=[{"version": "1", "commands": [_raw_step(), _raw_step(options=["--a", 2])]}],
        )
        with pytest.raises(
            RegistryFormatError,
            match=r"body\[0\]\.commands\[1\]\.options\[1\] must be a string",
        ):
            parse_registry(document)

    def test_action_is_required(self) -> None:
        step = _raw_step()
        del step["action"]
        document = _raw_document(body=[{"version": "1", "commands": [step]}])
        with pytest.raises(RegistryFormatError, match="action must be a string"):
            parse_registry(document)

    def test_error_carries_hint(self) -> None:
        with pytest.raises(RegistryFormatError) as exc_info:
            parse_registry({})
        assert exc_info.value.hint is not None
