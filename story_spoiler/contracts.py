"""JSON Schema checks for Story Spoiler response bodies.

Schemas ship inside the package under `schemas/` and are validated with
Draft 2020-12 semantics.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

from jsonschema import Draft202012Validator

from story_spoiler.http.errors import ResponseContractError

SCHEMA_NAMES = ("auth_response", "api_response", "story_list")


@lru_cache(maxsize=None)
def load_schema(name: str) -> Dict[str, Any]:
    if name not in SCHEMA_NAMES:
        raise KeyError(f"Unknown schema: {name}")
    text = resources.files("story_spoiler").joinpath("schemas").joinpath(f"{name}.schema.json").read_text(encoding="utf-8")
    return json.loads(text)


def validate_body(instance: Any, schema_name: str) -> None:
    """Raise ResponseContractError listing every violation of `schema_name`."""
    validator = Draft202012Validator(load_schema(schema_name))
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.path])
    if errors:
        details = "; ".join(
            f"{'/'.join(str(p) for p in err.path) or '<root>'}: {err.message}" for err in errors
        )
        raise ResponseContractError(f"{schema_name} violated: {details}")


__all__ = ["SCHEMA_NAMES", "load_schema", "validate_body"]
