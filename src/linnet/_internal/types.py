"""Shared type aliases used across linnet modules."""

from collections.abc import Mapping
from typing import Any, TypeAlias

# Decoded JSON object (the only payload shape the cascade merges)
JSONObject: TypeAlias = dict[str, Any]

# Request headers as handed over by the surrounding server
HeaderMap: TypeAlias = Mapping[str, str]
