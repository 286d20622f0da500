"""Shared Pydantic base model helpers."""

from __future__ import annotations

import json
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict


class TermBaseModel(BaseModel):
    """Base model enforcing immutable fields and stable output.

    Unknown keys are ignored so a config file may carry settings owned by
    other subsystems.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """Return a deterministic dict representation."""
        return self.model_dump(by_alias=True, exclude_none=False)

    def to_json(self) -> str:
        """Return deterministic JSON with sorted keys."""
        return json.dumps(self.to_dict(), sort_keys=True, ensure_ascii=True)

    def to_yaml(self) -> str:
        """Return block-style YAML in field declaration order."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)
