"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, valrule.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from valrule.rules.range import ACCURACY


class RangeConfig(BaseModel):
    """[range] section."""

    model_config = {"frozen": True}

    accuracy: float = Field(default=ACCURACY, ge=0)


class MessagesConfig(BaseModel):
    """[messages] section.

    Custom failure messages for rules built by the CLI. ``None`` keeps
    the rule's own default.
    """

    model_config = {"frozen": True}

    not_empty: str | None = None
    range: str | None = None
