"""NotEmptyRule — rejects absent values and values without content."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel

from valrule.domain.values import indirect, is_empty
from valrule.rules.result import EmptyValueError

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "must not be empty"


class NotEmptyRule(BaseModel):
    """Fails when a value is ``None``, a nil reference, or zero-length.

    Only strings, bytes, and sized containers can be empty. Every other
    concrete value passes, including ``0`` and ``False``.
    """

    model_config = {"frozen": True}

    name: ClassVar[str] = "not_empty"

    message: str = DEFAULT_MESSAGE

    def validate(self, value: Any) -> EmptyValueError | None:
        value, is_absent = indirect(value)
        if is_absent or is_empty(value):
            logger.debug("Empty value rejected (absent=%s)", is_absent)
            return EmptyValueError(message=self.message)
        return None

    def with_message(self, message: str) -> NotEmptyRule:
        """Return a copy of this rule that fails with *message*."""
        return self.model_copy(update={"message": message})


NOT_EMPTY = NotEmptyRule()


def not_empty() -> NotEmptyRule:
    """Return the shared default NotEmptyRule."""
    return NOT_EMPTY
