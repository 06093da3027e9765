"""
Shared base for repository input schemas.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict


class InputBase(BaseModel):
    """Base class of every create / update / clear / filter input.

    Enum members are stored as their values so inputs can be written to the
    database without conversion.
    """

    model_config = ConfigDict(use_enum_values=True, extra="forbid")

    def set_fields(self, exclude: tuple = ("id",)) -> Dict[str, Any]:
        """Fields given a non-None value, as a column -> value mapping."""
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name not in exclude and getattr(self, name) is not None
        }


class ClearInputBase(InputBase):
    """Base class of clear inputs: an ``id`` plus one boolean flag per column."""

    def flagged_fields(self) -> List[str]:
        """Names of the columns flagged to be set to NULL."""
        return [name for name in type(self).model_fields if name != "id" and getattr(self, name) is True]
