"""
Option models for find, update and delete statements.

Each field left unset means "no restriction". Plain dicts with the same keys
are accepted wherever these models are, see ``coerce_options``.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class _StatementOptions(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    sort: dict[Any, Any] | None = Field(
        default=None, description="Ordered column -> ASC/DESC (falsy skips the column)"
    )
    limit: Any = Field(default=None, description="Positive integer row limit; anything else means no limit")


class FindOptions(_StatementOptions):
    """Options for SELECT statements."""

    projections: list[str] | None = Field(default=None, description="Columns to select; empty means '*'")
    offset: Any = Field(default=None, description="Positive integer offset, only applied with a limit")


class UpdateOptions(_StatementOptions):
    """Options for UPDATE statements (no offset in MySQL UPDATE)."""


class DeleteOptions(_StatementOptions):
    """Options for DELETE statements (no offset in MySQL DELETE)."""


OptionsT = TypeVar("OptionsT", bound=_StatementOptions)


def coerce_options(options: OptionsT | Mapping[str, Any] | None, model: type[OptionsT]) -> OptionsT:
    """Return *options* as an instance of *model*.

    Args:
        options: A model instance, a mapping with the model's keys, or ``None``.
        model: The options model to produce.

    Returns:
        A *model* instance; defaults when *options* is ``None``.
    """
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if isinstance(options, BaseModel):
        return model.model_validate(options.model_dump())
    return model.model_validate(dict(options))
