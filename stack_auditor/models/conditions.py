"""Filtering conditions for a template audit."""

from collections.abc import Awaitable, Callable

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .enums import TemplateStage

TemplateFilter = Callable[[str], bool | Awaitable[bool]]


class AuditConditions(BaseModel):
    """
    Criteria that decide which stacks and templates an audit returns.

    Accepts either snake_case names or the camelCase keys used by the
    JavaScript-style options object (``templateFilter``), so a plain dict
    such as ``{"statuses": [...], "templateFilter": fn, "stage": "Original"}``
    validates as-is.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    statuses: tuple[str, ...] | None = Field(
        None,
        description="Stack statuses to audit; None means every known status",
    )
    template_filter: TemplateFilter | None = Field(
        None,
        validation_alias=AliasChoices("template_filter", "templateFilter"),
        description="Predicate over a template body, sync or async; None accepts all",
    )
    stage: TemplateStage = Field(
        TemplateStage.PROCESSED,
        description="Template stage to retrieve for stacks using transforms",
    )

    @field_validator("statuses", mode="before")
    @classmethod
    def normalize_statuses(cls, v):
        """Store statuses as plain strings, accepting StackStatus members."""
        if v is None:
            return v
        if isinstance(v, str):
            v = [v]
        return tuple(getattr(status, "value", status) for status in v)

    @classmethod
    def coerce(cls, conditions: "AuditConditions | dict | None") -> "AuditConditions":
        """Build conditions from None, a dict of options, or an existing instance."""
        if conditions is None:
            return cls()
        if isinstance(conditions, cls):
            return conditions
        return cls.model_validate(conditions)
