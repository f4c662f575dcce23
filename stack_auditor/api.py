"""Module-level audit operations backed by the default service container."""

from .container import get_container
from .models.conditions import AuditConditions
from .models.stack import TemplateRecord


async def get_templates(
    region: str,
    conditions: AuditConditions | dict | None = None,
) -> list[TemplateRecord]:
    """
    Get stack summaries and templates matching a set of conditions in one region.

    If no conditions are specified, all stacks are audited.

    Args:
        region: AWS region to audit
        conditions: ``AuditConditions`` or a dict with any of ``statuses``,
            ``templateFilter`` (``template_filter``) and ``stage``

    Returns:
        Accepted templates sorted by ``<stack name>-<region>``
    """
    return await get_container().template_fetcher.get_templates(region, conditions)


async def get_world_wide_templates(
    conditions: AuditConditions | dict | None = None,
) -> list[TemplateRecord]:
    """
    Get stack summaries and templates matching a set of conditions in all regions.

    Args:
        conditions: Same shape as for ``get_templates``

    Returns:
        Per-region results concatenated in region catalog order
    """
    return await get_container().world_wide_aggregator.get_world_wide_templates(conditions)
