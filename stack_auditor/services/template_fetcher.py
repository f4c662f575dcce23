# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Template fetching service for a single region.

Fetches the template of every stack matching a set of conditions,
applies the caller's template predicate and returns the accepted
templates sorted by ``<stack name>-<region>``.

The templates endpoint is throttled harder than ListStacks, so detail
requests within a region go through a work queue of concurrency 1 by
default.
"""

import logging

from ..clients.cloudformation_client import StackAPIError
from ..clients.regional_client_factory import RegionalClientFactory
from ..models.conditions import AuditConditions
from ..models.stack import StackSummary, TemplateRecord
from ..utils.predicates import AsyncPredicate, as_async_predicate
from ..utils.work_queue import BoundedWorkQueue
from .stack_lister import StackLister

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_CONCURRENCY = 1


class TemplateFetcher:
    """
    Retrieves and filters stack templates in one region.

    Stacks whose template the caller may not read (AccessDenied) are left
    out of the result. Any other failure aborts the whole region.
    """

    def __init__(
        self,
        client_factory: RegionalClientFactory,
        stack_lister: StackLister | None = None,
        concurrency: int = DEFAULT_TEMPLATE_CONCURRENCY,
    ):
        """
        Args:
            client_factory: Factory providing regional CloudFormation clients
            stack_lister: Lister used to enumerate stacks (default: one built on client_factory)
            concurrency: Maximum template requests in flight per call (default: 1)
        """
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")

        self.client_factory = client_factory
        self.stack_lister = stack_lister or StackLister(client_factory)
        self.concurrency = concurrency

    async def get_templates(
        self,
        region: str,
        conditions: AuditConditions | dict | None = None,
    ) -> list[TemplateRecord]:
        """
        Get stack summaries and templates matching a set of conditions.

        If no conditions are given, every stack in the region is audited
        and every template is returned.

        Args:
            region: AWS region to audit
            conditions: Statuses, template predicate and template stage

        Returns:
            Accepted templates sorted by ``<stack name>-<region>``

        Raises:
            StackAPIError: If listing fails, or a template request fails
                with anything other than AccessDenied
        """
        conditions = AuditConditions.coerce(conditions)
        predicate = as_async_predicate(conditions.template_filter)

        summaries = await self.stack_lister.list_stacks(region, conditions.statuses)
        client = self.client_factory.get_client(region)
        queue = BoundedWorkQueue(self.concurrency, name=f"templates-{region}")

        def make_check(summary: StackSummary):
            async def check_template() -> str | None:
                return await self._check_template(client, summary, conditions, predicate)

            return check_template

        bodies = await queue.map(make_check(summary) for summary in summaries)

        records = [
            TemplateRecord(template_body=body, summary=summary, region=region)
            for body, summary in zip(bodies, summaries)
            if body
        ]
        records = sorted(records, key=lambda record: record.sort_key)

        logger.info(f"Accepted {len(records)} of {len(summaries)} templates in {region}")
        return records

    async def _check_template(
        self,
        client,
        summary: StackSummary,
        conditions: AuditConditions,
        predicate: AsyncPredicate,
    ) -> str | None:
        """Fetch one template; None if it is denied or rejected by the predicate."""
        try:
            body = await client.get_template_body(summary.stack_name, conditions.stage.value)
        except StackAPIError as e:
            if e.is_access_denied:
                return None
            raise

        if not body:
            return None
        return body if await predicate(body) else None
