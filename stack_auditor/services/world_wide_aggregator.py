# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""World-wide template aggregation.

Runs the single-region template fetch for every region in the catalog
and concatenates the results in catalog order.

Results are NOT re-sorted across regions: each region's list is sorted
by ``<stack name>-<region>``, but regions follow catalog order.
"""

import logging
from collections.abc import Sequence

from ..models.conditions import AuditConditions
from ..models.regions import REGION_CATALOG
from ..models.stack import TemplateRecord
from ..utils.work_queue import BoundedWorkQueue
from .template_fetcher import TemplateFetcher

logger = logging.getLogger(__name__)

DEFAULT_REGION_CONCURRENCY = 5


class WorldWideAggregator:
    """
    Audits stack templates in every catalog region.

    Cross-region concurrency is independent of the per-region template
    concurrency: regions have separate rate limits, templates within a
    region share one.
    """

    def __init__(
        self,
        template_fetcher: TemplateFetcher,
        regions: Sequence[str] = REGION_CATALOG,
        concurrency: int = DEFAULT_REGION_CONCURRENCY,
    ):
        """
        Args:
            template_fetcher: Single-region fetcher run once per region
            regions: Regions to audit, in output order (default: REGION_CATALOG)
            concurrency: Maximum regions audited at once (default: 5)
        """
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")

        self.template_fetcher = template_fetcher
        self.regions = tuple(regions)
        self.concurrency = concurrency

    async def get_world_wide_templates(
        self,
        conditions: AuditConditions | dict | None = None,
    ) -> list[TemplateRecord]:
        """
        Get stack summaries and templates matching a set of conditions in all regions.

        Args:
            conditions: Statuses, template predicate and template stage

        Returns:
            Each region's sorted templates, concatenated in catalog order

        Raises:
            StackAPIError: If any region fails; no partial results are returned
        """
        conditions = AuditConditions.coerce(conditions)
        queue = BoundedWorkQueue(self.concurrency, name="regions")

        logger.info(
            f"Starting world-wide template audit: {len(self.regions)} regions, "
            f"max_concurrent={self.concurrency}"
        )

        def make_fetch(region: str):
            async def fetch_region() -> list[TemplateRecord]:
                return await self.template_fetcher.get_templates(region, conditions)

            return fetch_region

        regional = await queue.map(make_fetch(region) for region in self.regions)

        results = [record for records in regional for record in records]
        logger.info(f"World-wide template audit complete: {len(results)} templates")
        return results
