# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Stack listing service.

Collects every stack summary in one region that matches a status
filter, walking the ListStacks pages in order until the provider
reports there are no more.
"""

import logging
from collections.abc import Iterable

from ..clients.regional_client_factory import RegionalClientFactory
from ..models.enums import DEFAULT_STACK_STATUSES
from ..models.stack import StackSummary

logger = logging.getLogger(__name__)


class StackLister:
    """Lists CloudFormation stack summaries for a single region."""

    def __init__(self, client_factory: RegionalClientFactory):
        """
        Args:
            client_factory: Factory providing regional CloudFormation clients
        """
        self.client_factory = client_factory

    async def list_stacks(
        self,
        region: str,
        status_filter: Iterable[str] | None = None,
    ) -> list[StackSummary]:
        """
        Get summaries of every stack in a region.

        Pages are requested one after another; nothing is returned until
        pagination is exhausted. A failure on any page aborts the call.

        Args:
            region: AWS region to list
            status_filter: Stack statuses to include (default: all known statuses)

        Returns:
            All matching stack summaries, in the order the provider returned them

        Raises:
            ValueError: If region is empty
            StackAPIError: If any page request fails
        """
        if not region:
            raise ValueError("region must be a non-empty string")

        statuses = list(DEFAULT_STACK_STATUSES if status_filter is None else status_filter)
        client = self.client_factory.get_client(region)

        summaries: list[StackSummary] = []
        page_count = 0
        async for page in client.iter_stack_summary_pages(statuses):
            page_count += 1
            summaries.extend(StackSummary.model_validate(item) for item in page)

        logger.info(
            f"Listed {len(summaries)} stacks in {region} "
            f"across {page_count} pages ({len(statuses)} statuses)"
        )
        return summaries
