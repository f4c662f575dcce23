"""Service layer for the CloudFormation stack template auditor."""

from .stack_lister import StackLister
from .template_fetcher import TemplateFetcher
from .world_wide_aggregator import WorldWideAggregator

__all__ = [
    "StackLister",
    "TemplateFetcher",
    "WorldWideAggregator",
]
