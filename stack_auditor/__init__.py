"""CloudFormation stack template auditor.

Lists stacks in one or many AWS regions, fetches their templates with
bounded concurrency and returns the templates that pass a predicate.
"""

from .api import get_templates, get_world_wide_templates
from .clients import ACCESS_DENIED_CODE, CloudFormationClient, RegionalClientFactory, StackAPIError
from .config import Settings
from .container import ServiceContainer
from .models import (
    DEFAULT_STACK_STATUSES,
    REGION_CATALOG,
    AuditConditions,
    StackStatus,
    StackSummary,
    TemplateRecord,
    TemplateStage,
)
from .services import StackLister, TemplateFetcher, WorldWideAggregator
from .utils import BoundedWorkQueue, configure_logging

__version__ = "1.0.0"

__all__ = [
    "get_templates",
    "get_world_wide_templates",
    "ACCESS_DENIED_CODE",
    "CloudFormationClient",
    "RegionalClientFactory",
    "StackAPIError",
    "Settings",
    "ServiceContainer",
    "DEFAULT_STACK_STATUSES",
    "REGION_CATALOG",
    "AuditConditions",
    "StackStatus",
    "StackSummary",
    "TemplateRecord",
    "TemplateStage",
    "StackLister",
    "TemplateFetcher",
    "WorldWideAggregator",
    "BoundedWorkQueue",
    "configure_logging",
]
