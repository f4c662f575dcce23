"""Data models for the CloudFormation stack template auditor."""

from .enums import DEFAULT_STACK_STATUSES, StackStatus, TemplateStage
from .regions import REGION_CATALOG
from .stack import StackSummary, TemplateRecord
from .conditions import AuditConditions, TemplateFilter

__all__ = [
    "DEFAULT_STACK_STATUSES",
    "StackStatus",
    "TemplateStage",
    "REGION_CATALOG",
    "StackSummary",
    "TemplateRecord",
    "AuditConditions",
    "TemplateFilter",
]
