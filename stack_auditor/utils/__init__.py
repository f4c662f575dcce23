"""Utility modules for the CloudFormation stack template auditor."""

from .work_queue import BoundedWorkQueue
from .predicates import accept_all, as_async_predicate
from .logging_config import configure_logging

__all__ = [
    "BoundedWorkQueue",
    "accept_all",
    "as_async_predicate",
    "configure_logging",
]
