"""CloudFormation client wrapper module."""

from .cloudformation_client import ACCESS_DENIED_CODE, CloudFormationClient, StackAPIError
from .regional_client_factory import RegionalClientFactory

__all__ = ["ACCESS_DENIED_CODE", "CloudFormationClient", "StackAPIError", "RegionalClientFactory"]
