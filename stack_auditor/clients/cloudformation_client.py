"""Async wrapper around the boto3 CloudFormation client."""

import asyncio
import json
import logging
from collections.abc import AsyncIterator, Iterable
from typing import Any, Callable

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from botocore.handlers import json_decode_template_body

logger = logging.getLogger(__name__)

# Error code the provider returns when the caller may not read a resource
ACCESS_DENIED_CODE = "AccessDenied"

_NO_MORE_PAGES = object()


class StackAPIError(Exception):
    """Raised when a CloudFormation API call fails."""

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.error_code = error_code

    @property
    def is_access_denied(self) -> bool:
        return self.error_code == ACCESS_DENIED_CODE


class CloudFormationClient:
    """
    Wrapper around a regional boto3 CloudFormation client.

    Blocking boto3 calls run in the event loop's default executor so that
    callers can overlap requests from a single thread. Credentials come
    from the default boto3 chain; no credentials are handled here.

    Retries are left to botocore's own retry policy, configured through
    the ``Config`` passed in. This wrapper never retries on its own.
    """

    def __init__(self, region: str = "us-east-1", boto_config: Config | None = None):
        """
        Initialize the CloudFormation client.

        Args:
            region: AWS region the client talks to
            boto_config: Optional botocore Config (retries, timeouts)
        """
        self.region = region
        self.cloudformation = boto3.client(
            "cloudformation", region_name=region, config=boto_config
        )
        # Keep GetTemplate bodies as the text that was deployed
        self.cloudformation.meta.events.unregister(
            "after-call.cloudformation.GetTemplate", json_decode_template_body
        )

    async def _call(self, func: Callable[..., Any], *args, **kwargs) -> Any:
        """
        Run a blocking boto3 call in the thread pool.

        Raises:
            StackAPIError: If botocore reports a client or transport error
        """
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, lambda: func(*args, **kwargs))
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "")
            raise StackAPIError(
                f"CloudFormation API error in {self.region}: {error_code} - {str(e)}",
                error_code=error_code,
            ) from e
        except BotoCoreError as e:
            raise StackAPIError(f"Boto3 error in {self.region}: {str(e)}") from e

    async def iter_stack_summary_pages(
        self, status_filter: Iterable[str]
    ) -> AsyncIterator[list[dict[str, Any]]]:
        """
        Yield pages of stack summaries from ListStacks, in order.

        Each page is requested only after the previous one has been
        consumed, since the continuation token comes with the prior page.

        Args:
            status_filter: Stack statuses to include

        Yields:
            The ``StackSummaries`` list of each page
        """
        paginator = self.cloudformation.get_paginator("list_stacks")
        pages = iter(paginator.paginate(StackStatusFilter=list(status_filter)))

        while True:
            page = await self._call(next, pages, _NO_MORE_PAGES)
            if page is _NO_MORE_PAGES:
                return
            yield page.get("StackSummaries", [])

    async def get_template_body(self, stack_name: str, stage: str) -> str | None:
        """
        Fetch the template of one stack.

        The body is returned exactly as deployed. A dict body (from a
        client that still decodes JSON templates) is serialized back to
        text without escaping non-ASCII characters.

        Args:
            stack_name: Name or ARN of the stack
            stage: ``Original`` or ``Processed``

        Returns:
            Template body text, or None if the response carried no body
        """
        response = await self._call(
            self.cloudformation.get_template,
            StackName=stack_name,
            TemplateStage=stage,
        )
        body = response.get("TemplateBody")
        if isinstance(body, dict):
            body = json.dumps(body, ensure_ascii=False)
        return body
