# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Factory for creating and caching regional CloudFormation clients."""

import logging

from botocore.config import Config

from .cloudformation_client import CloudFormationClient

logger = logging.getLogger(__name__)


class RegionalClientFactory:
    """
    Factory for creating and caching regional CloudFormation clients.

    Reuses clients within a session to avoid repeated initialization.
    Applies the same botocore configuration to every client it creates.
    """

    def __init__(self, boto_config: Config | None = None):
        """
        Initialize with a shared botocore config.

        Args:
            boto_config: Optional botocore Config applied to all clients
        """
        self._boto_config = boto_config
        self._clients: dict[str, CloudFormationClient] = {}

    @property
    def boto_config(self) -> Config | None:
        """Get the botocore configuration."""
        return self._boto_config

    def get_client(self, region: str) -> CloudFormationClient:
        """
        Get or create a CloudFormation client for the specified region.

        Calling this repeatedly with the same region returns the exact
        same instance.

        Args:
            region: AWS region code (e.g., "us-east-1")

        Returns:
            CloudFormationClient configured for the region
        """
        if region in self._clients:
            logger.debug(f"Reusing cached client for region {region}")
            return self._clients[region]

        logger.info(f"Creating new CloudFormation client for region {region}")
        client = CloudFormationClient(region=region, boto_config=self._boto_config)
        self._clients[region] = client

        return client
