# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Service container for dependency wiring.

Builds the regional client factory and the three audit services from
one Settings instance so that entry points do not wire them by hand.
"""

import logging
from typing import Optional

from .clients.regional_client_factory import RegionalClientFactory
from .config import Settings, settings as get_default_settings
from .services.stack_lister import StackLister
from .services.template_fetcher import TemplateFetcher
from .services.world_wide_aggregator import WorldWideAggregator

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Wires together the auditor services.

    Usage::

        container = ServiceContainer()          # uses default settings
        records = await container.world_wide_aggregator.get_world_wide_templates()

    Or with custom settings::

        container = ServiceContainer(settings=Settings(region_concurrency=2))
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Optional[RegionalClientFactory] = None,
    ) -> None:
        """
        Args:
            settings: Auditor settings. If None, loads from environment
                      variables / .env via the default ``settings()`` helper.
            client_factory: Optional pre-built client factory (tests, custom
                            sessions). If None, one is created from settings.
        """
        self._settings: Settings = settings or get_default_settings()
        s = self._settings

        self._client_factory = client_factory or RegionalClientFactory(
            boto_config=s.boto_config()
        )
        self._stack_lister = StackLister(self._client_factory)
        self._template_fetcher = TemplateFetcher(
            self._client_factory,
            stack_lister=self._stack_lister,
            concurrency=s.template_concurrency,
        )
        self._world_wide_aggregator = WorldWideAggregator(
            self._template_fetcher,
            concurrency=s.region_concurrency,
        )

        logger.debug(
            f"ServiceContainer ready: template_concurrency={s.template_concurrency}, "
            f"region_concurrency={s.region_concurrency}"
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def client_factory(self) -> RegionalClientFactory:
        return self._client_factory

    @property
    def stack_lister(self) -> StackLister:
        return self._stack_lister

    @property
    def template_fetcher(self) -> TemplateFetcher:
        return self._template_fetcher

    @property
    def world_wide_aggregator(self) -> WorldWideAggregator:
        return self._world_wide_aggregator


_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the process-wide container, creating it on first use."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Forget the process-wide container so the next call rebuilds it."""
    global _container
    _container = None
