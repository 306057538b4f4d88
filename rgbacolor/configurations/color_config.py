from __future__ import annotations

from typing import Mapping

from rgbacolor.color.cache import ColorCache
from rgbacolor.color.named import NamedColorResolver, TableResolver
from rgbacolor.configurations.configuration_constants import (
    CacheDefaults,
    validate_eviction_policy,
    validate_max_size,
)
from rgbacolor.utils.sentinels import NotProvided


class ColorConfig:
    def __init__(self):

        # Cache
        self.max_cache_size: int = CacheDefaults.MaxSize
        self.eviction_policy: str = CacheDefaults.Policy

        # Named colors
        self.named_color_table: dict[str, str] | None = None
        self.resolver: NamedColorResolver | None = None

    def cache(
        self,
        max_size: int = NotProvided,
        eviction_policy: str = NotProvided,
    ) -> ColorConfig:
        if max_size is not NotProvided:
            self.max_cache_size = validate_max_size(max_size)

        if eviction_policy is not NotProvided:
            self.eviction_policy = validate_eviction_policy(eviction_policy)

        return self

    def named_colors(
        self,
        table: Mapping[str, str] | None = NotProvided,
        resolver: NamedColorResolver | None = NotProvided,
    ) -> ColorConfig:
        """Configure named color lookup.

        A custom *resolver* takes precedence over *table*; *table* extends
        the built-in names.
        """
        if table is not NotProvided:
            self.named_color_table = dict(table) if table is not None else None

        if resolver is not NotProvided:
            self.resolver = resolver

        return self

    def build_resolver(self) -> NamedColorResolver:
        if self.resolver is not None:
            return self.resolver
        return TableResolver(self.named_color_table)

    def build_cache(self) -> ColorCache:
        return ColorCache(
            max_size=self.max_cache_size,
            eviction_policy=self.eviction_policy,
            resolver=self.build_resolver(),
        )

    def to_dict(self) -> dict:
        return {
            "max_cache_size": self.max_cache_size,
            "eviction_policy": self.eviction_policy,
            "named_color_table": self.named_color_table,
            "custom_resolver": self.resolver is not None,
        }
