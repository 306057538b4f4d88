from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class EvictionPolicy:
    ApproxQuarter = "approx_quarter"
    StrictLRU = "strict_lru"


EVICTION_POLICIES = (EvictionPolicy.ApproxQuarter, EvictionPolicy.StrictLRU)


@dataclasses.dataclass(frozen=True)
class CacheDefaults:
    MaxSize = 1024
    Policy = EvictionPolicy.ApproxQuarter


def validate_max_size(max_size: int) -> int:
    if max_size < 1:
        raise ValueError(f"max_size must be at least 1, got {max_size}")
    return max_size


def validate_eviction_policy(eviction_policy: str) -> str:
    if eviction_policy not in EVICTION_POLICIES:
        raise ValueError(
            f"eviction_policy must be one of {EVICTION_POLICIES}, got {eviction_policy!r}"
        )
    return eviction_policy
