"""Command prefixes of optional server modules."""

from __future__ import annotations

from types import MappingProxyType

from rcli.core.types import RedisModule

# Evaluated in declaration order: the first matching prefix wins.
MODULE_COMMAND_PREFIXES: tuple[tuple[str, RedisModule], ...] = (
    ("FT.", RedisModule.Search),
    ("JSON.", RedisModule.ReJSON),
    ("TS.", RedisModule.TimeSeries),
    ("GRAPH.", RedisModule.Graph),
    ("BF.", RedisModule.Bloom),
    ("CF.", RedisModule.Bloom),
    ("CMS.", RedisModule.Bloom),
    ("TDIGEST.", RedisModule.Bloom),
    ("TOPK.", RedisModule.Bloom),
)

REDISEARCH_MODULES: frozenset[str] = frozenset({"search", "searchlight", "ft", "ftl"})

# Names a server may report for each logical module.
COMMAND_MODULES: MappingProxyType[RedisModule, frozenset[str]] = MappingProxyType(
    {
        RedisModule.Search: REDISEARCH_MODULES,
        RedisModule.ReJSON: frozenset({RedisModule.ReJSON.value}),
        RedisModule.TimeSeries: frozenset({RedisModule.TimeSeries.value}),
        RedisModule.Graph: frozenset({RedisModule.Graph.value}),
        RedisModule.Bloom: frozenset({RedisModule.Bloom.value}),
    }
)
