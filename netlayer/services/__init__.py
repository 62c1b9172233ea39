"""Service-layer components for netlayer."""

from .executor import RequestExecutor, parse_url
from .reachability import ReachabilityMonitor, ReachabilityProbe, StaticReachability

__all__ = [
    "ReachabilityMonitor",
    "ReachabilityProbe",
    "RequestExecutor",
    "StaticReachability",
    "parse_url",
]
