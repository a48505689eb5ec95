"""
Observability module for palettekit.

Provides timing and memory metrics for extraction and palette operations.
"""

from .metrics import (
    PerformanceMetrics,
    MetricsCollector,
    get_metrics_collector,
    performance_monitor,
    performance_tracked,
)

__all__ = [
    'PerformanceMetrics',
    'MetricsCollector',
    'get_metrics_collector',
    'performance_monitor',
    'performance_tracked',
]
