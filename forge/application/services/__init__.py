"""
Application services package.
"""

from .dashboard_aggregator import DashboardAggregator, DashboardSnapshot

__all__ = [
    "DashboardAggregator",
    "DashboardSnapshot",
]
