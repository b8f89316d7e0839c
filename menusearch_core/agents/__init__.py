"""MenuSearch Agents - Search Statistics.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from menusearch_core.agents.analytics import AnalyticsAgent, QueryStats

__all__ = ["AnalyticsAgent", "QueryStats"]
