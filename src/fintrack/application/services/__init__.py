"""Application services."""

from fintrack.application.services.analytics_service import AnalyticsService

__all__ = ["AnalyticsService"]
