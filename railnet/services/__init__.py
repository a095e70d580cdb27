"""Services layer - Application orchestration.

Available services:
- JourneyPlannerService: Network loading, graph building and journey search
- reports: Descriptive route reports
- validation: Station data-quality checks
- display: Text rendering of journeys
"""

from .journey_planner import JourneyPlannerService

__all__ = ["JourneyPlannerService"]
