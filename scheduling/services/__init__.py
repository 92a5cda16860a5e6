from scheduling.services.scheduling_service import SchedulingService

__all__ = ["SchedulingService"]
