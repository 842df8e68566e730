from prpulse.core.jobs.base import BaseJob
from prpulse.core.jobs.events import NO_EVENTS_MESSAGE, NO_MATCHES_MESSAGE, EventsJob
from prpulse.core.jobs.review import ReviewJob, ReviewOptions

__all__ = [
    "BaseJob",
    "EventsJob",
    "ReviewJob",
    "ReviewOptions",
    "NO_EVENTS_MESSAGE",
    "NO_MATCHES_MESSAGE",
]
