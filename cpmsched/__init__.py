from .common import Task, TaskGraph  # noqa
from .errors import CycleError, InvalidInputError, InvalidStateError, ScheduleError  # noqa
from .planning import (Schedule, UndefinedSchedule, compute_schedule,  # noqa
                       schedule_task_graph)

__version__ = "0.1"
