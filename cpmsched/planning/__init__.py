from .builder import build_task_graph, build_task_graph_from_dependencies, validate_input  # noqa
from .cycles import find_cycle, has_cycle  # noqa
from .passes import backward_pass, forward_pass, topological_sort  # noqa
from .critical import MAX_CHAINS, critical_tasks, find_critical_chains, find_critical_path  # noqa
from .schedule import Schedule, ScheduleEntry, UndefinedSchedule  # noqa
from .engine import RunState, ScheduleRun, compute_schedule, schedule_task_graph  # noqa
