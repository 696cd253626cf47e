import logging
from enum import IntEnum

from .builder import build_task_graph, validate_durations
from .critical import MAX_CHAINS, critical_tasks, find_critical_chains
from .cycles import find_cycle
from .passes import backward_pass, forward_pass, topological_sort
from .schedule import Schedule, UndefinedSchedule
from ..errors import CycleError, InvalidInputError, InvalidStateError

logger = logging.getLogger(__name__)


class RunState(IntEnum):
    Built = 1
    Rejected = 2
    Checked = 3
    TimesComputed = 4
    PathExtracted = 5


class ScheduleRun:
    """
    One scheduling run over a task graph owned exclusively by the run.

    Stages have to be called in order: check_cycles(), compute_times(),
    extract_path(); run() executes all of them.
    """

    def __init__(self, task_graph, max_chains=MAX_CHAINS):
        self.task_graph = task_graph
        self.max_chains = max_chains
        self.state = RunState.Built
        self.order = None
        self.project_duration = None
        self.schedule = None

    @classmethod
    def from_relation(cls, num_tasks, relation, durations, names=None, max_chains=MAX_CHAINS):
        return cls(build_task_graph(num_tasks, relation, durations, names), max_chains)

    def _expect(self, state):
        if self.state != state:
            raise InvalidStateError("Run is in state {}, expected {}"
                                    .format(self.state.name, state.name))

    def check_cycles(self):
        self._expect(RunState.Built)
        cycle = find_cycle(self.task_graph)
        if cycle is not None:
            self.state = RunState.Rejected
            ids = [t.id for t in cycle]
            logger.info("Rejecting task graph %s, cycle %s", self.task_graph, ids)
            raise CycleError("Dependency relation contains a cycle: {}"
                             .format(" -> ".join(str(i) for i in ids + ids[:1])), ids)
        self.state = RunState.Checked

    def compute_times(self):
        self._expect(RunState.Checked)
        graph = self.task_graph
        graph.reset_times()
        self.order = topological_sort(graph)
        self.project_duration = forward_pass(graph, self.order)
        backward_pass(graph, self.order, self.project_duration)
        self.state = RunState.TimesComputed

    def extract_path(self):
        self._expect(RunState.TimesComputed)
        graph = self.task_graph
        self.schedule = Schedule.from_task_graph(
            graph,
            self.project_duration,
            critical_tasks(graph),
            find_critical_chains(graph, self.max_chains))
        self.state = RunState.PathExtracted
        logger.debug("Schedule computed: duration %s, critical path %s",
                     self.project_duration, self.schedule.critical_path)
        return self.schedule

    def run(self):
        self.check_cycles()
        self.compute_times()
        return self.extract_path()


def compute_schedule(num_tasks, relation, durations, names=None, max_chains=MAX_CHAINS):
    """
    Computes the CPM schedule.

    ``relation[i][j] == 1`` means that task ``i`` depends on task ``j``.
    Returns a ``Schedule``, or an ``UndefinedSchedule`` when the input is
    malformed or the relation contains a cycle.
    """
    try:
        return ScheduleRun.from_relation(num_tasks, relation, durations, names, max_chains).run()
    except (InvalidInputError, CycleError) as e:
        return UndefinedSchedule(e)


def schedule_task_graph(task_graph, max_chains=MAX_CHAINS):
    """
    Computes the CPM schedule of a copy of the given task graph.
    """
    try:
        validate_durations(task_graph.task_count,
                           [t.duration for t in task_graph.tasks.values()])
        return ScheduleRun(task_graph.copy(), max_chains).run()
    except (InvalidInputError, CycleError) as e:
        return UndefinedSchedule(e)
