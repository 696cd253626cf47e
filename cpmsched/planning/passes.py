import logging
from heapq import heappop, heappush

from ..errors import CycleError

logger = logging.getLogger(__name__)


def topological_sort(graph):
    """
    Kahn's algorithm; among ready tasks the one with the lowest id goes first.
    """
    backlinks = {t.id: len(t.predecessors) for t in graph.tasks.values()}
    ready = [task_id for task_id, count in backlinks.items() if count == 0]
    ready.sort()
    result = []

    while ready:
        task = graph.tasks[heappop(ready)]
        result.append(task)
        for succ in task.successors:
            backlinks[succ.id] -= 1
            if backlinks[succ.id] == 0:
                heappush(ready, succ.id)

    if len(result) != graph.task_count:
        blocked = sorted(task_id for task_id, count in backlinks.items() if count > 0)
        raise CycleError("Dependency relation contains a cycle, tasks {} cannot be ordered"
                         .format(blocked))
    return result


def forward_pass(graph, order):
    """
    Computes the earliest start and finish of each task, returns the project duration.
    """
    for task in order:
        task.early_start = max((p.early_finish for p in task.predecessors), default=0)
        task.early_finish = task.early_start + task.duration

    project_duration = max((t.early_finish for t in graph.tasks.values()), default=0)
    logger.debug("Forward pass finished, project duration %s", project_duration)
    return project_duration


def backward_pass(graph, order, project_duration):
    """
    Computes the latest start and finish, slack and free slack of each task.
    """
    for task in reversed(order):
        task.late_finish = min((s.late_start for s in task.successors),
                               default=project_duration)
        task.late_start = task.late_finish - task.duration
        task.slack = task.late_finish - task.early_finish
        task.free_slack = min((s.early_start for s in task.successors),
                              default=project_duration) - task.early_finish
        task.max_length = project_duration - task.slack
        assert task.slack == task.late_start - task.early_start
    logger.debug("Backward pass finished for %s tasks", graph.task_count)
