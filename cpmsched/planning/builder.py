import logging

import numpy as np

from ..common import TaskGraph
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)


def _is_integer(value):
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def validate_task_count(num_tasks):
    if not _is_integer(num_tasks):
        raise InvalidInputError("Task count has to be an integer, not {!r}".format(num_tasks))
    if num_tasks <= 0:
        raise InvalidInputError("Task count has to be positive, not {}".format(num_tasks))
    return int(num_tasks)


def validate_durations(num_tasks, durations):
    durations = list(durations)
    if len(durations) != num_tasks:
        raise InvalidInputError("Expected {} durations, got {}".format(num_tasks, len(durations)))
    for (task_id, duration) in enumerate(durations):
        if not _is_integer(duration):
            raise InvalidInputError("Duration of task {} has to be an integer, not {!r}"
                                    .format(task_id, duration))
        if duration < 0:
            raise InvalidInputError("Duration of task {} is negative ({})"
                                    .format(task_id, duration))
    return [int(d) for d in durations]


def validate_relation(num_tasks, relation):
    """
    Converts the dependency relation into an N x N boolean numpy matrix.
    """
    try:
        matrix = np.asarray(relation)
    except ValueError as e:
        raise InvalidInputError("Dependency relation is not a matrix: {}".format(e)) from e

    if matrix.ndim != 2 or matrix.shape != (num_tasks, num_tasks):
        raise InvalidInputError("Dependency relation has to be a {0}x{0} matrix, got shape {1}"
                                .format(num_tasks, matrix.shape))
    if matrix.dtype.kind not in "biuf":
        raise InvalidInputError("Dependency relation has to contain only 0 or 1")

    invalid = np.argwhere(~np.isin(matrix, (0, 1)))
    if len(invalid):
        i, j = invalid[0]
        raise InvalidInputError("Dependency relation has to contain only 0 or 1, "
                                "found {!r} at ({}, {})".format(matrix[i, j], i, j))
    return matrix.astype(bool)


def validate_input(num_tasks, relation, durations):
    num_tasks = validate_task_count(num_tasks)
    matrix = validate_relation(num_tasks, relation)
    durations = validate_durations(num_tasks, durations)
    return num_tasks, matrix, durations


def build_task_graph(num_tasks, relation, durations, names=None):
    """
    Builds a task graph from the dependency relation.

    ``relation[i][j] == 1`` means that task ``i`` depends on task ``j``,
    i.e. ``j`` has to finish before ``i`` may start. Self-loops are kept,
    they are rejected later as cycles.
    """
    num_tasks, matrix, durations = validate_input(num_tasks, relation, durations)
    if names is not None and len(names) != num_tasks:
        raise InvalidInputError("Expected {} names, got {}".format(num_tasks, len(names)))

    graph = TaskGraph()
    for (i, duration) in enumerate(durations):
        graph.new_task(names[i] if names else None, duration=duration)

    tasks = graph.tasks
    for (i, j) in np.argwhere(matrix):
        tasks[int(i)].add_predecessor(tasks[int(j)])

    logger.debug("Built task graph with %s tasks and %s dependencies",
                 num_tasks, int(matrix.sum()))
    return graph


def build_task_graph_from_dependencies(durations, dependencies):
    """
    Builds a task graph from an adjacency mapping ``{task_id: [predecessor_id, ...]}``.
    """
    num_tasks = validate_task_count(len(durations))
    durations = validate_durations(num_tasks, durations)

    def check_id(value):
        if not _is_integer(value) or not 0 <= value < num_tasks:
            raise InvalidInputError("Task id {!r} is out of range [0, {})"
                                    .format(value, num_tasks))
        return int(value)

    graph = TaskGraph()
    for duration in durations:
        graph.new_task(duration=duration)

    tasks = graph.tasks
    for task_id, pred_ids in dependencies.items():
        task = tasks[check_id(task_id)]
        for pred_id in pred_ids:
            task.add_predecessor(tasks[check_id(pred_id)])
    return graph
