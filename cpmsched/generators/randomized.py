import numpy as np

from ..common import TaskGraph

DURATIONS = [0, 1, 2, 3, 5, 8, 13, 21]


def random_dag(count, edge_probability=0.2, seed=None, durations=DURATIONS):
    """
    Generates a random acyclic task graph.

    Tasks are created in a random permutation order and a task may only depend
    on tasks created before it, so the ids are not a topological order.
    """
    rs = np.random.RandomState(seed)
    order = rs.permutation(count)

    g = TaskGraph()
    for _ in range(count):
        g.new_task(duration=int(rs.choice(durations)))

    for (position, task_id) in enumerate(order):
        task = g.tasks[int(task_id)]
        for pred_id in order[:position]:
            if rs.random_sample() < edge_probability:
                task.add_predecessor(g.tasks[int(pred_id)])
    return g


def random_relation(count, edge_probability=0.2, seed=None, durations=DURATIONS):
    """
    Returns (relation, durations) of a random acyclic task graph as numpy arrays.
    """
    g = random_dag(count, edge_probability, seed, durations)
    return np.array(g.to_matrix(), dtype=np.int8).reshape(count, count), np.array(g.durations)
