from enum import IntEnum


class Color(IntEnum):
    White = 0
    Gray = 1
    Black = 2


def find_cycle(graph):
    """
    Returns a list of tasks forming a cycle in the graph or None if the graph is acyclic.

    Depth-first search with three colors, Gray tasks are on the current path.
    The traversal is iterative, each stack frame holds a task and the index
    of its next successor to explore.
    """
    color = {task_id: Color.White for task_id in graph.tasks}

    for root in graph.tasks.values():
        if color[root.id] != Color.White:
            continue

        color[root.id] = Color.Gray
        stack = [(root, 0)]
        while stack:
            task, index = stack[-1]
            if index == len(task.successors):
                color[task.id] = Color.Black
                stack.pop()
                continue

            stack[-1] = (task, index + 1)
            succ = task.successors[index]
            if color[succ.id] == Color.Gray:
                path = [t for t, _ in stack]
                return path[path.index(succ):]
            if color[succ.id] == Color.White:
                color[succ.id] = Color.Gray
                stack.append((succ, 0))
    return None


def has_cycle(graph):
    return find_cycle(graph) is not None
