from typing import Dict, List


class TaskBase:

    def __init__(self, id: int, predecessors: List["TaskBase"] = None,
                 successors: List["TaskBase"] = None):
        self.id = id
        self.predecessors = predecessors if predecessors is not None else []
        self.successors = successors if successors is not None else []

    @property
    def is_source(self):
        return not self.predecessors

    @property
    def is_sink(self):
        return not self.successors

    def add_predecessor(self, task: "TaskBase"):
        if task in self.predecessors:
            return
        self.predecessors.append(task)
        self.predecessors.sort(key=lambda t: t.id)
        task.successors.append(self)
        task.successors.sort(key=lambda t: t.id)

    def add_predecessors(self, tasks):
        for t in tasks:
            self.add_predecessor(t)


class TaskGraphBase:

    def __init__(self, tasks: Dict[int, TaskBase] = None):
        self.tasks = tasks or {}

    def source_tasks(self):
        return [t for t in self.tasks.values() if t.is_source]

    def leaf_tasks(self):
        return [t for t in self.tasks.values() if t.is_sink]

    @property
    def arcs(self):
        for task in self.tasks.values():
            for t in task.predecessors:
                yield (t, task)

    def validate(self):
        tasks = self.tasks
        for task_id, task in tasks.items():
            assert task.id == task_id
            task.validate()

            for p in task.predecessors:
                assert tasks[p.id] is p
                assert task in p.successors

            for s in task.successors:
                assert tasks[s.id] is s
                assert task in s.predecessors

    @property
    def task_count(self):
        return len(self.tasks)

    def __repr__(self):
        return "<{} #t={}>".format(self.__class__.__name__, len(self.tasks))
