from .task import Task
from .taskbase import TaskGraphBase


class TaskGraph(TaskGraphBase):

    def copy(self):
        tasks = {task.id: task.simple_copy() for task in self.tasks.values()}
        for old_task in self.tasks.values():
            task = tasks[old_task.id]
            task.add_predecessors(tasks[p.id] for p in old_task.predecessors)
        return TaskGraph(tasks)

    def new_task(self, name=None, duration=0):
        task_id = len(self.tasks)
        task = Task(task_id, name, duration)
        self.tasks[task_id] = task
        return task

    @property
    def durations(self):
        return [self.tasks[i].duration for i in range(self.task_count)]

    def to_matrix(self):
        """
        Returns the dependency relation as a list of rows, where
        ``matrix[i][j] == 1`` means that task ``i`` depends on task ``j``.
        """
        n = self.task_count
        matrix = [[0] * n for _ in range(n)]
        for (pred, task) in self.arcs:
            matrix[task.id][pred.id] = 1
        return matrix

    def reset_times(self):
        for task in self.tasks.values():
            task.reset_times()

    def to_dot(self, name, verbose=False):
        stream = ["digraph ", name, " {\n"]

        for task in self.tasks.values():
            label = "{}\\n{}".format(task.label, task.duration)
            if verbose and task.has_times:
                label += "\\n{}/{} {}/{}\\ns={}".format(
                    task.early_start, task.early_finish,
                    task.late_start, task.late_finish, task.slack)
            style = ",style=bold" if task.has_times and task.is_critical else ""
            stream.append("t{} [shape=oval,label=\"{}\"{}]\n".format(task.id, label, style))

        for (pred, task) in self.arcs:
            stream.append("t{} -> t{}\n".format(pred.id, task.id))

        stream.append("}\n")
        return "".join(stream)

    def write_dot(self, filename, verbose=False):
        dot = self.to_dot("g", verbose)
        with open(filename, "w") as f:
            f.write(dot)
