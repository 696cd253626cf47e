import collections

import pandas as pd

from ..errors import CycleError

ScheduleEntry = collections.namedtuple(
    "ScheduleEntry", ["id", "duration", "early_start", "early_finish",
                      "late_start", "late_finish", "slack", "free_slack", "max_length"])

COLUMNS = list(ScheduleEntry._fields)


class Schedule:
    """
    Result of a successful scheduling run.

    Holds a snapshot of computed times, it does not reference the task graph
    it was computed from.
    """

    defined = True

    def __init__(self, entries, project_duration, critical_path, critical_chains=()):
        self.entries = tuple(entries)
        self.project_duration = project_duration
        self.critical_path = list(critical_path)
        self.critical_chains = [list(c) for c in critical_chains]

    @classmethod
    def from_task_graph(cls, graph, project_duration, critical_path, critical_chains=()):
        entries = [ScheduleEntry(t.id, t.duration, t.early_start, t.early_finish,
                                 t.late_start, t.late_finish, t.slack, t.free_slack,
                                 t.max_length)
                   for t in sorted(graph.tasks.values(), key=lambda t: t.id)]
        return cls(entries, project_duration, [t.id for t in critical_path], critical_chains)

    @property
    def task_count(self):
        return len(self.entries)

    def entry(self, task_id):
        return self.entries[task_id]

    def to_dict(self):
        return {
            "project_duration": self.project_duration,
            "critical_path": list(self.critical_path),
            "critical_chains": [list(c) for c in self.critical_chains],
            "tasks": [e._asdict() for e in self.entries],
        }

    def to_dataframe(self):
        return pd.DataFrame([list(e) for e in self.entries], columns=COLUMNS)

    def to_csv(self, filename):
        self.to_dataframe().to_csv(filename, index=False)

    def format_table(self):
        if not self.entries:
            return "(no tasks)"
        frame = self.to_dataframe()[["id", "early_start", "early_finish",
                                     "late_start", "late_finish", "slack",
                                     "max_length"]]
        return frame.to_string(index=False)

    def __eq__(self, other):
        if not isinstance(other, Schedule):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return "<Schedule #t={} duration={} critical={}>".format(
            len(self.entries), self.project_duration, self.critical_path)


class UndefinedSchedule:
    """
    Result of a scheduling run rejected because of malformed input or a cyclic relation.
    """

    defined = False
    entries = ()
    project_duration = None
    critical_path = ()

    def __init__(self, error):
        self.error = error

    @property
    def is_cyclic(self):
        return isinstance(self.error, CycleError)

    @property
    def cycle(self):
        return self.error.cycle if self.is_cyclic else None

    @property
    def message(self):
        if self.is_cyclic:
            return "Schedule is undefined: {}".format(self.error)
        return "Invalid input: {}".format(self.error)

    def to_dict(self):
        return {
            "error": self.message,
            "cycle": self.cycle,
        }

    def __repr__(self):
        return "<UndefinedSchedule {!r}>".format(str(self.error))
