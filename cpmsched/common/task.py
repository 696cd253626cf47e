from .taskbase import TaskBase


class Task(TaskBase):

    def __init__(self, task_id, name=None, duration=0):
        assert duration >= 0
        super().__init__(task_id)

        self.name = name
        self.duration = duration
        self.reset_times()

    def reset_times(self):
        self.early_start = None
        self.early_finish = None
        self.late_start = None
        self.late_finish = None
        self.slack = None
        self.free_slack = None
        self.max_length = None

    @property
    def has_times(self):
        return self.slack is not None

    @property
    def is_critical(self):
        return self.slack == 0

    @property
    def label(self):
        if self.name:
            return self.name
        else:
            return "id={}".format(self.id)

    def simple_copy(self):
        return Task(self.id, self.name, duration=self.duration)

    def __repr__(self):
        if self.name:
            name = " '" + self.name + "'"
        else:
            name = ""
        return "<T{} id={} d={}>".format(name, self.id, self.duration)

    def validate(self):
        assert isinstance(self.duration, int)
        assert self.duration >= 0
        assert len(self.predecessors) == len(set(self.predecessors))
        assert len(self.successors) == len(set(self.successors))

        if self.has_times:
            assert self.early_finish == self.early_start + self.duration
            assert self.late_finish - self.late_start == self.duration
            assert self.slack == self.late_start - self.early_start
            assert self.slack >= 0
            assert 0 <= self.free_slack <= self.slack
