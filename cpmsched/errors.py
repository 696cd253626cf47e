class ScheduleError(Exception):
    """ Base class of all errors raised by the scheduling engine """


class InvalidInputError(ScheduleError, ValueError):
    """ Task count, dependency relation or durations are malformed """


class CycleError(ScheduleError):
    """ The dependency relation is not acyclic, the schedule is undefined """

    def __init__(self, message, cycle=None):
        super().__init__(message)
        self.cycle = cycle


class InvalidStateError(ScheduleError):
    """ A scheduling stage was invoked out of order """
