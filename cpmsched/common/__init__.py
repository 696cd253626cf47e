from .task import Task  # noqa
from .taskgraph import TaskGraph  # noqa
