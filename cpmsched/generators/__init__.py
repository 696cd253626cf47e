from .elementary import chain, diamond, fork, independent, join  # noqa
from .randomized import random_dag, random_relation  # noqa

GENERATORS = {
    "chain": chain,
    "independent": independent,
    "fork": lambda durations: fork(durations[0], durations[1:]),
    "join": lambda durations: join(durations[:-1], durations[-1]),
}
