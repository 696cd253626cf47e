import pytest

from cpmsched.planning import build_task_graph

PLAN1_DURATIONS = [2, 3, 2, 1, 1, 6, 1, 1]


@pytest.fixture
def plan1_relation():
    """
        a0/2 a1/3
        |    |
        a2/2 | a3/1
        |\\  / /|
        | a4/1 a5/6 a6/1
        |  \\   |   /
        |   \\  |  /
         \\--- a7/1
    """  # noqa
    relation = [[0] * 8 for _ in range(8)]
    for task, preds in [(2, [0]), (4, [1, 2, 3]), (5, [3]), (7, [2, 4, 5, 6])]:
        for p in preds:
            relation[task][p] = 1
    return relation


@pytest.fixture
def plan1(plan1_relation):
    graph = build_task_graph(8, plan1_relation, PLAN1_DURATIONS,
                             ["a{}".format(i) for i in range(8)])
    graph.validate()
    return graph


def chain_relation(count):
    relation = [[0] * count for _ in range(count)]
    for i in range(1, count):
        relation[i][i - 1] = 1
    return relation


def check_schedule_invariants(schedule):
    assert schedule.defined
    for e in schedule.entries:
        assert e.early_finish == e.early_start + e.duration
        assert e.late_finish - e.late_start == e.duration
        assert e.slack == e.late_finish - e.early_finish == e.late_start - e.early_start
        assert e.slack >= 0
        assert 0 <= e.free_slack <= e.slack
        assert e.max_length == schedule.project_duration - e.slack

    if schedule.entries:
        assert schedule.project_duration == max(e.early_finish for e in schedule.entries)
        assert schedule.project_duration == max(e.late_finish for e in schedule.entries)
        assert schedule.critical_path
        assert schedule.critical_chains
    assert schedule.critical_path == [e.id for e in schedule.entries if e.slack == 0]
    for chain in schedule.critical_chains:
        assert sum(schedule.entry(i).duration for i in chain) == schedule.project_duration


def layered_relation(width, depth):
    """
    Every task of a layer depends on every task of the previous layer,
    the number of source-to-sink chains is width ** depth.
    """
    count = width * depth
    relation = [[0] * count for _ in range(count)]
    for layer in range(1, depth):
        for i in range(width):
            for j in range(width):
                relation[layer * width + i][(layer - 1) * width + j] = 1
    return relation
