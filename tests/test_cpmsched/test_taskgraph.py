from cpmsched.common import Task, TaskGraph
from cpmsched.generators import chain


def test_add_predecessor_keeps_lists_sorted_and_unique():
    graph = TaskGraph()
    a, b, c = [graph.new_task(duration=1) for _ in range(3)]

    c.add_predecessor(b)
    c.add_predecessor(a)
    c.add_predecessor(b)

    assert c.predecessors == [a, b]
    assert a.successors == [c]
    assert b.successors == [c]
    assert graph.source_tasks() == [a, b]
    assert graph.leaf_tasks() == [c]
    assert list(graph.arcs) == [(a, c), (b, c)]
    graph.validate()


def test_task_graph_copy(plan1):
    task_graph = plan1.copy()

    task_graph.validate()

    assert set(task_graph.tasks) == set(plan1.tasks)

    for task_id in task_graph.tasks:
        t1 = task_graph.tasks[task_id]
        t2 = plan1.tasks[task_id]
        assert id(t1) != id(t2)
        assert t1.id == t2.id
        assert t1.name == t2.name
        assert t1.duration == t2.duration
        assert [t.id for t in t1.predecessors] == [t.id for t in t2.predecessors]
        assert [t.id for t in t1.successors] == [t.id for t in t2.successors]
        for p in t1.predecessors:
            assert task_graph.tasks[p.id] is p


def test_task_graph_to_matrix(plan1, plan1_relation):
    assert plan1.to_matrix() == plan1_relation
    assert plan1.durations == [2, 3, 2, 1, 1, 6, 1, 1]


def test_task_graph_export_dot(tmpdir):
    graph = chain([3, 2, 4])
    name = str(tmpdir.join("test.dot"))
    graph.write_dot(name)
    with open(name) as f:
        content = f.read()
    assert content.count("\n") == 7
    assert "t0 -> t1\n" in content
    assert "t1 -> t2\n" in content


def test_task_copy():
    task = Task(123, "x", duration=5)
    task.early_start = 3

    copy = task.simple_copy()
    assert copy.id == 123
    assert copy.name == "x"
    assert copy.duration == task.duration
    assert copy.early_start is None
    assert not copy.has_times


def test_task_label():
    assert Task(1, "build").label == "build"
    assert Task(2).label == "id=2"
    assert repr(Task(3, "x", 4)) == "<T 'x' id=3 d=4>"
