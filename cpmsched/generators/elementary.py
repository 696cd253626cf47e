from ..common import TaskGraph


def chain(durations):
    g = TaskGraph()
    prev = None
    for i, d in enumerate(durations):
        t = g.new_task("t{}".format(i), duration=int(d))
        if prev is not None:
            t.add_predecessor(prev)
        prev = t
    return g


def independent(durations):
    g = TaskGraph()
    for i, d in enumerate(durations):
        g.new_task("t{}".format(i), duration=int(d))
    return g


def fork(root_duration, durations):
    g = TaskGraph()
    root = g.new_task("root", duration=int(root_duration))
    for i, d in enumerate(durations):
        t = g.new_task("b{}".format(i), duration=int(d))
        t.add_predecessor(root)
    return g


def join(durations, sink_duration):
    g = TaskGraph()
    tasks = [g.new_task("a{}".format(i), duration=int(d)) for i, d in enumerate(durations)]
    sink = g.new_task("sink", duration=int(sink_duration))
    sink.add_predecessors(tasks)
    return g


def diamond(durations):
    """
        a
       / \\
      b   c
       \\ /
        d
    """
    a, b, c, d = [int(x) for x in durations]
    g = TaskGraph()
    ta = g.new_task("a", duration=a)
    tb = g.new_task("b", duration=b)
    tc = g.new_task("c", duration=c)
    td = g.new_task("d", duration=d)
    tb.add_predecessor(ta)
    tc.add_predecessor(ta)
    td.add_predecessors((tb, tc))
    return g
