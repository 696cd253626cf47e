MAX_CHAINS = 100


def critical_tasks(graph):
    return [t for t in graph.tasks.values() if t.slack == 0]


def _is_tight(task, succ):
    return succ.slack == 0 and task.early_finish == succ.early_start


def find_critical_chains(graph, limit=MAX_CHAINS):
    """
    Enumerates source-to-sink chains of critical tasks where each task starts
    exactly when the previous one finishes.

    Several chains may share tasks and their number grows exponentially with
    the graph depth, so at most ``limit`` chains are returned (``None`` lifts
    the cap). Every critical task has a tight critical successor unless it is
    a sink, so each explored branch ends with a chain.
    """
    chains = []
    for source in graph.source_tasks():
        if source.slack != 0:
            continue
        stack = [(source, [source])]
        while stack:
            task, chain = stack.pop()
            if task.is_sink:
                chains.append([t.id for t in chain])
                if limit is not None and len(chains) >= limit:
                    return chains
                continue
            for succ in reversed(task.successors):
                if _is_tight(task, succ):
                    stack.append((succ, chain + [succ]))
    return chains


def find_critical_path(graph):
    """
    Returns one critical chain, following the successor with the lowest id.
    """
    chains = find_critical_chains(graph, limit=1)
    return chains[0] if chains else []
