import json

from ..errors import InvalidInputError
from ..planning.builder import build_task_graph


def json_serialize(graph):
    data = {
        "num_tasks": graph.task_count,
        "relation": graph.to_matrix(),
        "durations": graph.durations,
    }
    names = [graph.tasks[i].name for i in range(graph.task_count)]
    if any(names):
        data["names"] = names
    return json.dumps(data)


def json_deserialize(data):
    try:
        problem = json.loads(data)
    except ValueError as e:
        raise InvalidInputError("Invalid problem document: {}".format(e)) from e

    if not isinstance(problem, dict):
        raise InvalidInputError("Problem document has to be a JSON object")
    missing = [key for key in ("num_tasks", "relation", "durations") if key not in problem]
    if missing:
        raise InvalidInputError("Problem document is missing keys: {}".format(", ".join(missing)))

    return build_task_graph(problem["num_tasks"],
                            problem["relation"],
                            problem["durations"],
                            problem.get("names"))


def schedule_to_json(schedule):
    return json.dumps(schedule.to_dict())
