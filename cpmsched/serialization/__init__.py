from .problem_json import json_deserialize, json_serialize, schedule_to_json  # noqa
