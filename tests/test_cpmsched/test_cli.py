import json

from click.testing import CliRunner

from cpmsched.cli import main
from .test_utils import layered_relation


def write_problem(tmpdir, relation, durations):
    name = str(tmpdir.join("problem.json"))
    with open(name, "w") as f:
        json.dump({"num_tasks": len(durations), "relation": relation,
                   "durations": durations}, f)
    return name


def test_cli_run_file(tmpdir):
    problem = write_problem(tmpdir, [[0, 0, 0], [1, 0, 0], [0, 1, 0]], [3, 2, 4])
    csv = str(tmpdir.join("schedule.csv"))
    dot = str(tmpdir.join("graph.dot"))

    result = CliRunner().invoke(main, ["run", "--input", problem, "--csv", csv, "--dot", dot])
    assert result.exit_code == 0
    assert "Critical path tasks: 0 1 2" in result.output
    assert "Length of critical path: 9" in result.output

    with open(csv) as f:
        assert f.read().count("\n") == 4
    with open(dot) as f:
        assert "style=bold" in f.read()


def test_cli_run_file_json(tmpdir):
    problem = write_problem(tmpdir, [[0, 0, 0], [0, 0, 0], [0, 0, 0]], [3, 2, 4])
    result = CliRunner().invoke(main, ["run", "--input", problem, "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["project_duration"] == 4
    assert data["critical_path"] == [2]


def test_cli_run_file_cycle(tmpdir):
    problem = write_problem(tmpdir, [[0, 1], [1, 0]], [3, 2])
    result = CliRunner().invoke(main, ["run", "--input", problem])
    assert result.exit_code == 1
    assert "cycle" in result.output


def test_cli_run_file_invalid(tmpdir):
    problem = write_problem(tmpdir, [[0, 2], [1, 0]], [3, 2])
    result = CliRunner().invoke(main, ["run", "--input", problem])
    assert result.exit_code == 1
    assert "Invalid input" in result.output


def test_cli_run_interactive():
    result = CliRunner().invoke(main, ["run"],
                                input="3\n0 0 0\n1 0 0\n0 1 0\n3 2 4\ny\n"
                                      "2\n0 1\n1 0\n1 1\nn\n")
    assert result.exit_code == 0
    assert "Critical path tasks: 0 1 2" in result.output
    assert "Length of critical path: 9" in result.output
    assert "Schedule is undefined" in result.output


def test_cli_run_interactive_invalid_row():
    result = CliRunner().invoke(main, ["run"], input="2\n0 x\nn\n")
    assert result.exit_code == 0
    assert "Invalid input" in result.output
    assert "Length of critical path" not in result.output


def test_cli_generate():
    runner = CliRunner()
    result = runner.invoke(main, ["generate", "chain", "4", "--seed", "1"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["num_tasks"] == 4
    assert data["relation"][3] == [0, 0, 1, 0]

    result = runner.invoke(main, ["generate", "random", "10", "--seed", "3"])
    assert result.exit_code == 0
    assert json.loads(result.output)["num_tasks"] == 10


def test_cli_run_max_chains(tmpdir):
    problem = write_problem(tmpdir, layered_relation(2, 3), [1] * 6)
    runner = CliRunner()

    result = runner.invoke(main, ["run", "--input", problem])
    assert result.exit_code == 0
    assert result.output.count("Critical chain:") == 8
    assert "max_length" in result.output

    result = runner.invoke(main, ["run", "--input", problem, "--max-chains", "2"])
    assert result.exit_code == 0
    assert result.output.count("Critical chain:") == 2
    assert "Critical chain: 0 -> 2 -> 4" in result.output
    assert "Critical path tasks: 0 1 2 3 4 5" in result.output

    result = runner.invoke(main, ["run", "--input", problem, "--max-chains", "0"])
    assert result.exit_code == 2
