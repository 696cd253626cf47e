import logging
import sys

import click
import numpy as np

from .errors import CycleError, InvalidInputError
from .generators import GENERATORS, random_dag
from .generators.randomized import DURATIONS
from .planning import MAX_CHAINS, ScheduleRun, UndefinedSchedule, build_task_graph
from .serialization import json_deserialize, json_serialize, schedule_to_json

logger = logging.getLogger(__name__)


def parse_numbers(line, what):
    try:
        return [int(v) for v in line.replace(",", " ").split()]
    except ValueError:
        raise InvalidInputError("{} has to contain only integers, got {!r}".format(what, line))


def read_problem():
    num_tasks = click.prompt("Enter the number of tasks", type=int)
    if num_tasks <= 0:
        raise InvalidInputError("Task count has to be positive, not {}".format(num_tasks))

    click.echo("Enter the matrix rows (only 0 or 1), "
               "1 in row i and column j means task i depends on task j")
    relation = [parse_numbers(click.prompt("Row {}".format(i)), "Row {}".format(i))
                for i in range(num_tasks)]
    durations = parse_numbers(click.prompt("Enter the durations of tasks"), "Durations")
    return build_task_graph(num_tasks, relation, durations)


def run_graph(graph, max_chains=MAX_CHAINS):
    try:
        return ScheduleRun(graph, max_chains).run()
    except CycleError as e:
        return UndefinedSchedule(e)


def print_schedule(schedule):
    if not schedule.defined:
        click.echo(schedule.message, err=True)
        return
    click.echo()
    click.echo(schedule.format_table())
    click.echo()
    click.echo("Critical path tasks: {}".format(
        " ".join(str(i) for i in schedule.critical_path)))
    for chain in schedule.critical_chains:
        click.echo("Critical chain: {}".format(" -> ".join(str(i) for i in chain)))
    click.echo("Length of critical path: {}".format(schedule.project_duration))


def write_outputs(graph, schedule, csv, dot):
    if csv and schedule.defined:
        schedule.to_csv(csv)
        logger.info("Schedule written to %s", csv)
    if dot:
        graph.write_dot(dot, verbose=schedule.defined)
        logger.info("Task graph written to %s", dot)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show progress information.")
def main(verbose):
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")


@main.command("run")
@click.option("--input", "input_file", type=click.File("r"),
              help="JSON problem document, interactive input when missing.")
@click.option("--json", "as_json", is_flag=True, help="Print the schedule as JSON.")
@click.option("--csv", type=click.Path(dir_okay=False), help="Write the schedule table as CSV.")
@click.option("--dot", type=click.Path(dir_okay=False), help="Write the task graph in DOT format.")
@click.option("--max-chains", type=click.IntRange(min=1), default=MAX_CHAINS,
              show_default=True, help="Maximal number of critical chains to list.")
def run_cmd(input_file, as_json, csv, dot, max_chains):
    """Compute the critical path schedule."""
    if input_file is not None:
        try:
            graph = json_deserialize(input_file.read())
        except InvalidInputError as e:
            schedule = UndefinedSchedule(e)
        else:
            schedule = run_graph(graph, max_chains)
            write_outputs(graph, schedule, csv, dot)

        if as_json:
            click.echo(schedule_to_json(schedule))
        else:
            print_schedule(schedule)
        if not schedule.defined:
            sys.exit(1)
        return

    while True:
        try:
            graph = read_problem()
        except InvalidInputError as e:
            print_schedule(UndefinedSchedule(e))
        else:
            schedule = run_graph(graph, max_chains)
            write_outputs(graph, schedule, csv, dot)
            if as_json:
                click.echo(schedule_to_json(schedule))
            else:
                print_schedule(schedule)
        if not click.confirm("\nAgain?", default=False):
            break


@main.command("generate")
@click.argument("kind", type=click.Choice(sorted(list(GENERATORS) + ["random"])))
@click.argument("count", type=click.IntRange(min=1))
@click.option("--seed", type=int, default=None)
@click.option("--edge-probability", type=float, default=0.2,
              help="Probability of a dependency between two tasks (random only).")
@click.option("--output", type=click.File("w"), default="-")
def generate_cmd(kind, count, seed, edge_probability, output):
    """Generate a problem document."""
    if kind == "random":
        graph = random_dag(count, edge_probability, seed)
    else:
        rs = np.random.RandomState(seed)
        durations = [int(d) for d in rs.choice(DURATIONS[1:], count)]
        graph = GENERATORS[kind](durations)
    output.write(json_serialize(graph))
    output.write("\n")


if __name__ == "__main__":
    main()
