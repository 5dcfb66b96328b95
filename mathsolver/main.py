import sys
from typing import TextIO

import click

from mathsolver.helper import setup_logging
from mathsolver.solver import MathSolver, Solution


def format_solution(solution: Solution) -> str:
    if solution.ok:
        return f"{solution.expression} = {solution.value}\n"
    error = solution.error
    return f"{solution.expression} ! {error.kind.name}: {error.message}\n"


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("--lenient", is_flag=True, envvar="MATHSOLVER_LENIENT")
@click.option("--right-assoc", is_flag=True)
@click.option("--trace", is_flag=True, envvar="MATHSOLVER_TRACE")
def main(filename: TextIO, output: TextIO, lenient: bool, right_assoc: bool, trace: bool):
    """Evaluate every non-blank line of FILENAME, one expression per line."""
    setup_logging(trace)
    solver = MathSolver(strict=not lenient, left_associative=not right_assoc)
    failed = 0
    for line in filename:
        expression = line.strip()
        if not expression:
            continue
        solution = solver.solve(expression)
        if not solution.ok:
            failed += 1
        output.write(format_solution(solution))
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
