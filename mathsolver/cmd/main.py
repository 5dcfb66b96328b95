import typer

from mathsolver.errors import MathSolverError
from mathsolver.helper import setup_logging
from mathsolver.solver import MathSolver

app = typer.Typer(help="Evaluate whitespace separated integer arithmetic.")

BANNER = "=== Simple Math Solver ==="
PROMPT = ">>"
EXIT_WORDS = {"exit", "Exit", "quit"}

LenientOption = typer.Option(
    False,
    "--lenient",
    envvar="MATHSOLVER_LENIENT",
    help="Drop unrecognized tokens instead of failing.",
)
RightAssocOption = typer.Option(
    False,
    "--right-assoc",
    help="Keep equal precedence operators stacked (groups a - b - c as a - (b - c)).",
)
TraceOption = typer.Option(
    False, "--trace", envvar="MATHSOLVER_TRACE", help="Log tokens and postfix output."
)


def build_solver(lenient: bool, right_assoc: bool) -> MathSolver:
    return MathSolver(strict=not lenient, left_associative=not right_assoc)


@app.command("eval", context_settings={"ignore_unknown_options": True})
def eval_command(
    expression: list[str] = typer.Argument(..., help="Expression to evaluate."),
    lenient: bool = LenientOption,
    right_assoc: bool = RightAssocOption,
    trace: bool = TraceOption,
):
    setup_logging(trace)
    solver = build_solver(lenient, right_assoc)
    try:
        result = solver.evaluate(" ".join(expression))
    except MathSolverError as err:
        typer.echo(err.describe(), err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Result\t: {result}")


@app.command("repl")
def repl_command(
    lenient: bool = LenientOption,
    right_assoc: bool = RightAssocOption,
    trace: bool = TraceOption,
):
    setup_logging(trace)
    solver = build_solver(lenient, right_assoc)
    typer.echo(BANNER)
    while True:
        try:
            line = typer.prompt(
                PROMPT, default="", show_default=False, prompt_suffix=" "
            )
        except typer.Abort:
            break
        if line.strip() in EXIT_WORDS:
            break
        if not line.strip():
            continue
        solution = solver.solve(line)
        if solution.ok:
            typer.echo(f"Result\t: {solution.value}")
        else:
            typer.echo(solution.error.describe(), err=True)


if __name__ == "__main__":
    app()
