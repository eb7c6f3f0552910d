"""Example: drive the directory through the service layer (no console).

The console loop is only a thin layer; the same commands can be fed from any
list of lines.
"""

from src.employee_directory.employee_directory.console.loop import run_loop
from src.employee_directory.employee_directory.console.output import ListOutput
from src.employee_directory.employee_directory.console.sources import IterableLineSource
from src.employee_directory.employee_directory.container import build_container


def main():
    container = build_container()
    out = ListOutput()
    run_loop(
        IterableLineSource(["Add Sally to Engineering", "Add Amir to Sales", "List all", "quit"]),
        container.controller,
        out,
    )
    print("\n".join(out.lines))


if __name__ == "__main__":
    main()
