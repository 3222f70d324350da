"""Command line entry point: run the hospital simulation from a file."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable

from .simulation import SimulationInputError, load_hospital

_PROGRAM = "triagesim"


def _timed(action: Callable[[], object]) -> float:
    start = time.perf_counter()
    action()
    return time.perf_counter() - start


def main(argv=None) -> int:
    """Simulate the hospital described by the named file and report the run time."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(f"Uso: {_PROGRAM} <nome_do_arquivo>", file=sys.stderr)
        return 1
    try:
        hospital = load_hospital(args[0])
    except SimulationInputError as exc:
        print(exc, file=sys.stderr)
        return 1

    hospital.simulate()
    elapsed = _timed(hospital.simulate)
    print(f"Tempo de execução: {elapsed:g} segundos")
    return 0


if __name__ == "__main__":
    sys.exit(main())