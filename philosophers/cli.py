"""Command-line entry point for the philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from philosophers.parsing import ConfigError, parse_config
from philosophers.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the simulation and return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_config(args)
    except ConfigError as error:
        print(f"Error: {error}")
        return 1
    try:
        Simulation(config).run()
    except RuntimeError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())