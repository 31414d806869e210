# philosophers

A simulation of the dining philosophers problem. A number of philosophers sit
around a table with one fork between each pair of neighbours. Each philosopher
runs in its own thread. Over and over, it takes two forks, eats, sleeps and
thinks. A monitor thread watches all of them. The simulation stops as soon as
one of them goes too long without starting a meal.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals_per_philosopher]
```

- `number_of_philosophers`: from 1 to 200.
- `time_to_die`: the longest time, in milliseconds, that a philosopher may go
  without starting a meal. The clock starts when the simulation starts and
  restarts at the start of each meal. A philosopher dies once that time is
  exceeded.
- `time_to_eat`: how long a meal takes, in milliseconds. The philosopher holds
  both forks while eating.
- `time_to_sleep`: how long a philosopher sleeps after a meal, in milliseconds.
- `meals_per_philosopher` (optional): a philosopher stops once it has eaten
  this many times. The program ends when every philosopher has stopped. If
  this is `0`, no threads are started and the program exits at once.

With a single philosopher there is only one fork. That philosopher takes the
fork, never eats, and dies after `time_to_die`.

Each change of state is printed on its own line. A line holds the milliseconds
since the start, then the philosopher's number (counted from 1), then the
message:

```
$ philo 5 800 200 200 3
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
...
```

The messages are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Nothing is printed after a death. A philosopher that
has eaten its required number of meals prints nothing more.

The program prints `Error: ...` and exits with status 1 in these cases:

- there are not four or five arguments;
- an argument contains a letter;
- a `+` or `-` sign appears anywhere but at the start of an argument;
- there are more than 200 philosophers;
- a value is zero or negative, or is too large for a 32-bit integer.

If the arguments are accepted, the exit status is 0.

## Use from Python

```python
import sys

from philosophers.parsing import ConfigError, parse_config
from philosophers.simulation import Simulation

try:
    config = parse_config(["4", "410", "200", "200", "5"])
except ConfigError as exc:
    print(f"Error: {exc}")
else:
    Simulation(config, sys.stdout).run()
```

`parse_config` takes the operands only, without the program name. It returns a
frozen `Config` dataclass with these fields:

- `philosophers`
- `time_to_die`, `time_to_eat` and `time_to_sleep`, held in microseconds
- `max_meals`, which is `None` when no meal count was given

`ConfigError` is a subclass of `ValueError`.

The helpers `parse_long`, `check_no_letters` and `check_signs` are also
available in `philosophers.parsing`.

`Simulation(config, out)` writes its lines to `out`, or to standard output if
`out` is not given. It has these methods:

- `run()` runs the simulation to the end.
- `start()` launches the threads.
- `join()` waits for the philosophers to finish and then stops the monitor.
- `is_over()` reports whether the run has ended.

The command-line entry point is `philosophers.cli.main(argv=None)`. It returns
the exit status.

## Running the tests

```
pip install .[test]
pytest
```