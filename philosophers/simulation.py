"""Threaded dining-philosophers simulation."""

from __future__ import annotations

import sys
import threading
import time
from enum import Enum, auto
from typing import TextIO

from philosophers.parsing import Config

_POLL_INTERVAL = 0.000025
_MONITOR_INTERVAL = 0.0001
_EVEN_START_DELAY_US = 30000


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


class State(Enum):
    """Events a philosopher can report."""

    FORK1 = auto()
    FORK2 = auto()
    THINKING = auto()
    EATING = auto()
    SLEEPING = auto()
    DEAD = auto()


_MESSAGES = {
    State.FORK1: "has taken a fork",
    State.FORK2: "has taken a fork",
    State.THINKING: "is thinking",
    State.EATING: "is eating",
    State.SLEEPING: "is sleeping",
    State.DEAD: "died",
}


class Philosopher:
    """One seat at the table, with the two forks it reaches for in order."""

    def __init__(
        self,
        simulation: Simulation,
        index: int,
        first_fork: threading.Lock,
        second_fork: threading.Lock,
    ) -> None:
        self.simulation = simulation
        self.pos = index + 1
        self.meals_count = 0
        self.first_fork = first_fork
        self.second_fork = second_fork
        self._state_lock = threading.Lock()
        self._finished = False
        self._last_meal = 0
        self.thread: threading.Thread | None = None

    @property
    def finished(self) -> bool:
        """Whether this philosopher has eaten the required number of meals."""
        with self._state_lock:
            return self._finished

    @property
    def last_meal(self) -> int:
        """Time in milliseconds when the last meal started."""
        with self._state_lock:
            return self._last_meal

    def _mark_meal(self) -> None:
        with self._state_lock:
            self._last_meal = now_ms()

    def report(self, state: State) -> None:
        """Print a state change unless this philosopher is done or the run ended."""
        if self.finished:
            return
        sim = self.simulation
        with sim._print_lock:
            if state is not State.DEAD and sim.is_over():
                return
            stamp = now_ms() - sim.start_time
            sim.out.write(f"{stamp} {self.pos} {_MESSAGES[state]}\n")
            sim.out.flush()

    def eat(self) -> None:
        """Take both forks, eat, and mark completion once the meal limit is hit."""
        sim = self.simulation
        with self.first_fork:
            self.report(State.FORK1)
            with self.second_fork:
                self.report(State.FORK2)
                self._mark_meal()
                self.meals_count += 1
                self.report(State.EATING)
                sim.sleep(sim.config.time_to_eat)
                limit = sim.config.max_meals
                if limit is not None and self.meals_count == limit:
                    with self._state_lock:
                        self._finished = True

    def think(self, silent: bool) -> None:
        """Think; with an odd table, pause a little to let neighbours eat."""
        if not silent:
            self.report(State.THINKING)
        config = self.simulation.config
        if config.philosophers % 2 == 0:
            return
        time_to_think = max(config.time_to_eat * 2 - config.time_to_sleep, 0)
        self.simulation.sleep(time_to_think * 0.1)

    def _starved(self) -> bool:
        if self.finished:
            return False
        elapsed = now_ms() - self.last_meal
        return elapsed > self.simulation.config.time_to_die // 1000

    def _arrive(self) -> None:
        sim = self.simulation
        sim._started.wait()
        self._mark_meal()
        with sim._data_lock:
            sim._active += 1

    def _run_alone(self) -> None:
        self._arrive()
        self.report(State.FORK1)
        while not self.simulation.is_over():
            time.sleep(0.0001)

    def _run(self) -> None:
        sim = self.simulation
        config = sim.config
        self._arrive()
        if config.philosophers % 2 == 0:
            if self.pos % 2 == 0:
                sim.sleep(_EVEN_START_DELAY_US)
        elif self.pos % 2:
            self.think(True)
        while not sim.is_over() and not self.finished:
            self.eat()
            self.report(State.SLEEPING)
            sim.sleep(config.time_to_sleep)
            self.think(False)


class Simulation:
    """A table of philosophers sharing forks, watched by a monitor thread."""

    def __init__(self, config: Config, out: TextIO | None = None) -> None:
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.start_time = 0
        self._data_lock = threading.Lock()
        self._print_lock = threading.Lock()
        self._started = threading.Event()
        self._over = False
        self._active = 0
        self._monitor: threading.Thread | None = None
        count = config.philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = []
        for index in range(count):
            left = self.forks[index]
            right = self.forks[(index + 1) % count]
            if index % 2 == 0:
                first, second = left, right
            else:
                first, second = right, left
            self.philosophers.append(Philosopher(self, index, first, second))

    def is_over(self) -> bool:
        """Whether the simulation has ended."""
        with self._data_lock:
            return self._over

    def _end(self) -> None:
        with self._data_lock:
            self._over = True

    def sleep(self, duration_us: float) -> None:
        """Wait for about *duration_us* microseconds, returning early if the run ends."""
        start = now_ms() * 1000
        while now_ms() * 1000 - start < duration_us:
            if self.is_over():
                break
            time.sleep(_POLL_INTERVAL)

    def _all_active(self) -> bool:
        with self._data_lock:
            return self._active == self.config.philosophers

    def _watch(self) -> None:
        while not self._all_active():
            time.sleep(_MONITOR_INTERVAL)
        while not self.is_over():
            for philosopher in self.philosophers:
                if self.is_over():
                    break
                if philosopher._starved():
                    self._end()
                    philosopher.report(State.DEAD)
            time.sleep(_MONITOR_INTERVAL)

    def start(self) -> None:
        """Start the philosopher and monitor threads and release them together."""
        if self.config.max_meals == 0:
            return
        if self.config.philosophers == 1:
            only = self.philosophers[0]
            only.thread = threading.Thread(target=only._run_alone, daemon=True)
            only.thread.start()
        else:
            for philosopher in self.philosophers:
                philosopher.thread = threading.Thread(
                    target=philosopher._run, daemon=True
                )
                philosopher.thread.start()
        self._monitor = threading.Thread(target=self._watch, daemon=True)
        self._monitor.start()
        self.start_time = now_ms()
        self._started.set()

    def join(self) -> None:
        """Wait for every philosopher, end the run and wait for the monitor."""
        for philosopher in self.philosophers:
            if philosopher.thread is not None:
                philosopher.thread.join()
        self._end()
        if self._monitor is not None:
            self._monitor.join()

    def run(self) -> None:
        """Run the whole simulation to completion."""
        self.start()
        self.join()