"""Steady-state evolutionary search over pedal-control policies.

The population is a ring.  Each step picks a random index ``a`` and its
neighbour ``b = (a + 1) % n``; the lower-scoring of the two is overwritten
by a mutated copy of the other.  A *sweep* is ``n`` such steps followed by a
recorded re-evaluation of the best individual seen so far.

All randomness flows through a single ``numpy.random.Generator`` so that a
seeded engine replays exactly.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

import numpy as np
from loguru import logger
from numpy.random import Generator

from clutch_engine.core.mutation import mutate
from clutch_engine.core.params import SimulationParameters
from clutch_engine.core.policy import ControlPolicy
from clutch_engine.core.simulator import ClutchSimulator, SimulationResult


class EvolutionEngine:
    """Ring-topology tournament search with a best-ever record.

    Attributes:
        params: Simulation parameters (``population_size`` sets the ring size).
        simulator: Scorer used for every fitness lookup.
        rng: Random source for initialisation, pair selection and mutation.
        population: Current individuals; replaced in place, never resized.
        best: Best-scoring individual observed so far.
        sweeps: Number of completed sweeps.
    """

    def __init__(
        self,
        params: SimulationParameters,
        simulator: ClutchSimulator | None = None,
        rng: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        """Initialise a random population.

        Args:
            params: Simulation parameters.
            simulator: Optional scorer; defaults to a new
                :class:`ClutchSimulator` over *params*.
            rng: Optional random source.  Takes precedence over *seed*.
            seed: Seed for a fresh generator when *rng* is not given.
        """
        self.params: SimulationParameters = params
        self.simulator: ClutchSimulator = simulator or ClutchSimulator(params)
        self.rng: Generator = rng if rng is not None else np.random.default_rng(seed)
        self.population: list[ControlPolicy] = [
            ControlPolicy.random(self.rng) for _ in range(params.population_size)
        ]
        self.best: ControlPolicy = ControlPolicy.random(self.rng)
        self.sweeps: int = 0

    @property
    def size(self) -> int:
        return len(self.population)

    def best_score(self) -> float:
        return self.simulator.score(self.best)

    def step(self) -> int:
        """Run one tournament between ring neighbours.

        Returns:
            Index of the individual that was replaced.
        """
        a = int(self.rng.integers(self.size))
        b = (a + 1) % self.size
        score_a = self.simulator.score(self.population[a])
        score_b = self.simulator.score(self.population[b])

        if score_a > score_b:
            winner, loser = a, b
        else:
            winner, loser = b, a

        champion = self.population[winner]
        self.population[loser] = mutate(champion, self.rng)

        champion_score = self.simulator.score(champion)
        if champion_score > self.best_score():
            logger.debug(
                "New best at sweep {}: score={:.6g}", self.sweeps, champion_score
            )
            self.best = champion
        return loser

    def sweep(self) -> SimulationResult:
        """Run ``population_size`` steps, then re-evaluate the best individual.

        Returns:
            The recorded simulation of the best individual.
        """
        for _ in range(self.size):
            self.step()
        self.sweeps += 1
        result = self.simulator.rescore(self.best)
        logger.info(
            "Sweep {}: best {} score={:.6g} ({} simulations)",
            self.sweeps,
            result.outcome.value,
            result.score,
            self.simulator.runs,
        )
        return result

    def run(
        self,
        stop_event: threading.Event | None = None,
        max_sweeps: int | None = None,
        on_sweep: Callable[[SimulationResult], None] | None = None,
    ) -> SimulationResult | None:
        """Repeat sweeps until stopped.

        The stop signal is checked once per sweep, before it starts.  With
        neither *stop_event* nor *max_sweeps* the loop never returns.

        Args:
            stop_event: Set from outside to end the loop.
            max_sweeps: Optional number of sweeps to run in this call.
            on_sweep: Callback receiving each sweep's best-individual result.

        Returns:
            The last sweep's result, or None if no sweep ran.
        """
        last: SimulationResult | None = None
        completed = 0
        while max_sweeps is None or completed < max_sweeps:
            if stop_event is not None and stop_event.is_set():
                logger.info("Stop requested after {} sweeps", self.sweeps)
                break
            last = self.sweep()
            completed += 1
            if on_sweep is not None:
                on_sweep(last)
        return last

    def search(
        self,
        sweeps: int,
        on_sweep: Callable[[SimulationResult], None] | None = None,
    ) -> SimulationResult:
        """Run exactly *sweeps* sweeps with no stop signal.

        Args:
            sweeps: Number of sweeps (>= 1).
            on_sweep: Callback receiving each sweep's best-individual result.

        Returns:
            The final sweep's result.

        Raises:
            ValueError: If sweeps < 1.
        """
        if sweeps < 1:
            raise ValueError("sweeps must be >= 1.")
        result = self.sweep()
        if on_sweep is not None:
            on_sweep(result)
        for _ in range(sweeps - 1):
            result = self.sweep()
            if on_sweep is not None:
                on_sweep(result)
        return result
