"""A boid flock on a periodic cubic domain: mean agents, forces and time stepping."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from flockmath.vec import Vec3


@dataclass
class Agent:
    """A boid with a position, a velocity and a steering direction."""

    position: Vec3 = field(default_factory=Vec3)
    velocity: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)


@dataclass(frozen=True)
class FlockOptions:
    """Simulation parameters: weights and radii of the three rules, time step and limits."""

    n_agents: int = 640
    w_cohesion: float = 12.0
    w_alignment: float = 15.0
    w_separation: float = 35.0
    r_cohesion: float = 0.11
    r_alignment: float = 0.15
    r_separation: float = 0.01
    dt: float = 0.05
    max_vel: float = 2.0
    domain_size: float = 1.0


def _wrap(value: float, size: float) -> float:
    mod = math.fmod(value, size)
    return mod if mod > 0 else mod + size


class Flock:
    """The agents held by one process of a distributed flock."""

    def __init__(self, options: FlockOptions, rank: int = 0, root: int = 0, seed=None):
        self.options = options
        self.rank = rank
        self.root = root
        self._rng = random.Random(seed)
        self.agents: list[Agent] = []
        if rank == root:
            self.agents = [
                Agent(Vec3(self._rng.random(), self._rng.random(), self._rng.random()))
                for _ in range(options.n_agents)
            ]

    def mean_agent(self) -> Agent:
        """Return an agent placed at the mean position of the local agents."""
        if not self.agents:
            raise ValueError("the flock holds no agents")
        total = Vec3()
        for agent in self.agents:
            total += agent.position
        return Agent(position=total / float(len(self.agents)))

    def compute_and_apply_forces(
        self, mean_agents: Sequence[Agent] = (), weights: Sequence[int] = ()
    ) -> None:
        """Steer every agent from its neighbours and weighted mean agents, then step in time."""
        if len(mean_agents) != len(weights):
            raise ValueError("each mean agent needs exactly one weight")
        opt = self.options
        external = list(zip(mean_agents, weights))

        for k, agent in enumerate(self.agents):
            f_sep, f_coh, f_ali = Vec3(), Vec3(), Vec3()
            n_sep = n_coh = n_ali = 0
            for i, other in enumerate(self.agents):
                if i == k:
                    continue
                offset = agent.position - other.position
                dist = offset.norm()
                if dist < opt.r_separation:
                    f_sep -= offset.normalized()
                    n_sep += 1
                if dist < opt.r_cohesion:
                    f_coh += other.position
                    n_coh += 1
                if dist < opt.r_alignment:
                    f_ali += other.velocity
                    n_ali += 1
            for mean, weight in external:
                offset = agent.position - mean.position
                dist = offset.norm()
                if dist < opt.r_separation:
                    f_sep -= weight * offset.normalized()
                    n_sep += weight
                if dist < opt.r_cohesion:
                    f_coh += weight * mean.position
                    n_coh += weight
                if dist < opt.r_alignment:
                    f_ali += weight * mean.velocity
                    n_ali += weight
            agent.direction = (
                opt.w_separation * (f_sep / float(n_sep) if n_sep > 0 else f_sep)
                + opt.w_cohesion * (f_coh / float(n_coh) if n_coh > 0 else f_coh)
                + opt.w_alignment * (f_ali / float(n_ali) if n_ali > 0 else f_ali)
            )

        for agent in self.agents:
            agent.velocity += agent.direction
            speed = agent.velocity.norm()
            if speed > opt.max_vel:
                agent.velocity *= opt.max_vel / speed
            agent.position += opt.dt * agent.velocity
            agent.position = Vec3(_wrap(c, opt.domain_size) for c in agent.position)

    def output_path(self, directory="data") -> Path:
        """Return the XYZ file this process writes to."""
        return Path(directory) / f"boids_{self.rank:03d}.xyz"

    def save(self, step_id: int, directory="data") -> Path:
        """Write agent positions as an XYZ frame; step 0 starts a new file, others append."""
        path = self.output_path(directory)
        path.parent.mkdir(parents=True, exist_ok=True)
        mode = "w" if step_id == 0 else "a"
        with path.open(mode, encoding="ascii") as out:
            out.write("\n")
            out.write(f"{len(self.agents)}\n")
            for agent in self.agents:
                out.write(f"B {agent.position}\n")
        return path