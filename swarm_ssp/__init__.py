"""Agent‑swarm local search for subset sum.

The instance is encoded as a normalised QUBO matrix.  One spin agent per
variable and one coupling agent per pair nudge a shared selection vector,
each on its own thread and without any central schedule, while a verifier
keeps recomputing ``target - selected sum``.  The run ends when that error
reaches exactly zero.

Typical usage
-------------
>>> from swarm_ssp import generate_instance, SwarmSolver
>>> result = SwarmSolver(generate_instance(12)).solve()
>>> result.achieved_sum == result.target
True
"""
from importlib.metadata import version as _version  # type: ignore

from .instance import Instance, generate_instance, instance_from_weights  # noqa: F401
from .qubo import build_qubo, normalize_qubo, qubo_matrix, qubo_energy  # noqa: F401
from .state import SolutionState  # noqa: F401
from .agents import Agent, SpinAgent, CouplingAgent, build_agents  # noqa: F401
from .verification import ErrorVerifier  # noqa: F401
from .runner import run_agents  # noqa: F401
from .config import SolverConfig  # noqa: F401
from .coordinator import Phase, SolveResult, SwarmSolver  # noqa: F401

__all__ = [
    "Instance",
    "generate_instance",
    "instance_from_weights",
    "build_qubo",
    "normalize_qubo",
    "qubo_matrix",
    "qubo_energy",
    "SolutionState",
    "Agent",
    "SpinAgent",
    "CouplingAgent",
    "build_agents",
    "ErrorVerifier",
    "run_agents",
    "SolverConfig",
    "Phase",
    "SolveResult",
    "SwarmSolver",
    "__version__",
]

try:
    __version__ = _version("swarm_ssp")
except Exception:  # pragma: no cover – package not installed yet
    __version__ = "0.0.0"
