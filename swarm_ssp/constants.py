"""Package‑wide defaults for the swarm solver."""

# Instance shape used by the CLI when no ``--size`` is given.
DEFAULT_SIZE = 12

# Weights are drawn uniformly from [1, MAX_WEIGHT].
MAX_WEIGHT = 100

# Pause between two iterations of any agent, in seconds.
POLL_INTERVAL = 0.002

__all__ = [
    "DEFAULT_SIZE",
    "MAX_WEIGHT",
    "POLL_INTERVAL",
]
