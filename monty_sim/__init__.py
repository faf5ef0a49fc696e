"""Public package surface for the generalized Monty Hall simulator."""

from .models import ConfigError, RunStatistics, TrialOutcome, TrialResult
from .prng import MCG128, RngId, SFCCounter, SFCPCGCounter
from .sim import DEFAULT_SEED, MontySimulator, SimConfig, configure, play_trial, run_monty_sim

__all__ = [
    "ConfigError",
    "DEFAULT_SEED",
    "MCG128",
    "MontySimulator",
    "RngId",
    "RunStatistics",
    "SFCCounter",
    "SFCPCGCounter",
    "SimConfig",
    "TrialOutcome",
    "TrialResult",
    "configure",
    "play_trial",
    "run_monty_sim",
]
