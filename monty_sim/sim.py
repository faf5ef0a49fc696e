"""Deterministic generalized Monty Hall simulation loop."""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Tuple, Union

import numpy as np

from .models import ConfigError, RunStatistics, TrialOutcome, TrialResult
from .prng import Prng, RngId, make_rng
from .sampling import pick_from_mask, popcount, sample_cdf
from .stats import summarize

logger = logging.getLogger(__name__)

DEFAULT_SEED = 0xC68FA87D83F72455
MIN_DOORS = 3
MAX_DOORS = 64  # DoorMask is a 64-bit word


@dataclass(frozen=True)
class SimConfig:
    """Parameters for one simulation, validated by ``configure``."""

    num_doors: int = 3
    runs: int = 1
    trials_per_run: int = 10_000
    rng: RngId = RngId.MCG128
    seed: int = DEFAULT_SEED


def _resolve_rng(rng: Union[RngId, str]) -> RngId:
    if isinstance(rng, RngId):
        return rng
    try:
        return RngId(str(rng).strip().lower())
    except ValueError as exc:
        choices = ", ".join(r.value for r in RngId)
        raise ConfigError(f"Unknown RNG '{rng}'. Available: {choices}") from exc


def _door_index(bit: int) -> int:
    return bit.bit_length() - 1


def _choose_door(rng: Prng, mask: int) -> int:
    # a lone candidate is forced and costs no draw
    population = popcount(mask)
    if population == 1:
        return mask
    return pick_from_mask(rng, mask, population)


def play_trial(rng: Prng, num_doors: int) -> TrialResult:
    """Play one game: place the car, pick, reveal a goat, then switch or stay."""

    universe = (1 << num_doors) - 1
    car = 1 << sample_cdf(rng, num_doors)
    pick1 = 1 << sample_cdf(rng, num_doors)

    # Monty opens a goat door that is not the contestant's. When the pick is
    # the car every other door qualifies, otherwise the car is excluded too.
    revealed = _choose_door(rng, universe & ~(car | pick1))

    # fair coin over strategies, independent of where the car is
    stay = sample_cdf(rng, 2)
    if stay == 0:
        final = _choose_door(rng, universe & ~(pick1 | revealed))
        outcome = TrialOutcome.SWITCH_WIN if final == car else TrialOutcome.SWITCH_LOSE
    else:
        final = pick1
        outcome = TrialOutcome.STAY_WIN if final == car else TrialOutcome.STAY_LOSE

    return TrialResult(
        car=_door_index(car),
        first_pick=_door_index(pick1),
        revealed=_door_index(revealed),
        final_pick=_door_index(final),
        switched=stay == 0,
        outcome=outcome,
    )


class MontySimulator:
    """Owns the seeded engine and replays trials against it."""

    def __init__(self, num_doors: int, rng_id: RngId, seed: int = DEFAULT_SEED):
        self.num_doors = num_doors
        self.rng_id = rng_id
        self.seed = seed
        self.rng = make_rng(rng_id, seed)
        self.switch_pcts = np.zeros(0, dtype=np.float64)
        self.stay_pcts = np.zeros(0, dtype=np.float64)
        self.n_switch = self.n_stay = 0

    def play(self) -> TrialResult:
        return play_trial(self.rng, self.num_doors)

    def run_once(self, trials: int) -> RunStatistics:
        stats = RunStatistics()
        for _ in range(trials):
            stats.record(play_trial(self.rng, self.num_doors).outcome)
        return stats

    def run_simulation(self, runs: int, trials_per_run: int) -> List[RunStatistics]:
        if runs < 0 or trials_per_run < 0:
            raise ConfigError(
                f"runs and trials_per_run must be non-negative, got {runs} and {trials_per_run}"
            )

        # capacity is known up front; allocate before any trial is played
        self.switch_pcts = np.zeros(runs, dtype=np.float64)
        self.stay_pcts = np.zeros(runs, dtype=np.float64)
        self.n_switch = self.n_stay = 0

        results: List[RunStatistics] = []
        for i in range(runs):
            stats = self.run_once(trials_per_run)
            self._record_percentages(stats)
            logger.debug(
                "run %d/%d: switch %.4f%% stay %.4f%%",
                i + 1,
                runs,
                stats.switch_win_pct,
                stats.stay_win_pct,
            )
            results.append(stats)
        logger.info(
            "finished %d runs x %d trials with %d doors (%s)",
            runs,
            trials_per_run,
            self.num_doors,
            self.rng_id.value,
        )
        return results

    def _record_percentages(self, stats: RunStatistics) -> None:
        # runs without a switch (or stay) trial contribute no sample
        if stats.switches > 0:
            self.switch_pcts[self.n_switch] = stats.switch_win_pct
            self.n_switch += 1
        if stats.stays > 0:
            self.stay_pcts[self.n_stay] = stats.stay_win_pct
            self.n_stay += 1

    def win_percentage_samples(self) -> Tuple[np.ndarray, np.ndarray]:
        """Switch and stay win percentages collected by the last ``run_simulation``."""
        return self.switch_pcts[: self.n_switch], self.stay_pcts[: self.n_stay]


def configure(
    num_doors: int,
    rng: Union[RngId, str] = RngId.MCG128,
    seed: int = DEFAULT_SEED,
) -> MontySimulator:
    """Validate the door count and RNG selector and seed a simulator."""

    if isinstance(num_doors, bool) or not isinstance(num_doors, int):
        raise ConfigError(f"num_doors must be an integer, got {num_doors!r}")
    if num_doors < MIN_DOORS:
        raise ConfigError(f"num_doors must be at least {MIN_DOORS}, got {num_doors}")
    if num_doors > MAX_DOORS:
        raise ConfigError(f"num_doors must be at most {MAX_DOORS}, got {num_doors}")

    rng_id = _resolve_rng(rng)
    logger.debug("configured %d doors, rng=%s, seed=%#x", num_doors, rng_id.value, seed)
    return MontySimulator(num_doors, rng_id, seed)


def run_monty_sim(cfg: SimConfig) -> Dict[str, Any]:
    """Execute every run for ``cfg``, fully driven by its seed."""

    sim = configure(cfg.num_doors, cfg.rng, cfg.seed)
    runs = sim.run_simulation(cfg.runs, cfg.trials_per_run)
    switch_pcts, stay_pcts = sim.win_percentage_samples()

    config = asdict(cfg)
    config["rng"] = sim.rng_id.value

    return {
        "config": config,
        "runs": [run.to_dict() for run in runs],
        "summary": {
            "switch": asdict(summarize(switch_pcts)),
            "stay": asdict(summarize(stay_pcts)),
        },
    }


if __name__ == "__main__":
    import json

    result = run_monty_sim(SimConfig())
    print(json.dumps(result, indent=2))
