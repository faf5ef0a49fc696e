from dataclasses import dataclass
from enum import Enum


class ConfigError(ValueError):
    """Raised for door counts, RNG selectors or run sizes the sim cannot use."""


class TrialOutcome(Enum):
    SWITCH_WIN = "switch_win"
    SWITCH_LOSE = "switch_lose"
    STAY_WIN = "stay_win"
    STAY_LOSE = "stay_lose"


@dataclass(frozen=True)
class TrialResult:
    car: int  # door indices, not masks
    first_pick: int
    revealed: int
    final_pick: int
    switched: bool
    outcome: TrialOutcome


@dataclass
class RunStatistics:
    switch_wins: int = 0
    switch_losses: int = 0
    stay_wins: int = 0
    stay_losses: int = 0

    @property
    def switches(self) -> int:
        return self.switch_wins + self.switch_losses

    @property
    def stays(self) -> int:
        return self.stay_wins + self.stay_losses

    @property
    def switch_win_pct(self) -> float:
        if self.switches == 0:
            return 0.0
        return self.switch_wins / self.switches * 100.0

    @property
    def stay_win_pct(self) -> float:
        if self.stays == 0:
            return 0.0
        return self.stay_wins / self.stays * 100.0

    def record(self, outcome: TrialOutcome) -> None:
        if outcome is TrialOutcome.SWITCH_WIN:
            self.switch_wins += 1
        elif outcome is TrialOutcome.SWITCH_LOSE:
            self.switch_losses += 1
        elif outcome is TrialOutcome.STAY_WIN:
            self.stay_wins += 1
        else:
            self.stay_losses += 1

    def to_dict(self) -> dict:
        return {
            "switch_wins": self.switch_wins,
            "switch_losses": self.switch_losses,
            "stay_wins": self.stay_wins,
            "stay_losses": self.stay_losses,
            "switch_win_pct": self.switch_win_pct,
            "stay_win_pct": self.stay_win_pct,
        }
