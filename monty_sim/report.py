"""Plain-text rendering of a ``run_monty_sim`` result."""

from typing import Any, Dict, List

_LABELS = {"switch": "switching", "stay": "staying  "}


def _single_run_lines(run: Dict[str, Any]) -> List[str]:
    return [
        "",
        "Contestant switches",
        f"Number of wins  : {run['switch_wins']}",
        f"Number of losses: {run['switch_losses']}",
        f"Win percentage  : {run['switch_win_pct']:3.4f}%",
        "",
        "Contestant stays",
        f"Number of wins  : {run['stay_wins']}",
        f"Number of losses: {run['stay_losses']}",
        f"Win percentage  : {run['stay_win_pct']:3.4f}%",
    ]


def _summary_lines(strategy: str, summary: Dict[str, Any]) -> List[str]:
    if summary["stddev"] is None:
        return [
            "",
            "Not enough sample size to calculate mean & standard deviation",
            f"for {strategy} win percentage. Try increasing runs.",
        ]
    label = _LABELS[strategy]
    return [
        "",
        f"Mean of win percentage for {label} : {summary['mean']:3.4f}",
        f"Sigma of win percentage for {label}: {summary['stddev']:3.4f}",
    ]


def format_report(result: Dict[str, Any]) -> str:
    config = result["config"]
    lines = [
        f"Doors = {config['num_doors']}",
        f"Runs  = {config['runs']}",
        f"N     = {config['trials_per_run']}",
        f"RNG   = {config['rng']}",
    ]

    runs = result["runs"]
    if len(runs) == 1:
        lines.extend(_single_run_lines(runs[0]))
    elif len(runs) > 1:
        for strategy in ("switch", "stay"):
            lines.extend(_summary_lines(strategy, result["summary"][strategy]))

    return "\n".join(lines) + "\n"
