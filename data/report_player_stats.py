"""Print a stats report for a player's rounds stored in a JSON file.
    pip install -e .
    python3 data/report_player_stats.py data/rounds.json "Scottie Scheffler"

The JSON file holds a list of round objects using the Round field names
(total_score, round_date, course_rating, course_slope, holes, ...).
"""

import json
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from analytics import (
    average_by_round_type,
    player_stats,
    recent_rounds,
    round_score_distribution,
    scoring_trend,
)
from models import Round


def load_rounds(rounds_path: str) -> list:
    with open(rounds_path) as f:
        rounds_data = json.load(f)
    return [Round(**r_data) for r_data in rounds_data]


def report(rounds: list, player_name: str = "Player") -> None:
    stats = player_stats(rounds)
    distribution = round_score_distribution(rounds)

    print(f"{player_name}: {stats.rounds_played} scored rounds of {len(rounds)} loaded")
    if not stats.rounds_played:
        return

    handicap = f"{stats.handicap_index:.1f}" if stats.handicap_index is not None else "n/a"
    print(f"  Scoring average: {stats.scoring_average:.1f}")
    print(f"  Best / worst:    {stats.best_round} / {stats.worst_round}")
    print(f"  Putts per round: {stats.putts_per_round:.1f}")
    print(f"  Fairways hit:    {stats.fairways_hit_percentage:.1f}%")
    print(f"  GIR:             {stats.greens_in_regulation_percentage:.1f}%")
    print(f"  Handicap index:  {handicap}")
    print(f"  Trend:           {scoring_trend(rounds).value}")

    if distribution.total:
        print(
            f"  Holes: {distribution.eagles} eagles, {distribution.birdies} birdies, "
            f"{distribution.pars} pars, {distribution.bogeys} bogeys, "
            f"{distribution.double_plus} double+"
        )

    by_type = average_by_round_type(rounds)
    for round_type, average in sorted(by_type.items()):
        print(f"  {round_type.capitalize()} average: {average:.1f}")

    print("\nRecent rounds:")
    for r in recent_rounds(rounds):
        score = r.total_score if r.total_score is not None else "-"
        print(f"  {r.round_date}  {r.course_name or '?'}  {score}")


def main():
    if len(sys.argv) < 2:
        print("Usage: python data/report_player_stats.py <rounds.json> [player name]")
        print('Example: python data/report_player_stats.py data/rounds.json "Scottie Scheffler"')
        sys.exit(1)

    rounds_path = sys.argv[1]
    player_name = sys.argv[2] if len(sys.argv) > 2 else "Player"

    report(load_rounds(rounds_path), player_name)


if __name__ == "__main__":
    main()
