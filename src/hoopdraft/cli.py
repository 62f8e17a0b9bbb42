"""Command-line interface for simulating a draft and grading the rosters."""

from __future__ import annotations

import argparse
import csv
import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence

from hoopdraft.config import NBA_TEAM_NAMES, POOL_CHOICES, ROUND_CHOICES, DraftSettings, load_settings
from hoopdraft.draft import BestAvailableStrategy, DraftSession, PickStrategy, PositionNeedStrategy
from hoopdraft.evaluation import TeamEvaluation, evaluate_teams
from hoopdraft.ingest import load_player_pool


STRATEGIES = {
    "best-available": BestAvailableStrategy,
    "position-need": PositionNeedStrategy,
}


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate a fantasy draft and evaluate every roster")
    parser.add_argument("--current", type=Path, default=None, help="JSON file with current-era players")
    parser.add_argument("--all-time", type=Path, default=None, help="JSON file with all-time players")
    parser.add_argument(
        "--pool",
        default=None,
        help=f"Player pool ({', '.join(POOL_CHOICES)}); unknown values use the all-time pool",
    )
    parser.add_argument("--rounds", type=int, default=None, help=f"Draft rounds (usually one of {ROUND_CHOICES})")
    parser.add_argument("--ai-teams", type=int, default=None, help="Number of computer-controlled teams")
    parser.add_argument("--user-team", default=None, help="Name of the user-controlled team")
    parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES),
        default="best-available",
        help="Pick strategy used for every team",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for AI team name selection")
    parser.add_argument("--output", type=Path, default=None, help="Optional CSV path for rosters and scores")
    parser.add_argument("--verbose", action="store_true", help="Log every pick")
    return parser.parse_args(argv)


def _pick_ai_team_names(count: int, user_team: str, seed: Optional[int]) -> List[str]:
    candidates = [name for name in NBA_TEAM_NAMES if name != user_team]
    if count > len(candidates):
        raise SystemExit(f"at most {len(candidates)} AI teams are supported, got {count}")
    return random.Random(seed).sample(candidates, count)


def _write_results(path: Path, standings: Sequence[TeamEvaluation], session: DraftSession) -> None:
    rosters = {team.team_id: team.roster for team in session.teams}
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["rank", "team", "is_user", "score", "player_ids", "player_names", "positions"])
        for rank, entry in enumerate(standings, start=1):
            roster = rosters[entry.team_id]
            writer.writerow([
                rank,
                entry.name,
                entry.is_user,
                entry.result.score,
                " ".join(player.player_id for player in roster),
                "; ".join(player.name for player in roster),
                " ".join("/".join(player.positions) for player in roster),
            ])


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.current is None and args.all_time is None:
        raise SystemExit("at least one of --current or --all-time is required")

    settings: DraftSettings = load_settings().with_overrides(
        rounds=args.rounds,
        ai_team_count=args.ai_teams,
        pool=args.pool,
        user_team_name=args.user_team,
    )
    if settings.rounds < 1:
        raise SystemExit("--rounds must be at least 1")

    players, report = load_player_pool(
        current_path=args.current,
        all_time_path=args.all_time,
        pool=settings.pool,
    )
    print(f"Loaded {report.accepted_players}/{report.total_records} players from the {settings.pool} pool")
    if not players:
        raise SystemExit("player pool is empty")

    strategy: PickStrategy = STRATEGIES[args.strategy]()
    session = DraftSession.from_settings(
        settings,
        players,
        _pick_ai_team_names(settings.ai_team_count, settings.user_team_name, args.seed),
        strategy=strategy,
    )
    session.run()

    standings = evaluate_teams(session.teams)
    for rank, entry in enumerate(standings, start=1):
        marker = "*" if entry.is_user else " "
        print(f"{rank:>2}.{marker} {entry.name:<28} {entry.result.score:>3}")
    user_entry = next((entry for entry in standings if entry.is_user), None)
    if user_entry is not None:
        print(user_entry.result.feedback)

    if args.output:
        _write_results(args.output, standings, session)
        print(f"Wrote results to {args.output}")


if __name__ == "__main__":
    main()
