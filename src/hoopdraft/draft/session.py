"""Round-based draft orchestration with injectable pick strategies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol, Sequence

from hoopdraft.config import DraftSettings
from hoopdraft.models import Player

from .needs import PriorityList, compute_team_needs, rank_position_priorities


logger = logging.getLogger(__name__)


class DraftError(RuntimeError):
    """Raised when a pick violates the draft rules."""


class DraftClosedError(DraftError):
    """Raised when a finalized roster is modified."""


@dataclass
class Team:
    """A drafting team. ``add_player`` is the only way to grow the roster,
    which becomes an immutable tuple once ``finalize`` is called.
    """

    team_id: str
    name: str
    draft_order: int
    is_user: bool = False
    roster: Sequence[Player] = field(default_factory=list)
    finalized: bool = False

    def __post_init__(self) -> None:
        self.roster = tuple(self.roster) if self.finalized else list(self.roster)

    def add_player(self, player: Player) -> None:
        if self.finalized:
            raise DraftClosedError(f"Roster for {self.name} is final")
        self.roster = [*self.roster, player]

    def finalize(self) -> None:
        self.finalized = True
        self.roster = tuple(self.roster)


def create_teams(user_team_name: str, ai_team_names: Sequence[str]) -> List[Team]:
    """User team picks first; AI teams follow in the given order."""

    teams = [Team(team_id="team-1", name=user_team_name, draft_order=1, is_user=True)]
    for index, name in enumerate(ai_team_names, start=2):
        teams.append(Team(team_id=f"team-{index}", name=name, draft_order=index))
    return teams


class PickStrategy(Protocol):
    def choose(self, team: Team, available: Sequence[Player], priorities: PriorityList) -> Player:
        """Return one of ``available`` for ``team``."""


class BestAvailableStrategy:
    """Take the highest rated player left; ignores positional needs."""

    def choose(self, team: Team, available: Sequence[Player], priorities: PriorityList) -> Player:
        return max(available, key=lambda player: player.overall_rating)


class PositionNeedStrategy:
    """Best player covering the most needed open position, else best available."""

    def choose(self, team: Team, available: Sequence[Player], priorities: PriorityList) -> Player:
        for entry in priorities:
            if entry.priority <= 0:
                break
            candidates = [player for player in available if player.plays(entry.position)]
            if candidates:
                return max(candidates, key=lambda player: player.overall_rating)
        return max(available, key=lambda player: player.overall_rating)


@dataclass(frozen=True)
class DraftPick:
    round: int
    pick: int
    team_id: str
    player_id: str


class DraftSession:
    """Linear draft: every round, teams pick in ``draft_order``."""

    def __init__(
        self,
        teams: Iterable[Team],
        pool: Iterable[Player],
        *,
        rounds: int,
        strategy: Optional[PickStrategy] = None,
    ) -> None:
        self.teams = sorted(teams, key=lambda team: team.draft_order)
        if not self.teams:
            raise ValueError("a draft needs at least one team")
        if rounds < 1:
            raise ValueError(f"rounds must be >= 1, got {rounds}")
        self.rounds = rounds
        self.strategy: PickStrategy = strategy or BestAvailableStrategy()
        self.available: List[Player] = sorted(pool, key=lambda player: player.overall_rating, reverse=True)
        self.picks: List[DraftPick] = []
        self._complete = False
        if not self.available:
            self._finish()

    @classmethod
    def from_settings(
        cls,
        settings: DraftSettings,
        pool: Iterable[Player],
        ai_team_names: Sequence[str],
        *,
        strategy: Optional[PickStrategy] = None,
    ) -> "DraftSession":
        if len(ai_team_names) < settings.ai_team_count:
            raise ValueError(
                f"need {settings.ai_team_count} AI team names, got {len(ai_team_names)}"
            )
        teams = create_teams(settings.user_team_name, list(ai_team_names)[: settings.ai_team_count])
        return cls(teams, pool, rounds=settings.rounds, strategy=strategy)

    @property
    def is_complete(self) -> bool:
        return self._complete

    @property
    def total_picks(self) -> int:
        return self.rounds * len(self.teams)

    @property
    def current_round(self) -> int:
        return len(self.picks) // len(self.teams) + 1

    @property
    def current_team(self) -> Optional[Team]:
        if self._complete:
            return None
        return self.teams[len(self.picks) % len(self.teams)]

    @property
    def user_team(self) -> Optional[Team]:
        return next((team for team in self.teams if team.is_user), None)

    def priorities_for(self, team: Team) -> PriorityList:
        return rank_position_priorities(compute_team_needs(team.roster, self.rounds))

    def draft_player(self, player_id: str, *, team_id: Optional[str] = None) -> DraftPick:
        """Record a pick for the team on the clock."""

        team = self.current_team
        if team is None:
            raise DraftError("draft is complete")
        if team_id is not None and team_id != team.team_id:
            raise DraftError(f"{team_id} is not on the clock; {team.team_id} is")
        index = next(
            (idx for idx, player in enumerate(self.available) if player.player_id == player_id),
            None,
        )
        if index is None:
            raise DraftError(f"player {player_id!r} is not available")

        team.add_player(self.available[index])
        player = self.available.pop(index)
        pick = DraftPick(
            round=self.current_round,
            pick=len(self.picks) + 1,
            team_id=team.team_id,
            player_id=player.player_id,
        )
        self.picks.append(pick)
        logger.debug("Round %d pick %d: %s selects %s", pick.round, pick.pick, team.name, player.name)

        if len(self.picks) >= self.total_picks or not self.available:
            self._finish()
        return pick

    def auto_pick(self) -> DraftPick:
        """Let the strategy pick for the team on the clock."""

        team = self.current_team
        if team is None:
            raise DraftError("draft is complete")
        choice = self.strategy.choose(team, self.available, self.priorities_for(team))
        return self.draft_player(choice.player_id)

    def advance_to_user(self) -> List[DraftPick]:
        """Auto-pick for AI teams until the user is on the clock or the draft ends."""

        made: List[DraftPick] = []
        while not self._complete and self.current_team is not None and not self.current_team.is_user:
            made.append(self.auto_pick())
        return made

    def run(self) -> List[DraftPick]:
        """Auto-pick every remaining selection, user team included."""

        made: List[DraftPick] = []
        while not self._complete:
            made.append(self.auto_pick())
        return made

    def _finish(self) -> None:
        self._complete = True
        for team in self.teams:
            team.finalize()
        logger.info("Draft complete after %d picks", len(self.picks))
