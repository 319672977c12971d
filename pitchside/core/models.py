"""In-memory club, squad, and fixture records passed to the content services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class PlayerStats:
    """Attribute ratings on a 0-99 scale."""

    pace: int = 50
    shooting: int = 50
    passing: int = 50
    dribbling: int = 50
    defending: int = 50
    physical: int = 50


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    position: str  # GK | DEF | MID | FWD
    number: int
    stats: PlayerStats = field(default_factory=PlayerStats)
    form: float = 5.0
    is_captain: bool = False
    narrative_tags: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Club:
    id: str
    name: str
    nickname: str
    tone_context: str = ""
    primary_color: str = "#000000"
    secondary_color: str = "#ffffff"
    players: List[Player] = field(default_factory=list)

    @property
    def captain(self) -> Optional[Player]:
        return next((p for p in self.players if p.is_captain), None)


@dataclass(frozen=True)
class MatchStats:
    home_possession: float
    away_possession: float
    home_shots: int
    away_shots: int


@dataclass(frozen=True)
class Fixture:
    """One match from the club's point of view.

    ``result_home``/``result_away`` follow the venue, so the club's own score is
    ``result_home`` when ``venue == "Home"``.
    """

    id: str
    opponent: str
    kickoff_time: datetime
    venue: str = "Home"  # Home | Away
    status: str = "SCHEDULED"  # SCHEDULED | LIVE | COMPLETED
    competition: str = ""
    result_home: Optional[int] = None
    result_away: Optional[int] = None
    scorers: List[str] = field(default_factory=list)
    man_of_the_match: str = ""
    key_events: str = ""
    stats: Optional[MatchStats] = None

    @property
    def is_home(self) -> bool:
        return self.venue == "Home"

    def scores(self) -> tuple[Optional[int], Optional[int]]:
        """Return (our score, their score)."""
        if self.is_home:
            return self.result_home, self.result_away
        return self.result_away, self.result_home

    def outcome(self) -> str:
        ours, theirs = self.scores()
        ours, theirs = ours or 0, theirs or 0
        if ours > theirs:
            return "WIN"
        if ours == theirs:
            return "DRAW"
        return "LOSS"
