"""Shared fixtures: import path bootstrap and in-memory club data."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pitchside.core.models import Club, Fixture, MatchStats, Player, PlayerStats


@pytest.fixture
def club() -> Club:
    return Club(
        id="club-1",
        name="Harbour Town FC",
        nickname="The Gulls",
        tone_context="Gritty, proud, a bit cheeky",
        primary_color="#0b3d91",
        secondary_color="#f5c400",
        players=[
            Player(id="p1", name="Marcus Thorn", position="FWD", number=9, form=8.2, is_captain=True),
            Player(
                id="p2",
                name="Billy Bones",
                position="MID",
                number=8,
                stats=PlayerStats(pace=71, shooting=64, passing=80, dribbling=75, defending=55, physical=68),
                form=7.1,
            ),
            Player(id="p3", name="Sam Keel", position="GK", number=1),
        ],
    )


@pytest.fixture
def scheduled_fixture() -> Fixture:
    return Fixture(
        id="f1",
        opponent="Dockside Rovers",
        kickoff_time=datetime(2026, 9, 12, 15, 0),
        venue="Home",
        competition="County League",
    )


@pytest.fixture
def completed_away_fixture() -> Fixture:
    return Fixture(
        id="f2",
        opponent="Mill Lane United",
        kickoff_time=datetime(2026, 9, 19, 19, 45),
        venue="Away",
        status="COMPLETED",
        competition="County Cup",
        result_home=1,
        result_away=3,
        scorers=["Marcus Thorn", "Marcus Thorn", "Billy Bones"],
        man_of_the_match="Marcus Thorn",
        key_events="Late winner after a red card.",
        stats=MatchStats(home_possession=62, away_possession=38, home_shots=14, away_shots=7),
    )
