"""
Squad service - the roster provider for a chase.
Seeds franchise squads and fetches the two sides for a match.
"""
import logging
from sqlalchemy.orm import Session

from superchase.models.player import Player
from superchase.models.team import Team
from superchase.generators import PlayerGenerator, TeamGenerator

logger = logging.getLogger(__name__)

MIN_BATTERS = 2
MIN_BOWLERS = 1


class SquadNotFoundError(Exception):
    """Raised when a squad cannot be fetched for a match"""


def seed_squads(db: Session) -> int:
    """Create any missing franchise teams with generated squads. Returns teams created."""
    existing = {short for (short,) in db.query(Team.short_name).all()}
    created = 0
    for team in TeamGenerator.create_teams():
        if team.short_name in existing:
            continue
        team.players = PlayerGenerator.generate_squad()
        db.add(team)
        created += 1
    db.commit()
    if created:
        logger.info("Seeded %d teams with squads", created)
    return created


def get_team(db: Session, short_name: str) -> Team:
    team = db.query(Team).filter_by(short_name=short_name.upper()).first()
    if not team:
        raise SquadNotFoundError(f"Unknown team '{short_name}'")
    return team


def fetch_squads(db: Session, batting_short: str, bowling_short: str) -> tuple[list[Player], list[Player]]:
    """
    Fetch the chasing side and the defending side.

    Returns:
        (batters, bowlers) - each in squad order
    """
    if batting_short.upper() == bowling_short.upper():
        raise SquadNotFoundError("Batting and bowling teams must be different")

    batting_team = get_team(db, batting_short)
    bowling_team = get_team(db, bowling_short)

    batters = list(batting_team.players)
    bowlers = list(bowling_team.players)

    if len(batters) < MIN_BATTERS:
        raise SquadNotFoundError(f"{batting_team.short_name} needs at least {MIN_BATTERS} players to bat")
    if len(bowlers) < MIN_BOWLERS:
        raise SquadNotFoundError(f"{bowling_team.short_name} has no one to bowl")

    logger.debug("Fetched squads %s (%d) vs %s (%d)",
                 batting_team.short_name, len(batters), bowling_team.short_name, len(bowlers))
    return batters, bowlers
