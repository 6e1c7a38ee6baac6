from superchase.services.squad_service import (
    SquadNotFoundError, seed_squads, get_team, fetch_squads,
)

__all__ = ["SquadNotFoundError", "seed_squads", "get_team", "fetch_squads"]
