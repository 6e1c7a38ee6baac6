from superchase.models.player import Player, PlayerRole
from superchase.models.team import Team

__all__ = [
    "Player",
    "PlayerRole",
    "Team",
]
