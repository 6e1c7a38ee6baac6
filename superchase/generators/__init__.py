from superchase.generators.player_generator import PlayerGenerator
from superchase.generators.team_generator import TeamGenerator, FRANCHISE_TEAMS

__all__ = ["PlayerGenerator", "TeamGenerator", "FRANCHISE_TEAMS"]
