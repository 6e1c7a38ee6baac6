"""
Team Generator - The IPL franchise options offered for a chase
"""
from superchase.models.team import Team


FRANCHISE_TEAMS = [
    {"name": "Chennai Super Kings", "short_name": "CSK", "primary_color": "#FDB913"},
    {"name": "Mumbai Indians", "short_name": "MI", "primary_color": "#004BA0"},
    {"name": "Royal Challengers Bengaluru", "short_name": "RCB", "primary_color": "#EC1C24"},
    {"name": "Kolkata Knight Riders", "short_name": "KKR", "primary_color": "#3A225D"},
    {"name": "Delhi Capitals", "short_name": "DC", "primary_color": "#0078BC"},
    {"name": "Sunrisers Hyderabad", "short_name": "SRH", "primary_color": "#FF822A"},
    {"name": "Rajasthan Royals", "short_name": "RR", "primary_color": "#EA1A85"},
    {"name": "Punjab Kings", "short_name": "PBKS", "primary_color": "#ED1B24"},
    {"name": "Lucknow Super Giants", "short_name": "LSG", "primary_color": "#A72056"},
    {"name": "Gujarat Titans", "short_name": "GT", "primary_color": "#1C1C2B"},
]


class TeamGenerator:
    """Creates the franchise team rows"""

    @classmethod
    def create_teams(cls) -> list[Team]:
        """Create all franchise teams (not yet saved to DB)"""
        return [
            Team(
                name=team_data["name"],
                short_name=team_data["short_name"],
                primary_color=team_data["primary_color"],
            )
            for team_data in FRANCHISE_TEAMS
        ]

    @classmethod
    def get_team_choices(cls) -> list[dict]:
        """Get list of teams for user selection"""
        return [
            {
                "index": i,
                "name": t["name"],
                "short_name": t["short_name"],
                "primary_color": t["primary_color"],
            }
            for i, t in enumerate(FRANCHISE_TEAMS)
        ]
