import random
from faker import Faker
from superchase.models.player import Player, PlayerRole

fake_in = Faker('en_IN')


class PlayerGenerator:
    """Generates fictional squads with batting and bowling skill ratings"""

    # Squad sheet in batting order: (role, tier)
    SQUAD_TEMPLATE = [
        (PlayerRole.BATSMAN, "star"),        # Openers
        (PlayerRole.BATSMAN, "good"),
        (PlayerRole.BATSMAN, "star"),        # Middle order
        (PlayerRole.BATSMAN, "good"),
        (PlayerRole.WICKET_KEEPER, "good"),
        (PlayerRole.ALL_ROUNDER, "star"),
        (PlayerRole.ALL_ROUNDER, "good"),
        (PlayerRole.BATSMAN, "solid"),
        (PlayerRole.BOWLER, "star"),         # Tail
        (PlayerRole.BOWLER, "good"),
        (PlayerRole.BOWLER, "good"),
    ]

    @staticmethod
    def _generate_attribute(base: int, variance: int = 10, minimum: int = 1) -> int:
        """Generate a rating with some variance"""
        value = base + random.randint(-variance, variance)
        return max(minimum, min(100, value))  # Clamp between minimum-100

    @classmethod
    def generate_player(cls, role: PlayerRole, tier: str = "good") -> Player:
        """
        Generate a single player.

        Args:
            role: Player role
            tier: "star" (75-85 base), "good" (65-75 base), "solid" (55-65 base)
        """
        tier_bases = {
            "star": random.randint(75, 85),
            "good": random.randint(65, 75),
            "solid": random.randint(55, 65),
        }
        base = tier_bases.get(tier, tier_bases["solid"])

        if role == PlayerRole.BATSMAN:
            batting = cls._generate_attribute(base + 5, 8)
            bowling = cls._generate_attribute(20, 10)
        elif role == PlayerRole.BOWLER:
            batting = cls._generate_attribute(30, 12)
            bowling = cls._generate_attribute(base + 5, 8)
        elif role == PlayerRole.ALL_ROUNDER:
            batting = cls._generate_attribute(base, 10)
            bowling = cls._generate_attribute(base, 10)
        else:  # Wicket keeper
            batting = cls._generate_attribute(base, 10)
            bowling = cls._generate_attribute(10, 8)

        return Player(
            name=fake_in.name_male(),
            role=role,
            batting_skill=batting,
            bowling_skill=bowling,
        )

    @classmethod
    def generate_squad(cls) -> list[Player]:
        """Generate an 11-player squad in batting order, first player captain"""
        squad = []
        for position, (role, tier) in enumerate(cls.SQUAD_TEMPLATE):
            player = cls.generate_player(role, tier)
            player.squad_position = position
            squad.append(player)
        squad[0].is_captain = True
        return squad
