from typing import Optional
from sqlalchemy import String, Integer, ForeignKey, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
import enum
from superchase.database import Base


class PlayerRole(enum.Enum):
    BATSMAN = "Batsman"
    BOWLER = "Bowler"
    ALL_ROUNDER = "All-rounder"
    WICKET_KEEPER = "Wicketkeeper"


# Roles preferred when building the bowling pool
BOWLING_ROLES = (PlayerRole.BOWLER, PlayerRole.ALL_ROUNDER)


class Player(Base):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    role: Mapped[PlayerRole] = mapped_column(Enum(PlayerRole))

    # Skill ratings (0-100 scale)
    batting_skill: Mapped[int] = mapped_column(Integer)
    bowling_skill: Mapped[int] = mapped_column(Integer)

    is_captain: Mapped[bool] = mapped_column(default=False)
    # Position in the squad sheet, used as batting order
    squad_position: Mapped[int] = mapped_column(Integer, default=0)

    # Team relationship
    team_id: Mapped[Optional[int]] = mapped_column(ForeignKey("teams.id"), nullable=True)
    team: Mapped["Team"] = relationship("Team", back_populates="players")

    @property
    def can_bowl(self) -> bool:
        return self.role in BOWLING_ROLES

    def __repr__(self):
        return f"<Player {self.name} ({self.role.value}) - BAT: {self.batting_skill} BOWL: {self.bowling_skill}>"
