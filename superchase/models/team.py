from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from superchase.database import Base


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    short_name: Mapped[str] = mapped_column(String(5), unique=True)  # e.g., "MI", "CSK"

    # Branding
    primary_color: Mapped[str] = mapped_column(String(7))  # Hex color

    # Relationships
    players: Mapped[list["Player"]] = relationship(
        "Player", back_populates="team", order_by="Player.squad_position"
    )

    @property
    def squad_size(self) -> int:
        return len(self.players)

    def __repr__(self):
        return f"<Team {self.name} ({self.short_name})>"
