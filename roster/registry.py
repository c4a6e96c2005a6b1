# roster/registry.py
"""
Registry — фасад реестра команд и игроков.

Все операции работают по ID и делегируют в roster.crud. Пример:

    registry = Registry()
    registry.register_team(1, "Internacional", date(1909, 4, 4), "Red", "White")
    registry.get_team_name(1)
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from roster.crud import player as crud_player
from roster.crud import team as crud_team
from roster.database import RosterStore, SessionLocal
from roster.models import Player, Team

class Registry:
    def __init__(self, db: Optional[RosterStore] = None) -> None:
        self.db: RosterStore = db if db is not None else SessionLocal()

    # ==== Регистрация ====

    def register_team(
        self,
        team_id: int,
        name: str,
        created_on: date,
        primary_color: str,
        secondary_color: str,
    ) -> None:
        crud_team.create_team(self.db, {
            "id": team_id,
            "name": name,
            "created_on": created_on,
            "primary_color": primary_color,
            "secondary_color": secondary_color,
        })

    def register_player(
        self,
        player_id: int,
        team_id: int,
        name: str,
        birth_date: date,
        skill_level: int,
        salary: Decimal,
    ) -> None:
        crud_player.create_player(self.db, {
            "id": player_id,
            "team_id": team_id,
            "name": name,
            "birth_date": birth_date,
            "skill_level": skill_level,
            "salary": salary,
        })

    # ==== Капитан ====

    def set_captain(self, player_id: int) -> None:
        crud_player.set_captain(self.db, player_id)

    def get_captain(self, team_id: int) -> int:
        return crud_player.get_captain(self.db, team_id).id

    # ==== Запросы ====

    def get_team(self, team_id: int) -> Team:
        return crud_team.get_team(self.db, team_id).model_copy()

    def get_player(self, player_id: int) -> Player:
        return crud_player.get_player(self.db, player_id).model_copy()

    def get_player_name(self, player_id: int) -> str:
        return crud_player.get_player(self.db, player_id).name

    def get_team_name(self, team_id: int) -> str:
        return crud_team.get_team(self.db, team_id).name

    def list_team_players(self, team_id: int) -> List[int]:
        return [p.id for p in crud_player.get_team_players(self.db, team_id)]

    def get_best_player(self, team_id: int) -> int:
        return crud_player.get_best_player(self.db, team_id).id

    def get_oldest_player(self, team_id: int) -> int:
        return crud_player.get_oldest_player(self.db, team_id).id

    def get_highest_paid_player(self, team_id: int) -> int:
        return crud_player.get_highest_paid_player(self.db, team_id).id

    def get_player_salary(self, player_id: int) -> Decimal:
        return crud_player.get_player(self.db, player_id).salary

    def list_all_teams(self) -> List[int]:
        return [t.id for t in crud_team.get_all_teams(self.db)]

    def get_top_players(self, limit: int) -> List[int]:
        return [p.id for p in crud_player.get_top_players(self.db, limit)]

    def get_away_kit_color(self, home_team_id: int, away_team_id: int) -> str:
        return crud_team.get_away_kit_color(self.db, home_team_id, away_team_id)

    def __repr__(self):
        return f"<Registry({self.db!r})>"
