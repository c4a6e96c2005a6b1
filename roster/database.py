# roster/database.py

from typing import Dict, Generator, List
from roster.models import Team, Player

class RosterStore:
    """
    Хранилище реестра в памяти: две таблицы "id -> сущность".
    Порядок обхода всегда по возрастанию id.
    """
    def __init__(self) -> None:
        self.teams: Dict[int, Team] = {}
        self.players: Dict[int, Player] = {}

    def team_ids(self) -> List[int]:
        return sorted(self.teams)

    def player_ids(self) -> List[int]:
        return sorted(self.players)

    def players_of(self, team_id: int) -> List[Player]:
        return [self.players[pid] for pid in self.player_ids() if self.players[pid].team_id == team_id]

    def __repr__(self):
        return f"<RosterStore(teams={len(self.teams)}, players={len(self.players)})>"

# Фабрика "сессий": каждый вызов — новое пустое хранилище
SessionLocal = RosterStore

def get_db() -> Generator[RosterStore, None, None]:
    db = SessionLocal()
    yield db
