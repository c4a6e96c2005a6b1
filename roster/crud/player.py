#roster/crud/player.py
from typing import List
import logging

from roster.core.exceptions import DuplicateId, NoCaptainSet, PlayerNotFound, TeamNotFound
from roster.core.settings import settings
from roster.crud.team import get_team
from roster.database import RosterStore
from roster.models.player import Player

logger = logging.getLogger(f"{settings.LOGGER_PREFIX}.Players")

def create_player(db: RosterStore, data: dict) -> Player:
    """
    Зарегистрировать игрока в существующей команде. Капитаном не становится.
    """
    player = Player(
        id=data["id"],
        team_id=data["team_id"],
        name=data["name"],
        birth_date=data["birth_date"],
        skill_level=data["skill_level"],
        salary=data["salary"],
        is_captain=False,
    )
    if player.id in db.players:
        logger.warning(f"Player id {player.id} is already registered")
        raise DuplicateId(f"Player with id={player.id} already exists.")
    if player.team_id not in db.teams:
        logger.warning(f"Cannot register player {player.id}: team {player.team_id} does not exist")
        raise TeamNotFound(f"Team {player.team_id} not found")
    db.players[player.id] = player
    logger.info(f"Created player '{player.name}' (ID: {player.id}) in team {player.team_id}")
    return player

def get_player(db: RosterStore, player_id: int) -> Player:
    """
    Получить игрока по ID.
    """
    player = db.players.get(player_id)
    if player is None:
        raise PlayerNotFound(f"Player {player_id} not found")
    return player

def get_team_players(db: RosterStore, team_id: int) -> List[Player]:
    """
    Игроки команды по возрастанию ID (пустой список, если игроков нет).
    """
    get_team(db, team_id)
    return db.players_of(team_id)

def _require_players(db: RosterStore, team_id: int) -> List[Player]:
    players = get_team_players(db, team_id)
    if not players:
        raise PlayerNotFound(f"Team {team_id} has no players")
    return players

# ==== Капитан ====

def set_captain(db: RosterStore, player_id: int) -> Player:
    """
    Назначить капитана: снять флаг со всех остальных игроков команды.
    """
    player = get_player(db, player_id)
    for teammate in db.players_of(player.team_id):
        if teammate.is_captain and teammate.id != player.id:
            teammate.is_captain = False
            logger.info(f"Player {teammate.id} is no longer captain of team {player.team_id}")
    player.is_captain = True
    logger.info(f"Player {player.id} set as captain of team {player.team_id}")
    return player

def get_captain(db: RosterStore, team_id: int) -> Player:
    """
    Капитан команды; NoCaptainSet, если капитан не назначен.
    """
    for player in get_team_players(db, team_id):
        if player.is_captain:
            return player
    raise NoCaptainSet(f"Team {team_id} has no captain")

# ==== Запросы по составу ====

def get_best_player(db: RosterStore, team_id: int) -> Player:
    """
    Игрок с максимальным уровнем мастерства; при равенстве — с меньшим ID.
    """
    return max(_require_players(db, team_id), key=lambda p: p.skill_level)

def get_oldest_player(db: RosterStore, team_id: int) -> Player:
    """
    Самый старший игрок; при равенстве дат — с меньшим ID.
    """
    return min(_require_players(db, team_id), key=lambda p: p.birth_date)

def get_highest_paid_player(db: RosterStore, team_id: int) -> Player:
    """
    Игрок с максимальной зарплатой; при равенстве — с меньшим ID.
    """
    return max(_require_players(db, team_id), key=lambda p: p.salary)

def get_top_players(db: RosterStore, limit: int) -> List[Player]:
    """
    Лучшие игроки лиги по уровню мастерства (стабильная сортировка по ID).
    """
    if limit <= 0:
        return []
    ordered = sorted(
        (db.players[pid] for pid in db.player_ids()),
        key=lambda p: p.skill_level,
        reverse=True,
    )
    return ordered[:limit]
