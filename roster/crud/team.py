#roster/crud/team.py
from typing import List
import logging

from roster.core.exceptions import DuplicateId, TeamNotFound
from roster.core.settings import settings
from roster.database import RosterStore
from roster.models.team import Team

logger = logging.getLogger(f"{settings.LOGGER_PREFIX}.Teams")

def create_team(db: RosterStore, data: dict) -> Team:
    """
    Зарегистрировать новую команду с уникальным ID.
    """
    team = Team(
        id=data["id"],
        name=data["name"],
        created_on=data["created_on"],
        primary_color=data["primary_color"],
        secondary_color=data["secondary_color"],
    )
    if team.id in db.teams:
        logger.warning(f"Team id {team.id} is already registered")
        raise DuplicateId(f"Team with id={team.id} already exists.")
    db.teams[team.id] = team
    logger.info(f"Created team '{team.name}' (ID: {team.id})")
    return team

def get_team(db: RosterStore, team_id: int) -> Team:
    """
    Получить команду по ID.
    """
    team = db.teams.get(team_id)
    if team is None:
        raise TeamNotFound(f"Team {team_id} not found")
    return team

def get_all_teams(db: RosterStore) -> List[Team]:
    """
    Все команды по возрастанию ID.
    """
    return [db.teams[tid] for tid in db.team_ids()]

def get_away_kit_color(db: RosterStore, home_team_id: int, away_team_id: int) -> str:
    """
    Цвет формы гостей: если основной цвет совпадает с основным цветом хозяев,
    гости играют в запасной.
    """
    home = get_team(db, home_team_id)
    away = get_team(db, away_team_id)
    if away.primary_color == home.primary_color:
        return away.secondary_color
    return away.primary_color
