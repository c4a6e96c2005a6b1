# roster/initial_data.py

import logging
from datetime import date
from decimal import Decimal

from roster.core.exceptions import DuplicateId, NotFoundError, NoCaptainSet
from roster.core.settings import settings
from roster.registry import Registry

logger = logging.getLogger(f"{settings.LOGGER_PREFIX}.InitialData")

DEMO_TEAMS = [
    {"team_id": 1, "name": "Internacional", "created_on": date(1909, 4, 4), "primary_color": "Red", "secondary_color": "White"},
    {"team_id": 2, "name": "Gremio", "created_on": date(1903, 9, 15), "primary_color": "Blue", "secondary_color": "Black"},
    {"team_id": 3, "name": "Flamengo", "created_on": date(1895, 11, 17), "primary_color": "Red", "secondary_color": "Black"},
]

DEMO_PLAYERS = [
    {"player_id": 10, "team_id": 1, "name": "Fernandão", "birth_date": date(1978, 3, 18), "skill_level": 5, "salary": Decimal("12000.00")},
    {"player_id": 11, "team_id": 1, "name": "Iarley", "birth_date": date(1974, 3, 2), "skill_level": 9, "salary": Decimal("9500.50")},
    {"player_id": 20, "team_id": 2, "name": "Renato", "birth_date": date(1962, 9, 9), "skill_level": 8, "salary": Decimal("15000.00")},
    {"player_id": 30, "team_id": 3, "name": "Zico", "birth_date": date(1953, 3, 3), "skill_level": 10, "salary": Decimal("20000.00")},
]

def seed_registry(registry: Registry) -> None:
    logger.info("Seeding demo teams and players...")
    for team in DEMO_TEAMS:
        try:
            registry.register_team(**team)
        except DuplicateId as e:
            logger.info(f"Skipping team {team['team_id']}: {e}")
    for player in DEMO_PLAYERS:
        try:
            registry.register_player(**player)
        except DuplicateId as e:
            logger.info(f"Skipping player {player['player_id']}: {e}")
    registry.set_captain(11)

def report(registry: Registry) -> None:
    for team_id in registry.list_all_teams():
        name = registry.get_team_name(team_id)
        try:
            captain = registry.get_player_name(registry.get_captain(team_id))
        except NoCaptainSet:
            captain = None
        try:
            best = registry.get_player_name(registry.get_best_player(team_id))
        except NotFoundError:
            best = None
        logger.info(f"Team {team_id} '{name}': players={registry.list_team_players(team_id)} captain={captain} best={best}")
    logger.info(f"Top 3 players: {registry.get_top_players(3)}")
    logger.info(f"Gremio away at Internacional wears {registry.get_away_kit_color(1, 2)}")
    logger.info(f"Flamengo away at Internacional wears {registry.get_away_kit_color(1, 3)}")

def main() -> Registry:
    logger.info(f"Initializing {settings.APP_NAME} ({settings.ENV}) with demo data...")
    registry = Registry()
    seed_registry(registry)
    report(registry)
    logger.info("Finished initial data setup.")
    return registry

def run() -> None:
    from dotenv import load_dotenv
    load_dotenv()

    logging.basicConfig(level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL)
    main()

if __name__ == "__main__":
    run()
