from .team import Team
from .player import Player
