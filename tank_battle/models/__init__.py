from tank_battle.models.bullet import Bullet
from tank_battle.models.particle import Particle
from tank_battle.models.tank import Tank
from tank_battle.models.wall import Wall, WallType

__all__ = [
    "Bullet",
    "Particle",
    "Tank",
    "Wall", "WallType",
]
