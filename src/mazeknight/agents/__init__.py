from .enemy import Enemy, spawn_enemies
from .player import Player

__all__ = ["Enemy", "Player", "spawn_enemies"]
