from .settings import AcceptanceSettings, EnemySettings, MazeSettings, Settings

__all__ = ["Settings", "MazeSettings", "AcceptanceSettings", "EnemySettings"]
