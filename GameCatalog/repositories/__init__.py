from repositories.game_catalog import GameCatalog

__all__ = ["GameCatalog"]
