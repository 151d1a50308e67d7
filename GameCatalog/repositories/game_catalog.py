"""Data access for games and the images attached to them.

A game and its image reference each other through two independent columns,
``games.image_id`` and ``image.game_id``. Every mutation here writes both sides
in separate commits, so a failure between the two statements can leave them
out of agreement. Lookups for replace and delete go through ``image.game_id``;
the listing goes through ``games.image_id``.
"""
import logging

from sqlalchemy.orm import joinedload, selectinload

from models.game import Game
from models.image import Image

logger = logging.getLogger(__name__)

# ids outside a 64-bit integer column cannot name a row
MIN_ROW_ID = -2 ** 63
MAX_ROW_ID = 2 ** 63 - 1


class GameCatalog:

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    def find_game(self, game_id):
        if not MIN_ROW_ID <= game_id <= MAX_ROW_ID:
            return None
        return self.session.get(Game, game_id)

    def find_image(self, image_id):
        if not MIN_ROW_ID <= image_id <= MAX_ROW_ID:
            return None
        return self.session.get(Image, image_id)

    def attach_image(self, game, data):
        """Store ``data`` as a new image of ``game`` and point the game at it."""
        image = Image(data=data, game_id=game.id)
        self.session.add(image)
        self.session.commit()

        self.session.query(Game).filter_by(id=game.id).update({"image_id": image.id}, synchronize_session=False)
        self.session.commit()
        logger.info("Attached image %s to game %s", image.id, game.id)
        return image

    def replace_game_image(self, game, data):
        """Overwrite the bytes of every image whose ``game_id`` is ``game``.

        Returns the number of image rows updated.
        """
        updated = self.session.query(Image).filter_by(game_id=game.id).update(
            {"data": data}, synchronize_session=False)
        self.session.commit()
        logger.info("Replaced %d image(s) of game %s", updated, game.id)
        return updated

    def delete_game_image(self, game):
        """Unlink the game's image, then delete the images that belong to it.

        The game's ``image_id`` is cleared even when no image row is deleted.
        Returns the number of image rows deleted.
        """
        self.session.query(Game).filter_by(id=game.id).update({"image_id": None}, synchronize_session=False)
        self.session.commit()

        deleted = self.session.query(Image).filter_by(game_id=game.id).delete(synchronize_session=False)
        self.session.commit()
        logger.info("Deleted %d image(s) of game %s", deleted, game.id)
        return deleted

    def list_games(self):
        return (self.session.query(Game)
                .options(joinedload(Game.developer),
                         selectinload(Game.categories),
                         joinedload(Game.image))
                .order_by(Game.id.asc())
                .all())

    def rollback(self):
        self.session.rollback()

    def close(self):
        self.session.remove()
        self.db.engine.dispose()
