from models import db
from models.associations import game_category_association


class Category(db.Model):
    __tablename__ = "category"
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(64), nullable=False, unique=True)

    games = db.relationship("Game", secondary=game_category_association, back_populates='categories')
