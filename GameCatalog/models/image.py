from models import db


class Image(db.Model):
    __tablename__ = "image"
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    data = db.Column(db.LargeBinary, nullable=True)
    game_id = db.Column(db.Integer, db.ForeignKey('games.id'), nullable=True)
