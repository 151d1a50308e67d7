from models import db


class Developer(db.Model):
    __tablename__ = "developer"
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String, nullable=False)

    games = db.relationship("Game", back_populates='developer')
