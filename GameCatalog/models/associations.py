from models import db

game_category_association = db.Table('game_category',
                                     db.Column('game_id', db.Integer, db.ForeignKey('games.id'), primary_key=True),
                                     db.Column('category_id', db.Integer, db.ForeignKey('category.id'),
                                               primary_key=True))
