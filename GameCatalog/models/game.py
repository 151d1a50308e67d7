from models import db
from models.associations import game_category_association


class Game(db.Model):
    __tablename__ = "games"
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String, nullable=False)
    description = db.Column(db.Text, nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=True)
    release_date = db.Column(db.DateTime, nullable=True)
    developer_id = db.Column(db.Integer, db.ForeignKey('developer.id'), nullable=True)
    # games and image point at each other, so this side is added after both tables exist
    image_id = db.Column(db.Integer, db.ForeignKey('image.id', use_alter=True, name='games_image_id_fkey'),
                         nullable=True, unique=True)

    developer = db.relationship("Developer", back_populates='games')
    categories = db.relationship("Category", secondary=game_category_association, back_populates='games',
                                 order_by="Category.id")
    image = db.relationship("Image", foreign_keys=[image_id], post_update=True)
