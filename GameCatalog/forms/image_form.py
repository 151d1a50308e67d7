from flask_wtf import FlaskForm
from flask_wtf.file import FileField, FileRequired

NO_IMAGE_MESSAGE = "Nenhuma imagem enviada"


class ImageForm(FlaskForm):
    image = FileField("Image", validators=[FileRequired(message=NO_IMAGE_MESSAGE)])

    def read_image(self):
        """Buffer the uploaded file fully in memory and return its bytes."""
        return self.image.data.read()
