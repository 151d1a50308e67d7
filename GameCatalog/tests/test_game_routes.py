import base64
from datetime import datetime
from decimal import Decimal
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from catalog_testcase import JPEG_BYTES, CatalogTestCase


class TestHealthCheck(CatalogTestCase):

    def test_returns_plain_text_timestamp(self):
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, "text/plain")
        text = response.get_data(as_text=True)
        self.assertTrue(text.startswith("Servidor ativo - "))
        datetime.strptime(text[len("Servidor ativo - "):], "%Y-%m-%dT%H:%M:%S.%fZ")

    def test_allows_any_origin(self):
        response = self.client.get("/", headers={"Origin": "http://example.com"})

        self.assertEqual(response.headers.get("Access-Control-Allow-Origin"), "*")


class TestListGames(CatalogTestCase):

    def test_empty_catalog(self):
        response = self.client.get("/games")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), [])

    def test_game_without_image_or_developer(self):
        self.add_game(name="Bare")

        game = self.client.get("/games").get_json()[0]

        self.assertIsNone(game["image"])
        self.assertIsNone(game["developer"])
        self.assertIsNone(game["release_date"])
        self.assertEqual(game["categories"], [])

    def test_summary_fields_in_order(self):
        self.add_category("RPG")
        self.add_category("Action")
        game_id = self.add_game(name="Quest", description="A long quest", price=Decimal("59.99"),
                                release_date=datetime(2020, 5, 1), developer="Studio",
                                categories=["Action", "RPG"])

        response = self.client.get("/games")

        self.assertEqual(response.status_code, 200)
        game = response.get_json()[0]
        self.assertEqual(list(game), ["id", "name", "image", "description", "price", "release_date",
                                      "developer", "categories"])
        self.assertEqual(game["id"], game_id)
        self.assertEqual(game["name"], "Quest")
        self.assertEqual(game["description"], "A long quest")
        self.assertEqual(game["price"], "59.99")
        self.assertEqual(game["release_date"], "2020-05-01T00:00:00.000Z")
        self.assertEqual(game["developer"], "Studio")
        self.assertEqual(game["categories"], ["RPG", "Action"])

    def test_games_are_ordered_by_id(self):
        ids = [self.add_game(name=name) for name in ("C", "A", "B")]

        games = self.client.get("/games").get_json()

        self.assertEqual([game["id"] for game in games], sorted(ids))

    def test_uploaded_image_is_embedded_as_data_uri(self):
        game_id = self.add_game()
        self.upload(game_id)

        image = self.client.get("/games").get_json()[0]["image"]

        prefix = "data:image/jpeg;base64,"
        self.assertTrue(image.startswith(prefix))
        self.assertEqual(base64.b64decode(image[len(prefix):]), JPEG_BYTES)

    def test_image_follows_game_image_id(self):
        game_id = self.add_game()
        self.add_image(b"owned but not linked", game_id=game_id)

        self.assertIsNone(self.client.get("/games").get_json()[0]["image"])

    def test_store_failure_returns_generic_error(self):
        failure = OperationalError("SELECT", {}, Exception("database is down"))
        with patch.object(self.catalog, "list_games", side_effect=failure):
            response = self.client.get("/games")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json(), {"error": "Erro ao buscar jogos"})


class TestImageLifecycle(CatalogTestCase):

    def test_upload_list_delete(self):
        game_id = self.add_game()

        upload = self.upload(game_id, data=bytes([0xFF, 0xD8]))
        self.assertEqual(upload.status_code, 200)
        image_id = upload.get_json()["imageId"]

        self.assertEqual(self.client.get(f"/image/{image_id}").data, bytes([0xFF, 0xD8]))
        self.assertEqual(self.client.get("/games").get_json()[0]["image"], "data:image/jpeg;base64,/9g=")

        self.assertEqual(self.client.delete(f"/upload/{game_id}").status_code, 200)
        self.assertEqual(self.client.get(f"/image/{image_id}").status_code, 404)
        self.assertIsNone(self.client.get("/games").get_json()[0]["image"])
