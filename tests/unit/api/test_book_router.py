"""Book JSON API tests with the book service mocked out."""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from src.catalog.core.exceptions import FieldError, NotFoundError, ValidationFailedError
from src.catalog.entities import Book


def _book_json(book: Book) -> dict:
    return {
        "id": book.id,
        "title": book.title,
        "authorDto": {"id": book.author.id, "fullName": book.author.full_name},
        "genreDto": {"id": book.genre.id, "name": book.genre.name},
    }


def _update_body(book: Book) -> dict:
    return {
        "id": book.id,
        "title": book.title,
        "authorId": book.author.id,
        "genreId": book.genre.id,
    }


class TestListBooks:
    def test_list_books(self, mock_client: TestClient, mock_book_service: Mock, seed_books):
        """Should return every book as JSON."""
        mock_book_service.find_all.return_value = seed_books

        response = mock_client.get("/list/api/v1")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == [_book_json(b) for b in seed_books]

    def test_list_empty_catalog(self, mock_client: TestClient, mock_book_service: Mock):
        mock_book_service.find_all.return_value = []

        response = mock_client.get("/list/api/v1")

        assert response.status_code == 200
        assert response.json() == []


class TestGetBook:
    def test_get_book(self, mock_client: TestClient, mock_book_service: Mock, seed_books):
        mock_book_service.find_by_id.return_value = seed_books[1]

        response = mock_client.get("/book/api/v1/2")

        assert response.status_code == 200
        assert response.json() == _book_json(seed_books[1])
        mock_book_service.find_by_id.assert_called_once_with(2)

    def test_get_missing_book(self, mock_client: TestClient, mock_book_service: Mock):
        mock_book_service.find_by_id.return_value = None

        response = mock_client.get("/book/api/v1/9")

        assert response.status_code == 404
        assert response.json() == {"detail": "Book with id 9 not found"}


class TestEditBook:
    def test_edit_book(self, mock_client: TestClient, mock_book_service: Mock, seed_books):
        """Should pass the DTO fields to the service and return the saved book."""
        book = seed_books[0]
        mock_book_service.update.return_value = book

        response = mock_client.put("/edit/book/api/v1", json=_update_body(book))

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == _book_json(book)
        mock_book_service.update.assert_called_once_with(1, "Book1", 1, 1)

    def test_edit_book_short_title(
        self, mock_client: TestClient, mock_book_service: Mock, seed_books
    ):
        """Should reject a short title before calling the service."""
        body = _update_body(seed_books[0]) | {"title": "tr"}

        response = mock_client.put("/edit/book/api/v1", json=body)

        assert response.status_code == 400
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {
            "errors": [
                {
                    "field": "title",
                    "message": "The book title cannot be shorter than three characters.",
                }
            ]
        }
        mock_book_service.update.assert_not_called()

    def test_edit_book_without_id(self, mock_client: TestClient, mock_book_service: Mock):
        response = mock_client.put(
            "/edit/book/api/v1", json={"title": "Book1", "authorId": 1, "genreId": 1}
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"field": "id", "message": "must not be null"}]}
        mock_book_service.update.assert_not_called()

    def test_edit_missing_book(self, mock_client: TestClient, mock_book_service: Mock):
        mock_book_service.update.side_effect = NotFoundError("Book", 7)

        response = mock_client.put(
            "/edit/book/api/v1", json={"id": 7, "title": "Book7", "authorId": 1, "genreId": 1}
        )

        assert response.status_code == 404
        assert response.json() == {"detail": "Book with id 7 not found"}


class TestCreateBook:
    def test_create_book(self, mock_client: TestClient, mock_book_service: Mock, seed_books):
        book = seed_books[0]
        mock_book_service.create.return_value = book

        response = mock_client.post(
            "/create/api/v1", json={"title": "Book1", "authorId": 1, "genreId": 1}
        )

        assert response.status_code == 201
        assert response.headers["content-type"] == "application/json"
        assert response.json() == _book_json(book)
        mock_book_service.create.assert_called_once_with("Book1", 1, 1)

    def test_create_book_short_title(self, mock_client: TestClient, mock_book_service: Mock):
        response = mock_client.post(
            "/create/api/v1", json={"title": "tr", "authorId": 1, "genreId": 1}
        )

        assert response.status_code == 400
        assert response.headers["content-type"] == "application/json"
        mock_book_service.create.assert_not_called()

    def test_create_book_blank_title(self, mock_client: TestClient, mock_book_service: Mock):
        response = mock_client.post(
            "/create/api/v1", json={"title": "     ", "authorId": 1, "genreId": 1}
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "title", "message": "The book title must contain at least one symbol."}
        ]

    @pytest.mark.parametrize(
        "body, fields",
        [
            ({"title": "Book1", "genreId": 1}, ["authorId"]),
            ({"title": "Book1", "authorId": None, "genreId": 1}, ["authorId"]),
            ({"title": None, "authorId": 1, "genreId": 1}, ["title"]),
            ({"authorId": 1}, ["title", "genreId"]),
        ],
    )
    def test_create_book_null_fields(
        self, mock_client: TestClient, mock_book_service: Mock, body: dict, fields: list[str]
    ):
        response = mock_client.post("/create/api/v1", json=body)

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert sorted(e["field"] for e in errors) == sorted(fields)
        assert {e["message"] for e in errors} == {"must not be null"}
        mock_book_service.create.assert_not_called()

    def test_create_book_service_rejection(
        self, mock_client: TestClient, mock_book_service: Mock
    ):
        """Service-level validation failures use the same body as DTO failures."""
        mock_book_service.create.side_effect = ValidationFailedError(
            [FieldError(field="title", message="rejected")]
        )

        response = mock_client.post(
            "/create/api/v1", json={"title": "Book1", "authorId": 1, "genreId": 1}
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"field": "title", "message": "rejected"}]}

    @pytest.mark.parametrize("entity", ["Author", "Genre"])
    def test_create_book_unknown_reference(
        self, mock_client: TestClient, mock_book_service: Mock, entity: str
    ):
        mock_book_service.create.side_effect = NotFoundError(entity, 99)

        response = mock_client.post(
            "/create/api/v1", json={"title": "Book1", "authorId": 99, "genreId": 99}
        )

        assert response.status_code == 404
        assert response.json() == {"detail": f"{entity} with id 99 not found"}


class TestDeleteBook:
    def test_delete_book(self, mock_client: TestClient, mock_book_service: Mock):
        response = mock_client.delete("/delete/book/api/v1/3")

        assert response.status_code == 200
        assert response.json() == {"message": "Book deleted successfully"}
        mock_book_service.delete_by_id.assert_called_once_with(3)


class TestRequestLogging:
    def test_request_id_is_echoed(self, mock_client: TestClient, mock_book_service: Mock):
        mock_book_service.find_all.return_value = []

        response = mock_client.get("/list/api/v1", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, mock_client: TestClient, mock_book_service: Mock):
        mock_book_service.find_all.return_value = []

        response = mock_client.get("/list/api/v1")

        assert response.headers["X-Request-ID"]

    def test_unexpected_error_becomes_500(
        self, mock_client: TestClient, mock_book_service: Mock
    ):
        mock_book_service.find_all.side_effect = RuntimeError("boom")

        response = mock_client.get("/list/api/v1", headers={"X-Request-ID": "req-500"})

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal Server Error", "request_id": "req-500"}


class TestOutOfRangeIds:
    @pytest.mark.parametrize(
        "method, path",
        [
            ("get", "/book/api/v1/99999999999999999999"),
            ("delete", "/delete/book/api/v1/99999999999999999999"),
            ("delete", "/delete/book/api/v1/0"),
        ],
    )
    def test_path_id_is_rejected(
        self, mock_client: TestClient, mock_book_service: Mock, method: str, path: str
    ):
        response = mock_client.request(method, path)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "book_id"
        mock_book_service.find_by_id.assert_not_called()
        mock_book_service.delete_by_id.assert_not_called()

    def test_body_ids_are_rejected(self, mock_client: TestClient, mock_book_service: Mock):
        response = mock_client.post(
            "/create/api/v1",
            json={"title": "abc", "authorId": 99999999999999999999, "genreId": 1},
        )

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["authorId"]
        mock_book_service.create.assert_not_called()
