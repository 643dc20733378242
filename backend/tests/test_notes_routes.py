"""
Notes API — Notes Endpoint Tests
==================================

What:  HTTP-level tests for /notes and /notes/{id}.
How:   HTTPX AsyncClient over ASGITransport; no server process needed.

What we test:
    ✅ Status codes and JSON bodies for every endpoint
    ✅ 404 body shape {"id", "err"} for missing ids
    ✅ 422 for malformed bodies and out-of-range ids, 405 for wrong methods
    ✅ 500 with no internals leaked when the store fails unexpectedly
    ✅ X-Request-ID correlation header
"""

import pytest

from notes_api.exceptions import NotesAPIError
from notes_api.store import NoteStore


class TestListNotes:

    @pytest.mark.asyncio
    async def test_list_notes_ok(self, test_client):
        response = await test_client.get("/notes")
        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "text": "FastAPI seems to be a handy back-end framework"},
            {"id": 2, "text": "Web application is supposed to be properly tested"},
        ]

    @pytest.mark.asyncio
    async def test_list_notes_empty(self, make_client, empty_store):
        async with make_client(empty_store) as client:
            response = await client.get("/notes")
        assert response.status_code == 200
        assert response.json() == []


class TestGetNote:

    @pytest.mark.asyncio
    async def test_get_note_ok(self, test_client):
        response = await test_client.get("/notes/1")
        assert response.status_code == 200
        assert response.json()["id"] == 1

    @pytest.mark.asyncio
    async def test_get_note_not_found(self, make_client, empty_store):
        async with make_client(empty_store) as client:
            response = await client.get("/notes/1")
        assert response.status_code == 404
        assert response.json() == {"id": 1, "err": "note not found"}

    @pytest.mark.asyncio
    async def test_get_note_invalid_id(self, test_client):
        assert (await test_client.get("/notes/abc")).status_code == 422
        assert (await test_client.get("/notes/-1")).status_code == 422
        assert (await test_client.get(f"/notes/{2**32}")).status_code == 422


class TestCreateNote:

    @pytest.mark.asyncio
    async def test_create_note_then_get(self, make_client, empty_store):
        payload = {"id": 1, "text": "Take a new note"}
        async with make_client(empty_store) as client:
            response = await client.post("/notes", json=payload)
            assert response.status_code == 201
            assert response.json() == payload

            response = await client.get("/notes/1")
        assert response.status_code == 200
        assert response.json() == payload

    @pytest.mark.asyncio
    async def test_create_duplicate_id_still_201(self, test_client, note_store):
        response = await test_client.post("/notes", json={"id": 1, "text": "again"})
        assert response.status_code == 201
        assert len(note_store) == 3

        # The first note with id 1 keeps answering
        response = await test_client.get("/notes/1")
        assert response.json()["text"] == "FastAPI seems to be a handy back-end framework"

    @pytest.mark.asyncio
    async def test_create_malformed_json(self, test_client, note_store):
        response = await test_client.post(
            "/notes",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        assert len(note_store) == 2

    @pytest.mark.asyncio
    async def test_create_missing_field(self, test_client):
        response = await test_client.post("/notes", json={"id": 3})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_negative_id_rejected(self, test_client):
        response = await test_client.post("/notes", json={"id": -1, "text": "neg"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", ["5", True, 5.0])
    async def test_create_rejects_non_integer_id(self, test_client, note_store, bad_id):
        """Ids that are not JSON integers are malformed, not coerced."""
        response = await test_client.post("/notes", json={"id": bad_id, "text": "x"})
        assert response.status_code == 422
        assert len(note_store) == 2

    @pytest.mark.asyncio
    async def test_create_rejects_non_string_text(self, test_client):
        response = await test_client.post("/notes", json={"id": 3, "text": 42})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_put_on_collection_not_allowed(self, test_client):
        response = await test_client.put("/notes", json={"id": 1, "text": "x"})
        assert response.status_code == 405


class TestUpdateNote:

    @pytest.mark.asyncio
    async def test_update_note_ok(self, test_client):
        response = await test_client.put("/notes/1", json={"id": 1, "text": "changed note"})
        assert response.status_code == 200
        assert response.json() == {"id": 1, "text": "changed note"}

        response = await test_client.get("/notes")
        assert [n["text"] for n in response.json()] == [
            "changed note",
            "Web application is supposed to be properly tested",
        ]

    @pytest.mark.asyncio
    async def test_update_note_not_found(self, test_client):
        response = await test_client.put("/notes/3", json={"id": 3, "text": "changed note"})
        assert response.status_code == 404
        assert response.json() == {"id": 3, "err": "note not found"}

    @pytest.mark.asyncio
    async def test_update_note_renames(self, test_client):
        response = await test_client.put("/notes/1", json={"id": 5, "text": "renamed"})
        assert response.status_code == 200
        assert response.json()["id"] == 5

        assert (await test_client.get("/notes/1")).status_code == 404
        assert (await test_client.get("/notes/5")).status_code == 200

    @pytest.mark.asyncio
    async def test_update_note_malformed_body(self, test_client):
        response = await test_client.put("/notes/1", json={"text": "no id"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_rejects_string_id(self, test_client, sample_notes, note_store):
        response = await test_client.put("/notes/1", json={"id": "1", "text": "x"})
        assert response.status_code == 422
        assert note_store.list_notes() == sample_notes


class TestDeleteNote:

    @pytest.mark.asyncio
    async def test_delete_note_ok(self, test_client):
        response = await test_client.delete("/notes/1")
        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "text": "FastAPI seems to be a handy back-end framework",
        }

        response = await test_client.get("/notes/1")
        assert response.status_code == 404

        response = await test_client.get("/notes")
        assert [n["id"] for n in response.json()] == [2]

    @pytest.mark.asyncio
    async def test_delete_note_not_found(self, make_client, empty_store):
        async with make_client(empty_store) as client:
            response = await client.delete("/notes/1")
        assert response.status_code == 404
        assert response.json() == {"id": 1, "err": "note not found"}


class BrokenStore(NoteStore):
    """Store whose reads fail, standing in for corrupted shared state."""

    def list_notes(self):
        raise RuntimeError("store state corrupted")


class RefusingStore(NoteStore):
    """Store raising a domain error that has no handler of its own."""

    def get_note(self, note_id):
        raise NotesAPIError("store refused the read", context={"note_id": note_id})


class TestUnexpectedErrors:

    @pytest.mark.asyncio
    async def test_store_failure_returns_500(self, make_client):
        async with make_client(BrokenStore(), raise_app_exceptions=False) as client:
            response = await client.get("/notes")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "internal_server_error"
        assert "corrupted" not in body["message"]

    @pytest.mark.asyncio
    async def test_store_failure_keeps_request_id(self, make_client):
        async with make_client(BrokenStore(), raise_app_exceptions=False) as client:
            response = await client.get("/notes", headers={"X-Request-ID": "fail-42"})

        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "fail-42"
        assert response.json()["request_id"] == "fail-42"

    @pytest.mark.asyncio
    async def test_unhandled_domain_error_returns_500(self, make_client):
        async with make_client(RefusingStore(), raise_app_exceptions=False) as client:
            response = await client.get("/notes/1")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "internal_server_error"
        assert "refused" not in body["message"]


class TestRequestId:

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/notes")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/notes/42", headers={"X-Request-ID": "trace-me"})
        assert response.status_code == 404
        assert response.headers["X-Request-ID"] == "trace-me"
