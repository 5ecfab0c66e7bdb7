"""Task HTML views (/tasks): list, detail, forms, redirects after writes."""

import pytest
from httpx import AsyncClient

from app.core.constants import ValidationMessages

pytestmark = pytest.mark.requires_db


async def test_list_shows_tasks_and_filters(client: AsyncClient, seeded) -> None:
    response = await client.get("/tasks")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Spring Boot を学ぶ" in response.text
    assert "Spring Security を学ぶ" in response.text

    filtered = await client.get("/tasks", params={"status": "TODO"})
    assert "Spring Security を学ぶ" in filtered.text
    assert "Spring Boot を学ぶ" not in filtered.text
    assert 'value="TODO" checked' in filtered.text


async def test_detail_and_not_found(client: AsyncClient, seeded) -> None:
    response = await client.get("/tasks/1")
    assert response.status_code == 200
    assert "Spring Boot を学ぶ" in response.text
    assert 'href="/tasks/1/editForm"' in response.text

    missing = await client.get("/tasks/999")
    assert missing.status_code == 404
    assert "text/html" in missing.headers["content-type"]


async def test_creation_form(client: AsyncClient) -> None:
    response = await client.get("/tasks/creationForm")
    assert response.status_code == 200
    assert 'data-mode="CREATE"' in response.text


async def test_create_redirects_to_list(client: AsyncClient) -> None:
    response = await client.post(
        "/tasks",
        data={"summary": "新しいタスク", "description": "タスクの説明", "status": "TODO"},
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/tasks"

    listing = await client.get("/tasks")
    assert "新しいタスク" in listing.text


async def test_create_validation_error_rerenders_form(client: AsyncClient) -> None:
    response = await client.post(
        "/tasks", data={"summary": "", "description": "タスクの説明", "status": "TODO"}
    )
    assert response.status_code == 200
    assert 'data-mode="CREATE"' in response.text
    assert ValidationMessages.SUMMARY_REQUIRED in response.text
    assert "タスクの説明" in response.text


async def test_edit_form_is_prefilled(client: AsyncClient, seeded) -> None:
    response = await client.get("/tasks/2/editForm")
    assert response.status_code == 200
    assert 'data-mode="EDIT"' in response.text
    assert 'value="Spring Security を学ぶ"' in response.text
    assert '<option value="TODO" selected>' in response.text


async def test_update_redirects_to_detail(client: AsyncClient, seeded) -> None:
    response = await client.put(
        "/tasks/1",
        data={"summary": "更新されたタスク", "description": "更新された説明", "status": "DONE"},
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/tasks/1"

    detail = await client.get("/tasks/1")
    assert "更新されたタスク" in detail.text


async def test_update_via_post_validation_error(client: AsyncClient, seeded) -> None:
    response = await client.post(
        "/tasks/1", data={"summary": "x", "description": "", "status": "INVALID"}
    )
    assert response.status_code == 200
    assert 'data-mode="EDIT"' in response.text
    assert ValidationMessages.STATUS_PATTERN in response.text


async def test_delete_redirects_to_list(client: AsyncClient, seeded) -> None:
    response = await client.post("/tasks/1/delete")
    assert response.status_code == 303
    assert response.headers["location"] == "/tasks"
    assert (await client.get("/tasks/1")).status_code == 404

    again = await client.delete("/tasks/1")
    assert again.status_code == 303


async def test_summary_is_html_escaped(client: AsyncClient) -> None:
    await client.post(
        "/tasks", data={"summary": "<script>alert(1)</script>", "status": "TODO"}
    )
    listing = await client.get("/tasks")
    assert "<script>alert(1)</script>" not in listing.text
    assert "&lt;script&gt;" in listing.text


async def test_list_unknown_status_renders_search_form(client: AsyncClient, seeded) -> None:
    response = await client.get("/tasks", params=[("status", "TODO"), ("status", "BOGUS")])
    assert response.status_code == 400
    assert "text/html" in response.headers["content-type"]
    assert ValidationMessages.STATUS_PATTERN in response.text
    assert 'value="TODO" checked' in response.text
    assert "Spring Security を学ぶ" not in response.text
