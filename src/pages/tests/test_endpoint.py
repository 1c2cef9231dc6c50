import json

import pytest

from src.config.settings import settings
from src.pages.router import DASHBOARD_URL, FORM_URL


@pytest.fixture
def dutch_pages(monkeypatch):
    monkeypatch.setattr(settings, "PAGE_LANGUAGE", "nl")
    monkeypatch.setattr(settings, "event_title", "het feest")
    monkeypatch.setattr(settings, "contact_phone", "+31 6 12345678")


@pytest.mark.asyncio
async def test_form_starts_at_welcome(client, dutch_pages):
    response = await client.get(FORM_URL)

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "wat is je naam?" in response.text
    assert 'name="step" value="welcome"' in response.text


@pytest.mark.asyncio
async def test_continue_with_name_shows_question(client, dutch_pages):
    response = await client.post(
        FORM_URL, data={"action": "continue", "step": "welcome", "name": "Anna"}
    )

    assert response.status_code == 200
    assert "Hoi Anna!" in response.text
    assert "Kom je op het feest?" in response.text
    assert 'name="step" value="question"' in response.text


@pytest.mark.asyncio
async def test_continue_without_name_stays_on_welcome(client, dutch_pages):
    response = await client.post(FORM_URL, data={"action": "continue", "step": "welcome", "name": " "})

    assert 'name="step" value="welcome"' in response.text


@pytest.mark.asyncio
async def test_back_returns_to_welcome_with_name(client, dutch_pages):
    response = await client.post(FORM_URL, data={"action": "back", "step": "question", "name": "Anna"})

    assert 'name="step" value="welcome"' in response.text
    assert 'value="Anna"' in response.text


@pytest.mark.asyncio
async def test_back_keeps_chosen_answer(client, dutch_pages):
    back = await client.post(
        FORM_URL, data={"action": "back", "step": "question", "name": "Anna", "response": "Nee"}
    )

    assert 'name="step" value="welcome"' in back.text
    assert '<input type="hidden" name="response" value="Nee">' in back.text

    again = await client.post(
        FORM_URL, data={"action": "continue", "step": "welcome", "name": "Anna", "response": "Nee"}
    )

    assert 'name="step" value="question"' in again.text
    assert 'value="Nee" checked' in again.text
    assert 'value="Ja" checked' not in again.text


@pytest.mark.asyncio
async def test_guest_input_is_escaped(client, dutch_pages):
    response = await client.post(
        FORM_URL, data={"action": "continue", "step": "welcome", "name": "<script>x</script>"}
    )

    assert "<script>x</script>" not in response.text
    assert "&lt;script&gt;" in response.text


@pytest.mark.asyncio
async def test_submit_stores_rsvp_and_thanks(client_factory, store_overrides, blob_store, dutch_pages):
    async with client_factory(store_overrides) as client:
        response = await client.post(
            FORM_URL,
            data={"action": "submit", "step": "question", "name": "Anna", "response": "Ja"},
        )

    assert response.status_code == 200
    assert "Geweldig, Anna!" in response.text
    assert "+31 6 12345678" in response.text
    [payload] = blob_store.objects.values()
    assert json.loads(payload)["response"] == "Ja"


@pytest.mark.asyncio
async def test_submit_no_thanks_message(client_factory, store_overrides, dutch_pages):
    async with client_factory(store_overrides) as client:
        response = await client.post(
            FORM_URL,
            data={"action": "submit", "step": "question", "name": "Bram", "response": "Nee"},
        )

    assert "Bedankt, Bram!" in response.text


@pytest.mark.asyncio
async def test_submit_without_answer(client_factory, store_overrides, blob_store, dutch_pages):
    async with client_factory(store_overrides) as client:
        response = await client.post(
            FORM_URL, data={"action": "submit", "step": "question", "name": "Anna"}
        )

    assert response.status_code == 400
    assert "Kies eerst een antwoord." in response.text
    assert blob_store.objects == {}


@pytest.mark.asyncio
async def test_submit_store_failure_keeps_question(
    client_factory, store_overrides, blob_store, dutch_pages
):
    blob_store.fail_writes = True

    async with client_factory(store_overrides) as client:
        response = await client.post(
            FORM_URL,
            data={"action": "submit", "step": "question", "name": "Anna", "response": "Ja"},
        )

    assert response.status_code == 500
    assert "Er ging iets mis. Verstuur het nog een keer." in response.text
    assert 'name="step" value="question"' in response.text


@pytest.mark.asyncio
async def test_english_pages(client, monkeypatch):
    monkeypatch.setattr(settings, "PAGE_LANGUAGE", "en")

    response = await client.post(
        FORM_URL, data={"action": "continue", "step": "welcome", "name": "Anna"}
    )

    assert "Hi Anna!" in response.text
    assert 'value="Yes"' in response.text


@pytest.mark.asyncio
async def test_dashboard_shows_totals_and_rows(client_factory, store_overrides, blob_store):
    blob_store.objects["rsvp-1-a"] = json.dumps(
        {"id": "rsvp-1-a", "name": "Anna", "response": "Ja", "timestamp": "2025-09-20T12:00:00Z"}
    ).encode()
    blob_store.objects["rsvp-2-b"] = json.dumps(
        {"id": "rsvp-2-b", "name": "Bram", "response": "Nee", "message": "Sorry!"}
    ).encode()
    blob_store.objects["rsvp-3-c"] = json.dumps(
        {"id": "rsvp-3-c", "name": "Cees", "response": "misschien"}
    ).encode()

    async with client_factory(store_overrides) as client:
        response = await client.get(DASHBOARD_URL)

    assert response.status_code == 200
    text = response.text
    assert '<div class="stat-label">Total</div><div class="stat-value">3</div>' in text
    assert '<div class="stat-label">Yes</div><div class="stat-value">1</div>' in text
    assert '<div class="stat-label">No</div><div class="stat-value">1</div>' in text
    assert text.index("Anna") < text.index("Bram")
    assert "Sorry!" in text
    assert '<span class="badge">misschien</span>' in text


@pytest.mark.asyncio
async def test_dashboard_empty(client_factory, store_overrides):
    async with client_factory(store_overrides) as client:
        response = await client.get(DASHBOARD_URL)

    assert "No RSVPs yet." in response.text


@pytest.mark.asyncio
async def test_dashboard_error_state(client_factory, store_overrides, blob_store):
    blob_store.fail_lists = True

    async with client_factory(store_overrides) as client:
        response = await client.get(DASHBOARD_URL)

    assert response.status_code == 500
    assert "Error: failed to fetch RSVPs" in response.text
    assert '<a href="/admin">Reload</a>' in response.text
