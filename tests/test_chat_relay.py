from stylelog.chat.relay import extract_photo_refs, relay_chat, select_photos
from stylelog.chat.sessions import InMemoryChatSessionStore
from stylelog.schemas.outfits import OutfitCreate, OutfitTags
from stylelog.services.llm.providers.base import DISABLED_ANSWER, LLMUnavailableError, NullProvider
from stylelog.services.llm.types import ChatImage, LLMUsage, StyleChatInput, StyleChatOutput
from stylelog.store import InMemoryOutfitStore


class FakeProvider:
    name = "fake"

    def __init__(self, answer: str = "", fail: bool = False):
        self.answer = answer
        self.fail = fail
        self.calls: list[StyleChatInput] = []

    async def style_chat(self, payload: StyleChatInput, *, timeout_ms: int) -> StyleChatOutput:
        self.calls.append(payload)
        if self.fail:
            raise LLMUnavailableError("timeout")
        return StyleChatOutput(answer=self.answer, usage=LLMUsage(model="fake-model"))


def _url(key: str) -> str:
    return f"https://cdn.test/{key}"


async def _store_with_photos():
    store = InMemoryOutfitStore()
    await store.create_outfit(
        OutfitCreate(
            tags=OutfitTags(occasion=["work"], style=["classic"]),
            photo_references=["u/o/outfits/1/look1.jpg", "u/o/outfits/1/look2.png", "u/o/outfits/1/clip.mov"],
        )
    )
    return store


def test_extract_photo_refs():
    answer = "**Wear This:** the navy look\n**PHOTO_REFS:** look1.jpg, [Look2.PNG]\n"
    clean, refs = extract_photo_refs(answer)
    assert clean == "**Wear This:** the navy look"
    assert refs == ["look1.jpg", "look2.png"]
    assert extract_photo_refs("no refs here") == ("no refs here", None)


def test_select_photos():
    images = [ChatImage(filename="look1.jpg", url="u1"), ChatImage(filename="look2.png", url="u2")]
    assert select_photos(images, None) == images
    assert [i.filename for i in select_photos(images, ["look2"])] == ["look2.png"]
    assert select_photos(images, []) == []


async def test_disabled_provider_short_circuits():
    sessions = InMemoryChatSessionStore()
    out = await relay_chat("what should I wear?", "s", sessions, InMemoryOutfitStore(), provider=NullProvider())
    assert out.response == DISABLED_ANSWER
    assert out.images == []
    assert await sessions.history("s") == []


async def test_turn_sends_photos_and_returns_referenced_ones():
    provider = FakeProvider("**Look 1:** blazer and jeans\n**PHOTO_REFS:** look1.jpg")
    sessions = InMemoryChatSessionStore()
    store = await _store_with_photos()
    out = await relay_chat("what should I wear today?", "s", sessions, store, provider=provider, photo_url=_url)

    sent = provider.calls[0]
    assert [i.filename for i in sent.images] == ["look1.jpg", "look2.png"]
    assert sent.outfit_context and "work" in sent.outfit_context[0]
    assert out.response == "**Look 1:** blazer and jeans"
    assert [i.url for i in out.images] == ["https://cdn.test/u/o/outfits/1/look1.jpg"]
    assert out.model == "fake-model"

    history = await sessions.history("s")
    assert [m["role"] for m in history] == ["user", "assistant"]
    assert "PHOTO_REFS" not in history[1]["content"]


async def test_follow_up_without_keywords_skips_photos():
    provider = FakeProvider("Sure.")
    sessions = InMemoryChatSessionStore()
    store = await _store_with_photos()
    await relay_chat("hello there", "s", sessions, store, provider=provider, photo_url=_url)
    await relay_chat("thanks!", "s", sessions, store, provider=provider, photo_url=_url)
    assert provider.calls[0].images
    assert provider.calls[1].images == []
    assert len(provider.calls[1].history) == 2


async def test_low_effort_detected():
    provider = FakeProvider("ok")
    await relay_chat("I'm tired, just pick one", "s", InMemoryChatSessionStore(), InMemoryOutfitStore(), provider=provider, photo_url=_url)
    assert provider.calls[0].low_effort is True


async def test_provider_failure_falls_back_and_keeps_history_clean():
    sessions = InMemoryChatSessionStore()
    out = await relay_chat("outfit ideas?", "s", sessions, InMemoryOutfitStore(), provider=FakeProvider(fail=True), photo_url=_url)
    assert "try again" in out.response
    assert await sessions.history("s") == []


async def test_chat_endpoint(client, store, monkeypatch):
    from stylelog.main import app
    from stylelog.routers.chat import get_chat_provider
    from stylelog.storage import r2

    monkeypatch.setattr(r2, "photo_url", _url)
    provider = FakeProvider("Wear the blazer.\n**PHOTO_REFS:** look1.jpg")
    app.dependency_overrides[get_chat_provider] = lambda: provider
    try:
        await store.create_outfit(OutfitCreate(photo_references=["u/o/outfits/1/look1.jpg"]))
        resp = await client.post("/v1/chat", json={"message": "what should I wear?", "session_id": "api"})
    finally:
        app.dependency_overrides.pop(get_chat_provider, None)
    assert resp.status_code == 200
    body = resp.json()
    assert body["response"] == "Wear the blazer."
    assert body["images"][0]["filename"] == "look1.jpg"


async def test_chat_endpoint_disabled_by_default(client):
    resp = await client.post("/v1/chat", json={"message": "hi"})
    assert resp.status_code == 200
    assert resp.json()["response"] == DISABLED_ANSWER
