import logging
import re
from typing import Callable, List, Optional, Sequence, Tuple

from stylelog.chat.sessions import ChatSessionStore
from stylelog.core.config import settings
from stylelog.schemas.chat import ChatImageOut, ChatOut
from stylelog.schemas.outfits import Outfit
from stylelog.services import llm as llm_service
from stylelog.services.llm.prompts import is_low_effort, wants_images
from stylelog.services.llm.providers.base import DISABLED_ANSWER, LLMProvider, NullProvider
from stylelog.services.llm.types import ChatImage, StyleChatInput
from stylelog.storage import r2
from stylelog.storage.keys import photo_filename
from stylelog.store.base import OutfitStore

logger = logging.getLogger(__name__)

PHOTO_REFS_RE = re.compile(r"\*\*PHOTO_REFS:\*\*[ \t]*([^*\n]*)\n?", re.IGNORECASE)
VISION_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp")


def extract_photo_refs(answer: str) -> Tuple[str, Optional[List[str]]]:
    """Strip the PHOTO_REFS line; return the cleaned answer and the lowercased filenames.

    ``None`` means the model did not reference photos at all.
    """
    m = PHOTO_REFS_RE.search(answer)
    if not m:
        return answer.strip(), None
    refs = [r.strip().strip("[]").lower() for r in m.group(1).split(",")]
    cleaned = (answer[: m.start()] + answer[m.end():]).strip()
    return cleaned, [r for r in refs if r]


def select_photos(images: Sequence[ChatImage], refs: Optional[List[str]]) -> List[ChatImage]:
    if refs is None:
        return list(images)
    return [
        img for img in images
        if any(img.filename.lower() == r or r in img.filename.lower() for r in refs)
    ]


def outfit_line(outfit: Outfit) -> str:
    tags = outfit.tags
    parts = [f"{outfit.timestamp:%Y-%m-%d}"]
    if tags.occasion:
        parts.append("occasion: " + ", ".join(tags.occasion))
    if tags.style:
        parts.append("style: " + ", ".join(tags.style))
    if tags.colors:
        parts.append("colors: " + ", ".join(tags.colors))
    if tags.garments:
        parts.append("garments: " + ", ".join(tags.garments))
    if outfit.ratings is not None:
        r = outfit.ratings
        parts.append(f"rated confidence {r.confidence}, comfort {r.comfort}, success {r.success}")
    if outfit.photo_references:
        parts.append("photos: " + ", ".join(photo_filename(p) for p in outfit.photo_references))
    return "; ".join(parts)


def recent_photos(outfits: Sequence[Outfit], photo_url: Callable[[str], str], limit: int) -> List[ChatImage]:
    images: List[ChatImage] = []
    for outfit in outfits:
        for ref in outfit.photo_references:
            if not ref.lower().endswith(VISION_EXTENSIONS):
                continue
            images.append(ChatImage(filename=photo_filename(ref), url=photo_url(ref)))
            if len(images) >= limit:
                return images
    return images


async def relay_chat(
    message: str,
    session_id: str,
    sessions: ChatSessionStore,
    store: OutfitStore,
    *,
    provider: Optional[LLMProvider] = None,
    photo_url: Optional[Callable[[str], str]] = None,
) -> ChatOut:
    """One chat turn: build context from the outfit log, call the model, update history."""
    provider = provider or llm_service.get_provider()
    if provider.name == NullProvider.name:
        return ChatOut(response=DISABLED_ANSWER, images=[], model=NullProvider.name)
    photo_url = photo_url or r2.photo_url

    history = await sessions.history(session_id)
    outfits = await store.recent_outfits(settings.RECENT_OUTFITS_DAYS)
    images: List[ChatImage] = []
    if wants_images(message, first_turn=not history):
        images = recent_photos(outfits, photo_url, settings.CHAT_MAX_PHOTOS)

    payload = StyleChatInput(
        message=message,
        history=history,
        outfit_context=[outfit_line(o) for o in outfits[: settings.CHAT_CONTEXT_OUTFITS]],
        images=images,
        low_effort=is_low_effort(message),
    )
    out = await llm_service.style_chat(payload, provider=provider)
    answer, refs = extract_photo_refs(out.answer)
    shown = select_photos(images, refs)

    if out.error is None:
        await sessions.append(
            session_id,
            [{"role": "user", "content": message}, {"role": "assistant", "content": answer}],
        )
    logger.info(
        "chat:turn session=%s low_effort=%s images=%d shown=%d model=%s",
        session_id, payload.low_effort, len(images), len(shown), out.usage.model,
    )
    return ChatOut(
        response=answer,
        images=[ChatImageOut(url=i.url, filename=i.filename) for i in shown],
        model=out.usage.model,
    )
