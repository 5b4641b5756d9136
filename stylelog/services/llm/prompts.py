from __future__ import annotations

from typing import Any, Dict, List

from stylelog.services.llm.types import StyleChatInput

PROMPT_VERSION = "p1"

LOW_EFFORT_KEYWORDS = (
    "lazy", "low effort", "tired", "don't want to think", "easy", "simple",
    "just wear", "recreate", "same as", "exact same", "don't feel like",
    "can't decide", "no energy", "quick", "grab and go", "effortless",
    "zero effort", "no thinking", "just pick one", "one outfit", "single outfit",
)
IMAGE_KEYWORDS = ("recommend", "wear", "style", "outfit", "what should i", "mix", "match")

STYLIST_SYS = (
    "You are a personal stylist working from the user's own outfit log and wardrobe photos. "
    "Only describe pieces that are visible in the shared photos or listed in the outfit log."
)

LOW_EFFORT_SYS = (
    "LOW EFFORT MODE: pick the single best complete outfit from the photos and tell the user "
    "to recreate it exactly. No mixing and matching; focus on comfort and ease.\n"
    "FORMAT:\n"
    "**Wear This:** [the exact outfit from one photo]\n"
    "- **Why it's perfect:** [why it suits an easy day]\n"
    "**PHOTO_REFS:** [filename of the outfit you picked]"
)

CREATIVE_SYS = (
    "CREATIVE MODE: give 2-3 specific outfit suggestions that mix pieces across the photos.\n"
    "FORMAT:\n"
    "**Look 1:** [2-3 pieces that work together]\n"
    "- **Why it works:** [color and style logic]\n"
    "- **Pro tip:** [one styling tip]\n"
    "**PHOTO_REFS:** [comma separated filenames used]"
)


def is_low_effort(message: str) -> bool:
    m = message.lower()
    return any(k in m for k in LOW_EFFORT_KEYWORDS)


def wants_images(message: str, first_turn: bool) -> bool:
    m = message.lower()
    return first_turn or any(k in m for k in IMAGE_KEYWORDS)


def build_system_prompt(payload: StyleChatInput) -> str:
    parts = [STYLIST_SYS, LOW_EFFORT_SYS if payload.low_effort else CREATIVE_SYS]
    if payload.outfit_context:
        parts.append("Recent outfit log:\n" + "\n".join(f"- {line}" for line in payload.outfit_context))
    return "\n\n".join(parts)


def build_chat_prompt(payload: StyleChatInput) -> List[Dict[str, Any]]:
    content: List[Dict[str, Any]] = [{"type": "text", "text": payload.message}]
    if payload.images:
        for img in payload.images:
            content.append({"type": "image_url", "image_url": {"url": img.url, "detail": "high"}})
        names = ", ".join(img.filename for img in payload.images)
        ask = (
            "Pick the single best outfit from these photos." if payload.low_effort
            else "Suggest 2-3 outfit combinations using these pieces."
        )
        content.append({"type": "text", "text": f"Photos: {names}\n{ask}"})
    return [
        {"role": "system", "content": build_system_prompt(payload)},
        *payload.history,
        {"role": "user", "content": content},
    ]
