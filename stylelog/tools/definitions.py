"""JSON-schema tool declarations for assistant callers."""
from typing import Any, Dict, List

from stylelog.core.tags import ALLOWED_SEASONS, KNOWN_MOODS, KNOWN_OCCASIONS, KNOWN_STYLES
from stylelog.schemas.wardrobe import CATEGORIES

_SEASONS = sorted(ALLOWED_SEASONS)
_RATING = {"type": "integer", "minimum": 1, "maximum": 10}
_WEATHER = {
    "type": "object",
    "properties": {
        "temperature": {"type": "number", "description": "Temperature in Fahrenheit"},
        "condition": {"type": "string", "description": "sunny, cloudy, rainy, ..."},
        "precipitation": {"type": "boolean"},
    },
}


def _strings(description: str) -> Dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


TOOLS: List[Dict[str, Any]] = [
    {
        "name": "log_outfit",
        "description": "Log a new outfit with photos, tags and context; returns its style analysis",
        "input_schema": {
            "type": "object",
            "properties": {
                "photo_paths": _strings("Storage keys or URLs of the outfit photos"),
                "occasion": _strings(f"Occasion tags ({', '.join(KNOWN_OCCASIONS)})"),
                "style_tags": _strings(f"Style tags ({', '.join(KNOWN_STYLES)})"),
                "mood": {"type": "string", "description": f"Mood ({', '.join(KNOWN_MOODS)})"},
                "season": {"type": "string", "enum": _SEASONS},
                "colors": _strings("Primary colors in the outfit"),
                "garments": _strings("Specific clothing items worn"),
                "formality_level": _RATING,
                "effort_level": {"type": "string", "enum": ["low", "medium", "high"]},
                "weather_context": _WEATHER,
                "location": {"type": "string"},
                "duration": {"type": "string", "description": "e.g. '8 hours', 'all day'"},
                "event_type": {"type": "string"},
                "notes": {"type": "string"},
            },
            "required": [],
        },
    },
    {
        "name": "rate_outfit",
        "description": "Rate an existing outfit on confidence, comfort and success",
        "input_schema": {
            "type": "object",
            "properties": {
                "outfit_id": {"type": "string"},
                "confidence": _RATING,
                "comfort": _RATING,
                "success": _RATING,
                "repeat_likelihood": _RATING,
                "received_compliments": {"type": "boolean"},
                "felt_appropriate": {"type": "boolean"},
                "feedback_notes": {"type": "string"},
            },
            "required": ["outfit_id", "confidence", "comfort", "success"],
        },
    },
    {
        "name": "get_outfit_recommendations",
        "description": "Outfit recommendations drawn from your history for a given context",
        "input_schema": {
            "type": "object",
            "properties": {
                "occasion": {"type": "string"},
                "weather": _WEATHER,
                "mood_preference": {"type": "string"},
                "style_preference": _strings("Preferred style directions; the first is used"),
                "time_of_day": {"type": "string", "enum": ["morning", "afternoon", "evening", "night"]},
                "duration": {"type": "string"},
                "limit": {"type": "integer", "minimum": 1, "maximum": 5, "default": 5},
            },
        },
    },
    {
        "name": "search_outfits",
        "description": "Search outfit history by tags, ratings, season and date range",
        "input_schema": {
            "type": "object",
            "properties": {
                "tags": _strings("Occasion or style tags; each must match"),
                "date_range": {
                    "type": "object",
                    "properties": {
                        "start": {"type": "string", "format": "date"},
                        "end": {"type": "string", "format": "date"},
                    },
                },
                "min_confidence": _RATING,
                "min_comfort": _RATING,
                "min_success": _RATING,
                "occasion": {"type": "string"},
                "season": {"type": "string", "enum": _SEASONS},
                "limit": {"type": "integer", "minimum": 1, "maximum": 100, "default": 20},
            },
        },
    },
    {
        "name": "analyze_style_patterns",
        "description": "Analyze style patterns and trends over time",
        "input_schema": {
            "type": "object",
            "properties": {
                "time_period": {"type": "string", "enum": ["week", "month", "season", "year"], "default": "month"},
                "analysis_type": {
                    "type": "string",
                    "enum": [
                        "confidence_trends",
                        "comfort_patterns",
                        "style_evolution",
                        "color_preferences",
                        "occasion_analysis",
                    ],
                },
                "focus_category": {
                    "type": "string",
                    "enum": ["work", "casual", "formal", "seasonal", "all"],
                    "default": "all",
                },
            },
        },
    },
    {
        "name": "add_wardrobe_item",
        "description": "Add a garment or accessory to the wardrobe inventory",
        "input_schema": {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "category": {"type": "string", "enum": list(CATEGORIES)},
                "colors": _strings("Item colors"),
                "style_tags": _strings("Style tags"),
                "purchase_date": {"type": "string", "format": "date"},
                "cost": {"type": "number", "minimum": 0},
                "brand": {"type": "string"},
                "care_instructions": {"type": "string"},
            },
            "required": ["name", "category"],
        },
    },
    {
        "name": "wardrobe_gap_analysis",
        "description": "Find wardrobe gaps from your inventory and outfit ratings",
        "input_schema": {
            "type": "object",
            "properties": {
                "focus_area": {"type": "string", "default": "general"},
                "time_period": {"type": "string", "enum": ["week", "month", "season", "year"], "default": "season"},
            },
        },
    },
    {
        "name": "calculate_cost_per_wear",
        "description": "Cost per wear for wardrobe items that have a cost",
        "input_schema": {
            "type": "object",
            "properties": {"category": {"type": "string", "enum": list(CATEGORIES)}},
        },
    },
    {
        "name": "identify_go_to_outfits",
        "description": "Your most successful outfit formulas",
        "input_schema": {
            "type": "object",
            "properties": {
                "success_metric": {
                    "type": "string",
                    "enum": ["confidence", "comfort", "success", "overall"],
                    "default": "overall",
                },
                "min_rating": {"type": "number", "minimum": 1, "maximum": 10, "default": 7},
                "occasion_filter": {"type": "string"},
            },
        },
    },
]

TOOL_NAMES = frozenset(t["name"] for t in TOOLS)
