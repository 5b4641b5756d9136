from datetime import datetime

import pytest

from stylelog.core.tags import (
    clean_labels,
    current_season,
    filter_season,
    filter_slug,
    normalize_many,
    normalize_season,
    normalize_tag,
)
from stylelog.schemas.outfits import OutfitTags

def test_normalize_basic_slug():
    assert normalize_tag(" Boho/Chic ") == "boho-chic"
    assert normalize_tag("Date   Night") == "date-night"

def test_normalize_unicode_and_case():
    assert normalize_tag("Café Crème") == "cafe-creme"

def test_normalize_many_dedupes_and_skips_blank():
    assert normalize_many(["Minimal", "minimal", "  minimal  ", "  "]) == ["minimal"]

def test_length_bounds():
    with pytest.raises(ValueError):
        normalize_tag("a" * 33)
    assert normalize_tag("a" * 32) == "a" * 32

def test_season_aliases_and_closed_set():
    assert normalize_season("Autumn") == "fall"
    with pytest.raises(ValueError):
        normalize_season("monsoon")

def test_garments_keep_their_wording():
    assert clean_labels(["  Navy   Blazer ", "navy blazer", "White Tee"]) == ["Navy Blazer", "White Tee"]

def test_current_season():
    assert current_season(datetime(2026, 4, 1)) == "spring"
    assert current_season(datetime(2026, 7, 1)) == "summer"
    assert current_season(datetime(2026, 10, 1)) == "fall"
    assert current_season(datetime(2026, 12, 1)) == "winter"

def test_outfit_tags_normalized_on_input():
    tags = OutfitTags(occasion=["Work"], style=["Classic", "classic"], season=["Autumn", "fall"], mood=" Confident ")
    assert tags.occasion == ["work"]
    assert tags.style == ["classic"]
    assert tags.season == ["fall"]
    assert tags.mood == "confident"

def test_filter_values_slug_like_stored_tags():
    assert filter_slug("Date Night") == normalize_tag("Date Night")
    assert filter_slug("  ") is None
    assert filter_slug(None) is None
    assert filter_slug("x" * 40) == "x" * 40

def test_filter_season_maps_aliases():
    assert filter_season("Autumn") == "fall"
    assert filter_season("WINTER") == "winter"
    assert filter_season("") is None
