import pytest
from app.core import config

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Pin rendering settings for tests and restore them afterwards"""
    original = {
        "COLOR_OUTPUT": config.settings.COLOR_OUTPUT,
        "LINE_WIDTH": config.settings.LINE_WIDTH,
        "DEFAULT_LOCATION": config.settings.DEFAULT_LOCATION,
        "FEED_BASE_URL": config.settings.FEED_BASE_URL,
    }

    config.settings.COLOR_OUTPUT = False
    config.settings.LINE_WIDTH = 80
    config.settings.DEFAULT_LOCATION = "mensa-arcisstr"
    config.settings.FEED_BASE_URL = "https://tum-dev.github.io/eat-api"

    yield

    for key, value in original.items():
        setattr(config.settings, key, value)

@pytest.fixture
def make_dish():
    """Build a raw dish record as the meal plan feed publishes it"""
    def _make(name="Linsensuppe", base=1.9, per_unit=0, unit="Stück", labels=None):
        price = {"base_price": base, "price_per_unit": per_unit, "unit": unit}
        return {
            "name": name,
            "prices": {"students": price, "staff": price, "guests": price},
            "labels": labels if labels is not None else [],
        }
    return _make

@pytest.fixture
def label_feed():
    return [
        {"enum_name": "VEGAN", "text": {"DE": "Vegan", "EN": "vegan"}, "abbreviation": "veg"},
        {"enum_name": "GLUTEN", "text": {"DE": "Gluten", "EN": "gluten"}, "abbreviation": "🌾"},
        {"enum_name": "PORK", "text": {"DE": "Schwein", "EN": "pork"}, "abbreviation": "🐷"},
    ]
