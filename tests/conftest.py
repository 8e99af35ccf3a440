import pytest

from recipe_text.app.core.config import get_settings


SPAGHETTI_TEXT = (
    "🍝 Spaghetti\n"
    "450 kcal ・ 25 Min ・ Einfach\n"
    "Dieses Gericht ist sehr lecker und leicht zuzubereiten für den Alltag.\n"
    "Zutaten für 2 Portionen:\n"
    "Nudeln (200 g)・Ei (2 Stk)\n"
    "Anleitung für 2 Portionen:\n"
    "1. Wasser kochen\n"
    "2. Nudeln kochen\n"
    "Lass es dir schmecken!"
)

OATS_TEXT = """🤤😋🐷Pudding-Oats mit Blaubeeren mhm🤤😋🤤
359 kcal ・ 5 Minuten ・ Leicht

Pudding zum Frühstück klingt für dich nicht gesund? Wir zeigen dir, dass es auch anders geht...

Zutaten für 1 Portion:
・Haferflocken (50 g)
・Wasser (300 ml)
・Puddingpulver, Vanille (20 g)
・Blaubeeren (½ Tasse)
・Zimt

Anleitung für 1 Portion:
1. Haferflocken, Wasser, Puddingpulver aufkochen.
2. Abkühlen lassen und Sojajoghurt unterheben.
3. Mit Blaubeeren und Zimt toppen.

#YAZIO #rezept
"""


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def spaghetti_text():
    return SPAGHETTI_TEXT


@pytest.fixture
def oats_text():
    return OATS_TEXT
