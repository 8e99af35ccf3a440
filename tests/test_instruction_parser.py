import pytest

from recipe_text.app.services.text_parsing.instruction_parser import (
    create_steps_from_instructions,
    parse_instructions,
)


def test_instructions_stop_at_closing_phrase():
    text = (
        "Anleitung für 2 Portionen:\n"
        "1. Wasser kochen\n"
        "2. Nudeln kochen\n"
        "Lass es dir schmecken!\n"
        "3. Nicht mehr Teil der Anleitung"
    )
    assert parse_instructions(text) == ["Wasser kochen", "Nudeln kochen"]


def test_instructions_stop_at_hashtag():
    text = "Anleitung für 1 Portion:\n1. Mischen\n2. Backen\n#YAZIO #lecker"
    assert parse_instructions(text) == ["Mischen", "Backen"]


def test_instructions_run_to_end_of_text():
    text = "Anleitung für 1 Portion: 1. Schneiden 2. Braten 10. Servieren"
    assert parse_instructions(text) == ["Schneiden", "Braten", "Servieren"]


def test_text_before_first_number_is_kept():
    text = "Anleitung für 1 Portion:\nVorher alles waschen.\n1. Kochen"
    assert parse_instructions(text) == ["Vorher alles waschen.", "Kochen"]


@pytest.mark.parametrize(
    "text",
    ["", "1. Wasser kochen\n2. Nudeln kochen", "Zutaten für 2 Portionen:\nNudeln (200 g)"],
)
def test_missing_instruction_section(text):
    assert parse_instructions(text) == []


def test_header_is_case_insensitive():
    assert parse_instructions("ANLEITUNG FÜR 2 PORTIONEN:\n1. Rühren") == ["Rühren"]


def test_create_steps_from_instructions():
    steps = create_steps_from_instructions(["Wasser kochen", "Nudeln kochen"])

    assert [(s.id, s.instruction, s.order) for s in steps] == [
        ("step-1", "Wasser kochen", 1),
        ("step-2", "Nudeln kochen", 2),
    ]
    assert all(s.image is None and s.formatted_text is None for s in steps)
    assert create_steps_from_instructions([]) == []
