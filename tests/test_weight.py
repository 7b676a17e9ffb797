import subprocess

import pytest

from unitconv.weight import (
    gram_to_kilogram,
    gram_to_ounce,
    gram_to_pound,
    kilogram_to_gram,
    kilogram_to_ounce,
    kilogram_to_pound,
    ounce_to_gram,
    ounce_to_kilogram,
    ounce_to_pound,
    pound_to_gram,
    pound_to_kilogram,
    pound_to_ounce,
    weight_menu,
)


@pytest.fixture(autouse=True)
def clears(monkeypatch):
    recorded = []
    monkeypatch.setattr(subprocess, "run", lambda command, check=False: recorded.append(command))
    return recorded


def scripted(*answers):
    remaining = iter(answers)

    def read(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


def test_source_constants():
    assert pound_to_gram(1) == 453.59237
    assert ounce_to_gram(1) == 28.3495
    assert pound_to_ounce(1) == 16.0
    assert kilogram_to_pound(1) == 2.20462


@pytest.mark.parametrize("value", [0.25, 1.0, 16.0, 2500.0])
def test_round_trips(value):
    assert gram_to_kilogram(kilogram_to_gram(value)) == pytest.approx(value)
    assert gram_to_pound(pound_to_gram(value)) == pytest.approx(value)
    assert gram_to_ounce(ounce_to_gram(value)) == pytest.approx(value)
    assert pound_to_kilogram(kilogram_to_pound(value)) == pytest.approx(value)
    assert ounce_to_pound(pound_to_ounce(value)) == pytest.approx(value)


@pytest.mark.parametrize("value", [1.0, 35.274, 500.0])
def test_kilogram_to_ounce_divides_like_ounce_to_kilogram(value):
    assert kilogram_to_ounce(value) == ounce_to_kilogram(value)


def test_kilogram_to_ounce_scale():
    assert kilogram_to_ounce(35.274) == pytest.approx(1.0)


def test_menu_converts_two_digit_option(clears):
    lines = []
    weight_menu(scripted("10", "1", "11", "1", "13"), lines.append)
    assert "1 LB = 453.592 G" in lines
    assert "1 LB = 16 OZ" in lines
    assert lines[0] == "         Convert Weight"
    assert "13. exit" in lines
    assert len(clears) == 1


def test_menu_rejects_non_positive_value():
    lines = []
    weight_menu(scripted("1", "-3"), lines.append)
    assert lines[-1] == "ERROR: Invalid value\n\n"


def test_menu_reports_unknown_option():
    lines = []
    weight_menu(scripted("14", "2", "13"), lines.append)
    assert "Invalid option!" in lines