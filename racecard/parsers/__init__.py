"""Race card text parsers."""

from racecard.parsers.form_figures import parse_form_figures, parse_form_token
from racecard.parsers.race_card import RaceCardParser, parse_race_card

__all__ = [
    "RaceCardParser",
    "parse_form_figures",
    "parse_form_token",
    "parse_race_card",
]
