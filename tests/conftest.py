"""Pytest configuration for vague date tests."""

import pytest

from vague_dates.vocabulary import VocabularyTable


@pytest.fixture(autouse=True)
def clean_vocabulary_env(monkeypatch):
    """Keep the developer's environment out of vocabulary loading."""
    for name in (
        "VAGUE_DATES_VOCABULARY",
        "VAGUE_DATES_DELIMITER",
        "VAGUE_DATES_UNKNOWN_LITERAL",
        "VAGUE_DATES_DAY_FIRST",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def french_vocabulary():
    return VocabularyTable(
        month_names=(
            "Janvier", "Février", "Mars", "Avril", "Mai", "Juin",
            "Juillet", "Août", "Septembre", "Octobre", "Novembre", "Décembre",
        ),
        abbreviated_month_names=(
            "Janv", "Févr", "Mars", "Avr", "Mai", "Juin",
            "Juil", "Août", "Sept", "Oct", "Nov", "Déc",
        ),
        season_names=("Printemps", "Été", "Automne", "Hiver"),
        delimiter="~",
        unknown_literal="Inconnu",
    )
