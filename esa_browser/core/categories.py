from __future__ import annotations

from enum import Enum
from typing import Iterable, List


class Category(Enum):
    """
    Taxonomic classes shown in the stacked area chart.

    Member order is the stacking order (first member sits at the bottom).
    Each value is (csv column, display name, colour).
    """

    MAMMALS = ("endangered_mammals", "Mammals", "#1f77b4")
    BIRDS = ("endangered_birds", "Birds", "#ff7f0e")
    REPTILES = ("endangered_reptiles", "Reptiles", "#2ca02c")
    AMPHIBIANS = ("endangered_amphibians", "Amphibians", "#d62728")
    FISH = ("endangered_fish", "Fish", "#9467bd")
    SNAILS = ("endangered_snails", "Snails", "#8c564b")
    CLAMS = ("endangered_clams", "Clams", "#e377c2")
    CRUSTACEANS = ("endangered_crustaceans", "Crustaceans", "#7f7f7f")
    INSECTS = ("endangered_insects", "Insects", "#bcbd22")
    ARACHNIDS = ("endangered_arachnids", "Arachnids", "#17becf")
    CORAL = ("endangered_coral", "Coral", "#a55194")

    def __init__(self, column: str, display_name: str, colour: str):
        self.column = column
        self.display_name = display_name
        self.colour = colour

    @classmethod
    def present_in(cls, columns: Iterable[str]) -> List["Category"]:
        """Categories whose column exists, in stacking order."""
        cols = set(columns)
        return [member for member in cls if member.column in cols]
