from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import pandas as pd


@dataclass(frozen=True)
class Amendment:
    """A legislative amendment to the Endangered Species Act."""
    year: int
    title: str
    bullets: Tuple[str, ...]

    @property
    def date(self) -> pd.Timestamp:
        return pd.Timestamp(year=self.year, month=1, day=1)


ESA_AMENDMENTS: Tuple[Amendment, ...] = (
    Amendment(
        year=1978,
        title="1978 Amendments",
        bullets=(
            "Created a federal committee that can approve actions harming a species.",
            "Allowed economic factors in habitat decisions.",
            "Added Agriculture to federal conservation planning.",
            "Limited protected populations to vertebrates.",
        ),
    ),
    Amendment(
        year=1982,
        title="1982 Amendments",
        bullets=(
            "Listing decisions must be based only on science, not economics.",
            "Final listing decisions required in 1 year.",
            "Allowed experimental populations and Habitat Conservation Plans.",
            "Added endangered plant protections.",
        ),
    ),
    Amendment(
        year=1988,
        title="1988 Amendments",
        bullets=(
            "Required monitoring of candidate and recovered species.",
            "Strengthened recovery plans and 5-year monitoring after delisting.",
            "Required reports on recovery progress and spending.",
            "Expanded plant protections.",
        ),
    ),
    Amendment(
        year=2004,
        title="2004 Amendments",
        bullets=(
            "Department of Defense is exempt from some critical habitat restrictions "
            "if it has an approved natural resources management plan.",
        ),
    ),
)


def find_amendment(amendments: Sequence[Amendment], year: int) -> Optional[Amendment]:
    return next((a for a in amendments if a.year == year), None)
