"""
Caster configuration for Sacred Geometry checks.

Holds the character values the spell rules depend on. The search engine
never reads it: it is passed explicitly to the preparation layer.
"""

from pydantic import BaseModel, Field

from sacred_geometry.search.models import SearchBudget


class CasterConfig(BaseModel):
    """Character values used when preparing spells."""

    caster_level: int = Field(
        default=6,
        description="The caster level of the character.",
        ge=1,
    )
    engineering: int = Field(
        default=6,
        description="Ranks in Knowledge (engineering), one d6 rolled per rank.",
        ge=0,
    )
    transmuter_of_korada: bool = Field(
        default=True,
        description="When true, Transmutation spells get +1 caster level.",
    )
    verbose: bool = Field(
        default=False,
        description="Show the dice and expressions of every check.",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug logging.",
    )
    budget: SearchBudget | None = Field(
        default=None,
        description="Optional limits applied to each prime search.",
    )
