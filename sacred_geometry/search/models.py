"""
Data models for the Sacred Geometry search.

Defines the search budget accepted by the driver and the dispatcher, and
the result records they produce.
"""

from typing import Any

from pydantic import BaseModel, Field


class SearchBudget(BaseModel):
    """Optional limits on how much work a single prime search may perform."""

    max_evaluations: int | None = Field(
        default=None,
        description="Maximum number of evaluator calls before giving up.",
        ge=1,
    )
    max_seconds: float | None = Field(
        default=None,
        description="Maximum wall-clock time in seconds before giving up.",
        gt=0,
    )

    @property
    def is_unbounded(self) -> bool:
        return self.max_evaluations is None and self.max_seconds is None


class PrimeResult(BaseModel):
    """Outcome of the search for one target prime."""

    prime: int = Field(description="The target prime.")
    expression: str = Field(
        default="",
        description="Rendered expression producing the prime, if found.",
    )
    found: bool = Field(
        default=False,
        description="Whether a combination producing the prime was found.",
    )
    evaluations: int = Field(
        default=0,
        description="Number of evaluator calls performed.",
        ge=0,
    )
    exhausted_budget: bool = Field(
        default=False,
        description="Whether the search stopped because its budget ran out.",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if self.found and not self.expression:
            raise ValueError("A found prime must carry its expression")


class BatchResult(BaseModel):
    """Outcome of searching every target prime against one dice multiset."""

    dice: list[int] = Field(
        default_factory=list,
        description="The dice multiset that was searched.",
    )
    results: list[PrimeResult] = Field(
        default_factory=list,
        description="One result per target prime, sorted by prime.",
    )

    @property
    def success(self) -> bool:
        """True when every target prime was found."""
        return all(result.found for result in self.results)

    @property
    def missing(self) -> list[int]:
        """The target primes that could not be produced."""
        return [result.prime for result in self.results if not result.found]
