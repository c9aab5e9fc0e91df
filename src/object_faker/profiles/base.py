"""Fake profiles - reusable generation settings.

A profile declares how fakes should be generated (seed, locale, null
behaviour) without containing any generation logic.
"""

from typing import Any

from pydantic import BaseModel, Field

DEFAULT_NULL_PROBABILITY = 0.1


class FakeProfile(BaseModel):
    """Settings shared by ``Fake`` builders and the CLI."""

    name: str = Field(default="default", description="Profile name")
    description: str = Field(default="", description="Profile description")
    seed: int | None = Field(default=None, description="Random seed for reproducibility")
    locale: str | None = Field(default=None, description="Faker locale, e.g. 'en_US'")
    nullable: bool = Field(
        default=False,
        description="Whether Optional fields may be generated as None",
    )
    null_probability: float = Field(
        default=DEFAULT_NULL_PROBABILITY,
        ge=0.0,
        le=1.0,
        description="Chance that a nullable field is None (only when nullable)",
    )
    metadata: dict[str, Any] = Field(default_factory=dict, description="Additional metadata")

    @property
    def effective_null_probability(self) -> float:
        """The null probability actually applied."""
        return self.null_probability if self.nullable else 0.0
