"""
Base Pydantic models for hashbench.

Provides common configuration and base classes for all hashbench models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BenchBaseModel(BaseModel):
    """Base model for all hashbench Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - use_enum_values: Serialize enums as values
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class ImmutableModel(BenchBaseModel):
    """Immutable base model for values that should not change after creation.

    Enum fields keep their enum members so callers can use their behavior.
    """

    model_config = ConfigDict(
        frozen=True,
        use_enum_values=False,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )
