"""Configuration for date expression resolution."""

from pydantic import BaseModel, Field, validator


class ResolverConfig(BaseModel):
    """Tunable constants used while resolving expressions.

    The defaults reproduce the documented behaviour: months and years in
    relative offsets are 30 and 365 days, and ordinal days are searched up
    to two years ahead.
    """

    # Relative offset approximations
    month_length_days: int = Field(default=30, ge=1, description="Days counted per month in offsets like 3m")
    year_length_days: int = Field(default=365, ge=1, description="Days counted per year in offsets like 2y")

    # Ordinal search
    ordinal_search_years: int = Field(default=2, ge=1, le=10, description="Years to search ahead for an ordinal day")

    @validator('year_length_days')
    def validate_year_length(cls, v, values):
        """A year cannot be shorter than a month."""
        month = values.get('month_length_days')
        if month is not None and v < month:
            raise ValueError('Year length cannot be shorter than month length')
        return v

    class Config:
        """Pydantic configuration."""
        validate_assignment = True
