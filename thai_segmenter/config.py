"""Configuration for the segmenter."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator


class SegmenterConfig(BaseModel):
    """Cost model and output policy of the segmenter.

    Costs are integers so that equal-cost paths compare exactly.
    """

    word_cost: int = Field(default=1000, gt=0, description="Cost of one dictionary token")
    length_bonus: int = Field(
        default=1, ge=0, description="Discount per codepoint of a dictionary token"
    )
    unknown_cost: int = Field(
        default=10000, gt=0, description="Cost of a fallback single-cluster token"
    )
    keep_whitespace: bool = True
    merge_unknown: bool = Field(
        default=False, description="Join consecutive out-of-dictionary clusters into one token"
    )
    dictionary_path: Optional[Path] = None

    @field_validator("dictionary_path", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @model_validator(mode="after")
    def check_unknown_cost(self) -> "SegmenterConfig":
        """A fallback token must cost more than any dictionary token."""
        if self.unknown_cost <= self.word_cost:
            raise ValueError(
                f"unknown_cost ({self.unknown_cost}) must be greater than word_cost ({self.word_cost})"
            )
        return self

    @classmethod
    def from_yaml(cls, path: str | Path) -> "SegmenterConfig":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
