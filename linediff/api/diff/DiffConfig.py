"""Diff configuration root model (UNO: single model)."""

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from .DiffConfigError import DiffConfigError


class DiffConfig(BaseModel):
    """Diff configuration: engine choice, context width and line normalization."""

    model_config = ConfigDict(extra="forbid")

    engine: Literal["auto", "lcs", "hirschberg", "myers"] = Field("auto", description="Diff engine name")
    context_lines: int = Field(3, ge=0, description="Unchanged lines shown around each change")
    ignore_case: bool = Field(False, description="Compare lines case-insensitively")
    ignore_trailing_whitespace: bool = Field(False, description="Ignore whitespace at line ends")
    ignore_eol: bool = Field(False, description="Ignore line terminator differences")
    max_lines: int = Field(50_000, gt=0, description="Largest input, in lines, accepted per side")
    max_table_cells: int = Field(4_000_000, gt=0, description="Largest LCS table for the auto engine")

    @classmethod
    def from_config_dict(cls, config: dict[str, Any]) -> "DiffConfig":
        """Load diff config from config dict.

        Args:
            config: Full linediff configuration dictionary

        Returns:
            DiffConfig instance (defaults when the diff section is absent)

        Raises:
            DiffConfigError: If the diff section or its field values are invalid
        """
        diff_config = config.get("diff", {})
        if not isinstance(diff_config, dict):
            raise DiffConfigError(
                [f"diff section must be a dict (found: {type(diff_config).__name__}, expected: dict of diff options)"]
            )

        try:
            return cls(**diff_config)
        except ValidationError as e:
            errors = []
            for error in e.errors():
                loc = ".".join(str(x) for x in error.get("loc", ()))
                errors.append(f"diff.{loc}: {error.get('msg', 'invalid value')}" if loc else error.get("msg", str(e)))
            raise DiffConfigError(errors) from e

    @classmethod
    def load(cls) -> "DiffConfig":
        """Load config from ``<LINEDIFF_HOME>/config.json``, or defaults if it does not exist.

        Raises:
            DiffConfigError: If the file is not valid JSON or fails validation
        """
        path = get_home_dir() / "config.json"
        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise DiffConfigError([f"Invalid JSON in config file {path}: {e}"], source=path) from e

        if not isinstance(raw, dict):
            raise DiffConfigError(
                [f"config file {path} must contain a JSON object (found: {type(raw).__name__})"], source=path
            )
        try:
            return cls.from_config_dict(raw)
        except DiffConfigError as e:
            raise DiffConfigError(e.errors, source=path) from e
