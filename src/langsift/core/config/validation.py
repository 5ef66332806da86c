"""
Detection configuration and validation for langsift.

This module defines ``DetectionConfig``, the single immutable structure that
tunes the Monte-Carlo Naive-Bayes classifier and the result ranker, together
with helpers that load and validate it from dictionaries or JSON/YAML files.

The configuration is validated once, when it is created. Numeric ranges are
checked by Pydantic, unknown options are rejected, and any failure is
reported as a ``ConfigurationError`` carrying the Pydantic error list in its
details. The text filter pattern is compiled by the detection service at
construction time so that an invalid pattern surfaces as
``PatternCompileError`` before any text is processed.

Defaults:
    alpha=0.5, alpha_width=0.05, n_trials=7, iteration_limit=10000,
    prob_threshold=0.1, conv_threshold=0.99999, base_freq=10000,
    max_results=None (no truncation), text_filter=None, prior=None,
    seed=0, workers=1, binary=False

Example Usage:
    >>> config = load_detection_config({"n_trials": 3, "max_results": 1})
    >>> config.alpha
    0.5
    >>> config = DetectionConfigLoader.load_file("detection.yaml")
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from langsift.core.exceptions.custom_exceptions import ConfigurationError


class DetectionConfig(BaseModel):
    """
    Immutable detection configuration.

    Attributes:
        alpha: Base additive smoothing weight
        alpha_width: Standard deviation of the Gaussian jitter applied to
            alpha once per trial
        n_trials: Number of independent Monte-Carlo trials averaged together
        iteration_limit: Upper bound on sampling iterations per trial
        prob_threshold: Results must have a probability strictly above this
        conv_threshold: A trial stops once a single language holds more than
            this share of the probability mass
        base_freq: Smoothing denominator; each update adds alpha / base_freq
        max_results: Maximum number of results returned, None for all
        text_filter: Regex the whole input must match, otherwise detection
            is skipped and an empty result is returned
        prior: Initial probability vector, one entry per loaded language in
            load order. None means a uniform prior
        seed: Seed of the random source, re-applied on every detection call
        workers: Threads used to run trials. Results do not depend on it
        binary: Treat input as base64 encoded UTF-8 when it decodes cleanly
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    alpha: float = Field(default=0.5, ge=0.0)
    alpha_width: float = Field(default=0.05, ge=0.0)
    n_trials: int = Field(default=7, ge=1)
    iteration_limit: int = Field(default=10000, ge=0)
    prob_threshold: float = Field(default=0.1, ge=0.0, le=1.0)
    conv_threshold: float = Field(default=0.99999, gt=0.0, le=1.0)
    base_freq: int = Field(default=10000, gt=0)
    max_results: Optional[int] = Field(default=None, ge=0)
    text_filter: Optional[str] = None
    prior: Optional[Tuple[float, ...]] = None
    seed: int = Field(default=0, ge=0)
    workers: int = Field(default=1, ge=1)
    binary: bool = False

    @field_validator("prior")
    @classmethod
    def validate_prior(cls, v):
        if v is None:
            return v
        if not v:
            raise ValueError("prior cannot be empty")
        if any(p < 0.0 for p in v):
            raise ValueError("prior entries must be non-negative")
        if sum(v) <= 0.0:
            raise ValueError("prior entries must not all be zero")
        return v


def load_detection_config(
    options: Optional[Dict[str, Any]] = None, **overrides: Any
) -> DetectionConfig:
    """
    Build a validated DetectionConfig from a dictionary of options.

    Args:
        options: Option names and values, typically read from a file
        **overrides: Options taking precedence over ``options`` (None values
            are ignored so that unset CLI flags do not clobber file values)

    Returns:
        DetectionConfig: The validated, immutable configuration

    Raises:
        ConfigurationError: If an option is unknown or out of range
    """
    merged = dict(options or {})
    merged.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return DetectionConfig(**merged)
    except ValidationError as e:
        raise ConfigurationError(
            f"Detection configuration validation failed: {e}",
            error_code="CONFIG_VALIDATION_ERROR",
            details={"errors": e.errors(include_url=False)},
        ) from e


class DetectionConfigLoader:
    """Load detection configuration files"""

    @staticmethod
    def load_config(file_path: str) -> Dict[str, Any]:
        """Load raw configuration options from a JSON or YAML file"""
        path = Path(file_path)

        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {file_path}")

        if path.suffix.lower() not in [".yaml", ".yml", ".json"]:
            raise ConfigurationError(f"Unsupported file format: {path.suffix}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {file_path}"
            )
        return data

    @staticmethod
    def load_file(file_path: str, **overrides: Any) -> DetectionConfig:
        """Load and validate a detection configuration file"""
        options = DetectionConfigLoader.load_config(file_path)
        return load_detection_config(options, **overrides)
