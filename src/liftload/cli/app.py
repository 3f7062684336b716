"""Shared Typer app object, shared option types, and config utility."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from ..core.engine.config_loader import load_periodization_config
from ..core.models import PeriodizationConfig

# Shared --json option type used across all commands
JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

# Shared --config option type for the suggestion commands
ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        "-c",
        help="Periodization YAML overriding the defaults (default: ~/.liftload/periodization.yaml)",
    ),
]

app = typer.Typer(
    name="liftload",
    help="Muscle recovery and next-session weight suggestions from your training log.",
    no_args_is_help=True,
)


def get_config(
    config_path: Path | None,
    upper_increment: float | None = None,
    lower_increment: float | None = None,
    max_rpe: float | None = None,
    deload: float | None = None,
) -> PeriodizationConfig:
    """Load the periodization policy and apply command-line overrides."""
    cfg = load_periodization_config(config_path)
    return cfg.merged(
        {
            "upper_body_increment": upper_increment,
            "lower_body_increment": lower_increment,
            "max_rpe": max_rpe,
            "deload_percentage": deload,
        }
    )
