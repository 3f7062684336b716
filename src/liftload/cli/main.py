"""
CLI entry point using Typer.

Provides commands for recovery and load planning:
- recovery: Per-muscle recovery, readiness score and recommendation
- suggest: Next working weight from the last set
- suggest-history: Next working weight from a logged session file
- 1rm: One-rep max estimates
- rpe-weight: Weight for a target RPE and rep count
"""

from .app import app
from .commands import load, recovery  # noqa: F401  (register commands)

if __name__ == "__main__":
    app()
