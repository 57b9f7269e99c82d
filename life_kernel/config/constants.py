"""Centralized constants for the Life kernel and its simulation driver.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 250
"""Default grid width in cells."""

GRID_HEIGHT = 250
"""Default grid height in cells."""

SEED_PROBABILITY = 0.5
"""Default per-cell alive probability for randomly seeded boards."""

NUM_STEPS = 200
"""Default number of generations per run."""

HALT_WINDOW = 10
"""Default halt-detector window (consecutive unchanged generations)."""

MAX_NEIGHBOURS = 8
"""Largest legal cached neighbour count (Moore neighbourhood)."""

FLUSH_THRESHOLD = 8_192
"""Flush generation-metric rows to Parquet once this in-memory row count is reached."""

MAX_WORK_UNITS = 100_000_000
"""Safety cap on total cell-generations (runs * steps * width * height) per batch."""

MAX_GENERATIONS_PER_SECOND = 60
"""Default pacing for the background simulation thread."""
