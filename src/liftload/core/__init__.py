"""Pure training load and recovery calculators."""
