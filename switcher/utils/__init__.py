"""Console and logging utilities."""
