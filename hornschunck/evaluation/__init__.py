"""Flow evaluation metrics."""
