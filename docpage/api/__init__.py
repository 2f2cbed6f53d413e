"""docpage API layer."""
