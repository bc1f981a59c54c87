"""Domain layer: directive model, calendar kinds and error types."""
