"""Domain layer: catalog, models and calculators."""
