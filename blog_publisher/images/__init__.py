"""Image normalization for Blog Publisher."""
