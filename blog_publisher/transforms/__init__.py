"""Content transforms for Blog Publisher."""
