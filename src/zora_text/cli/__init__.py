"""Command-line tools for inspecting encoded name fields."""
