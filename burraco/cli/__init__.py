"""Command-line tools for inspecting Burraco deals and melds."""
