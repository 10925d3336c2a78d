"""Command-line surface for the guild calendar client."""
