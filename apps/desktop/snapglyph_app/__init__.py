"""Command-line host for snippet and icon exports."""
