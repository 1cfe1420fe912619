"""Command-line interface for munir-release."""
