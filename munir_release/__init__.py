"""munir-release: manage a semantic-release configuration and run releases."""

__version__ = "0.0.7"
