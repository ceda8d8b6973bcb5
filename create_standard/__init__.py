"""create-standard - scaffold a frontend project with shared lint and commit tooling."""

__version__ = "0.1.0"
