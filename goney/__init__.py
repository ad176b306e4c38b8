"""goney -- NestJS-style project scaffolding for Go."""

__version__ = "1.0.1"
