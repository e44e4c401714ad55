"""Static dependency analysis for React/Next.js component graphs."""

__version__ = "0.1.0"
