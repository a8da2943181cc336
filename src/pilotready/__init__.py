"""PilotReady: personal-minimums go/no-go advisor."""

__version__ = "0.1.0"
