"""Single source of truth for the console-tools version string."""

__version__: str = "1.0.0"
