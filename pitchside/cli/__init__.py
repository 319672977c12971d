"""Command-line entrypoints for Pitchside."""

def main() -> int:
    """Lazy CLI dispatcher to avoid import side effects."""
    from .entrypoints import main as _main

    return _main()

__all__ = ["main"]
