"""Allow running as ``python -m cmdref``."""

from .cli import main

if __name__ == "__main__":
    main()
