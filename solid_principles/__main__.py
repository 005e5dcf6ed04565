"""Allow ``python -m solid_principles``."""
import sys

from solid_principles.cli import main

if __name__ == "__main__":
    sys.exit(main())
