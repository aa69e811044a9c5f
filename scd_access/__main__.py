"""Allow running the client as a module: python -m scd_access"""

from .cli import main

if __name__ == "__main__":
    import sys
    sys.exit(main())
