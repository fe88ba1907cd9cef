"""Entry point for running hourglass as a module: python -m hourglass"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
