# Slashargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Allow `python -m slashargs`."""
import sys

from slashargs.main.main import main

if __name__ == "__main__":
    sys.exit(main())
