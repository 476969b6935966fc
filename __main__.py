"""
Main entry point for running as a package.

This allows running the engine directly from the project directory:
    python . quote -p pizza-margherita -s size:m
"""

import sys
from cli import main

if __name__ == "__main__":
    sys.exit(main())
