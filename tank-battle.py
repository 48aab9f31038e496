"""Launcher script: ``python tank-battle.py [OPTIONS]``."""

import sys

from main import main

if __name__ == "__main__":
    sys.exit(main())
