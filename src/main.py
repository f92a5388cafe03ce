"""Entry point for the memory game."""
import sys

from memorygame.app import main

if __name__ == "__main__":
    sys.exit(main())
