import sys

from stylekit.cli import main

if __name__ == "__main__":
    sys.exit(main())
