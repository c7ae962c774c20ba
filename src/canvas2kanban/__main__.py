"""Module entry point for running with python -m canvas2kanban."""

import sys

from canvas2kanban.cli import main

if __name__ == "__main__":
    sys.exit(main())
