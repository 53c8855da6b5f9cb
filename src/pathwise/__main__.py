"""Allow ``python -m pathwise``."""

import sys

from pathwise.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
