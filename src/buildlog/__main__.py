"""Allow ``python -m buildlog``."""

import sys

from buildlog.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
