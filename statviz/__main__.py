"""Allow ``python -m statviz``."""

import sys

from statviz.cli import main

sys.exit(main())
