"""Entry point for ``python -m tintcat``."""

import sys

from tintcat.cli import main

sys.exit(main())
