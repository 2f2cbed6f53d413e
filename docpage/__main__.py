"""Allow ``python -m docpage``."""

import sys

from docpage.cli import main

sys.exit(main())
