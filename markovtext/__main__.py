"""Allow running as ``python -m markovtext``."""

import sys

from markovtext.cli import main

sys.exit(main())
