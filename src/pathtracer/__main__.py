"""Allow running the renderer with ``python -m pathtracer``."""

import sys

from pathtracer.cli import main

sys.exit(main())
