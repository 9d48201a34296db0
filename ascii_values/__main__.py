#
# PROJECT: ascii-values
# MODULE: ascii_values/__main__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys

from .demo import main

sys.exit(main())
