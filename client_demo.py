#!/usr/bin/env python3
#
# PROJECT: wireframe-spinner
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys

from wireframe_spinner.cli import main


if __name__ == "__main__":
    sys.exit(main())
