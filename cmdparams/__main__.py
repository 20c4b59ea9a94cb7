"""
Main Entry Point for cmdparams
==============================

Runs the sample tool when cmdparams is called as a module:
    python -m cmdparams [args...]
"""

import sys

from cmdparams.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
