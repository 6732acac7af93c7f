# python/wirecube/__main__.py
# Allows `python -m wirecube`
# RELEVANT FILES: python/wirecube/cli.py

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
