#!/usr/bin/env python3
"""
veuvelog - command line entry point.

Thin wrapper around veuvelog.cli so the tool runs from a checkout:

    python main.py --level warning --name deploy "disk almost full"
"""
import sys

from veuvelog.cli import main

if __name__ == "__main__":
    sys.exit(main())
