#!/usr/bin/env python3
"""
Main entry point for running the UDP password generator as a module.
"""

import sys
from udp_passgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
