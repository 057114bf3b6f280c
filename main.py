#!/usr/bin/env python3
"""
msglogger - sample program

Thin wrapper around the package's sample so it can be run from a checkout
without installing:

    python main.py --log-file logger-test.log

The logger itself lives in src/msglogger:
- core: colors, palette, log file sink and the thread-safe engine
- system: settings file / environment configuration
- ui: rich palette preview
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from msglogger.cli import run

if __name__ == "__main__":
    sys.exit(run())
