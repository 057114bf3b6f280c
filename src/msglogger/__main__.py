import sys

from msglogger.cli import run

sys.exit(run())
