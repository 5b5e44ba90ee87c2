import os
from pathlib import Path

# World definition
ROOMS_DIR = Path(os.getenv("SHRUNK_ROOMS_DIR", Path(__file__).parent / "rooms"))
MIN_ROOMS = 15
MIN_ITEMS = 8

STARTING_ROOM = "Attic"
TERMINAL_ROOM = "Workshop"

# Everything needed to rebuild the shrink ray in reverse
REQUIRED_ITEMS = frozenset({"shrink ray", "battery", "copper wire", "software"})

# Snapshots
SAVE_DIR = Path(os.getenv("SHRUNK_SAVE_DIR", "."))
SAVE_PREFIX = "adventure-"
SNAPSHOT_VERSION = 1

# Dump loaded worlds and snapshots with devtools
DEBUG = os.getenv("SHRUNK_DEBUG", "") not in ("", "0", "false")
