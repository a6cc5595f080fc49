"""Shared constants for guestwatch state and watch filtering."""

GUESTWATCH_HOME_EXT = ".guestwatch"  # user-level state/config directory suffix

# Directories whose name starts with this marker are never watched
HIDDEN_PREFIX = "."

# Lima keeps one directory per instance under LIMA_HOME
LIMA_HOME_DEFAULT = "~/.lima"
LIMA_CONFIG_FILENAME = "lima.yaml"

# Hard ceiling on touches dispatched per batch window
MAX_BATCH_EVENTS = 10
