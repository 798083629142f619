"""Constants and configuration defaults for hackertype."""

class DisplayConstants:
    """Central configuration constants for the typing display."""

    # Source text
    DEFAULT_SOURCE = "kernel.txt"  # Looked up relative to the working directory
    DEFAULT_TAB_SIZE = 4  # Tabs in the source are expanded to this many spaces
    MAX_TAB_SIZE = 16

    # Typing
    DEFAULT_SPEED = 3  # Characters revealed per key press
    MAX_SPEED = 1000

    # Colors (blessed color names)
    DEFAULT_FOREGROUND = "green"
    DEFAULT_BACKGROUND = "black"

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Config storage
    APP_NAME = "hackertype"
    SETTINGS_FILENAME = "settings.json"

    # Messages
    SOURCE_LOAD_ERROR_MESSAGE = "Cannot read {}: {}"
