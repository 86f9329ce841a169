"""Constants and configuration for the typing test."""

class GameConstants:
    """Central configuration constants for the typing test."""
    
    # Word layout
    LINE_WIDTH_PERCENT = 40  # Lines use at most 40% of the terminal width
    MAX_WORDS_PER_LINE = 10
    MIN_LINE_WIDTH = 50  # Minimum terminal width required for display
    WORD_MARGIN = 2  # Columns added to the longest word for the width check
    FOOTER_LINES = 2  # Rows reserved below the text
    RESULTS_PAGE_LINES = 6  # Four result lines, a blank line and the key help
    
    # Word sources
    DEFAULT_WORD_COUNT = 30
    MIN_WORD_COUNT = 1
    MAX_WORD_COUNT = 500
    
    # Key bindings (curtsies-style control letters)
    QUIT_KEY = 'c'
    RESTART_KEY = 'r'
    DELETE_WORD_KEY = 'w'
    
    # Settings persistence
    APP_NAME = "typetest"
    SETTINGS_FILENAME = "settings.json"
    
    # Status messages
    HEIGHT_TOO_SHORT_MESSAGE = (
        "Terminal height is too short! typetest requires at least {} lines, got {} lines"
    )
    WIDTH_TOO_LOW_MESSAGE = (
        "Terminal width is too low! typetest requires at least {} columns, got {} columns"
    )
    RESULTS_HELP_MESSAGE = "ctrl-r to restart, ctrl-c to quit"
