#!/usr/bin/env python3
"""typetest - A terminal typing-speed test.

Usage:
    python main.py [-n WORDS] [-f WORDFILE | -m CORPUSFILE]
    
Controls:
    Type the dim text; mistakes are shown underlined in red
    Backspace: Delete character
    Ctrl-W: Delete word
    Ctrl-R: Restart with new words
    Ctrl-C: Quit
"""

import sys
from typetest.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
