"""Keyboard input handling using curtsies-style tokens."""

from typing import NamedTuple, Optional
from dataclasses import dataclass
from enum import Enum

from .constants import GameConstants


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw key string from curtsies
    is_alt: bool = False
    is_ctrl: bool = False


class TypingAction(Enum):
    """What a keystroke means to a running test."""
    QUIT = "quit"
    RESTART = "restart"
    DELETE_WORD = "delete_word"
    CHARACTER = "character"
    BACKSPACE = "backspace"
    OTHER = "other"


class TypingKey(NamedTuple):
    """A classified keystroke; ``char`` is only set for CHARACTER."""
    action: TypingAction
    char: str = ""


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace', 'delete',
    'page_up', 'page_down', 'insert', 'tab',
}


class KeyboardHandler:
    """Handles keyboard input using curtsies-style key names."""
    
    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface
        
    def get_key_event(self) -> Optional[KeyEvent]:
        """Get next key event and map curtsies-style names to KeyEvent."""
        key = self.terminal.get_key()
        if not key:
            return None
        return self.parse_key(key)

    def get_typing_key(self) -> Optional[TypingKey]:
        """Get the next key event already classified for the typing test."""
        event = self.get_key_event()
        if event is None:
            return None
        return classify_key(event)
    
    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.
        
        Args:
            key: curtsies key name such as 'a', '<SPACE>' or '<Ctrl-w>'
            
        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # Curtsies-style key names like '<BACKSPACE>', '<Ctrl-w>', '<Esc+BACKSPACE>'
        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            lower = key_str[1:-1].lower().replace('+', '-')
            parts = lower.split('-')
            base = parts[-1]
            mods = set(parts[:-1])
            if 'meta' in mods or 'esc' in mods:
                mods.add('alt')
            if base in ('pageup', 'page_up'):
                base = 'page_up'
            elif base in ('pagedown', 'page_down'):
                base = 'page_down'

            if base in ('space', 'spacebar', 'spc') and not mods:
                return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
            if 'ctrl' in mods and len(base) == 1:
                # Ctrl-H is backspace on most terminals
                if base == 'h':
                    return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
                if base in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
            if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
                return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True)
            if base in ('esc', 'escape'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')
            # Unknown tokens are treated as special keys
            return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if o in (8, 127):
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
                ch = chr(ord('a') + o - 1)
                if ch in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                if ch == 'i':
                    return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)
            if key_str == '\x1b':
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')

        # Two-byte ESC prefix from terminals that report Alt that way
        if len(key_str) == 2 and key_str[0] == '\x1b':
            second = key_str[1]
            if second in ('\x7f', '\x08'):
                return KeyEvent(key_type=KeyType.ALT, value='backspace', raw=key_str, is_alt=True)
            return KeyEvent(key_type=KeyType.ALT, value=second, raw=key_str, is_alt=True)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)


def classify_key(event: KeyEvent) -> TypingKey:
    """Map a parsed key event onto the actions a typing run understands."""
    if event.key_type == KeyType.CTRL:
        if event.value == GameConstants.QUIT_KEY:
            return TypingKey(TypingAction.QUIT)
        if event.value == GameConstants.RESTART_KEY:
            return TypingKey(TypingAction.RESTART)
        if event.value == GameConstants.DELETE_WORD_KEY:
            return TypingKey(TypingAction.DELETE_WORD)
        return TypingKey(TypingAction.OTHER)
    if event.key_type == KeyType.ALT:
        if event.value == 'backspace':
            return TypingKey(TypingAction.DELETE_WORD)
        return TypingKey(TypingAction.OTHER)
    if event.key_type == KeyType.SPECIAL:
        if event.value == 'backspace':
            return TypingKey(TypingAction.BACKSPACE)
        return TypingKey(TypingAction.OTHER)
    if len(event.value) == 1 and event.value.isprintable():
        return TypingKey(TypingAction.CHARACTER, event.value)
    return TypingKey(TypingAction.OTHER)
