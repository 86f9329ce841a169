"""Test keyboard input handling."""

import pytest
from unittest.mock import Mock
from typetest.keyboard import KeyboardHandler, KeyEvent, KeyType, TypingAction, TypingKey, classify_key


class MockTerminal:
    """Mock terminal interface for testing."""
    
    def __init__(self):
        self._key_queue = []
        
    def get_key(self):
        """Mock get_key that returns from queue."""
        if self._key_queue:
            return self._key_queue.pop(0)
        return None
    
    def add_key(self, key_str):
        """Add a key to the queue."""
        self._key_queue.append(key_str)


def parse(key_str):
    return KeyboardHandler(MockTerminal()).parse_key(key_str)


def test_ctrl_tokens():
    """Test curtsies Ctrl tokens."""
    event = parse('<Ctrl-w>')
    assert event.key_type == KeyType.CTRL
    assert event.value == 'w'
    assert event.is_ctrl == True


def test_raw_ctrl_keys():
    """Test single-byte control characters."""
    event = parse('\x03')
    assert event.key_type == KeyType.CTRL
    assert event.value == 'c'

    event = parse('\x12')
    assert event.key_type == KeyType.CTRL
    assert event.value == 'r'


def test_backspace_variants():
    for raw in ('<BACKSPACE>', '\x7f', '\x08', '<Ctrl-h>'):
        event = parse(raw)
        assert event.key_type == KeyType.SPECIAL, raw
        assert event.value == 'backspace', raw


def test_alt_backspace():
    """Test Alt+Backspace sequences."""
    for raw in ('<Esc+BACKSPACE>', '\x1b\x7f', '\x1b\x08'):
        event = parse(raw)
        assert event.key_type == KeyType.ALT, raw
        assert event.value == 'backspace', raw
        assert event.is_alt == True


def test_space_token():
    event = parse('<SPACE>')
    assert event.key_type == KeyType.REGULAR
    assert event.value == ' '


def test_enter_variants():
    for raw in ('<Ctrl-j>', '\r', '\n'):
        event = parse(raw)
        assert event.key_type == KeyType.SPECIAL
        assert event.value == 'enter'


def test_esc_alone():
    """Test ESC key by itself."""
    event = parse('\x1b')
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'escape'
    assert event.is_alt == False
    assert parse('<ESC>').value == 'escape'


def test_regular_characters():
    for raw in ('a', 'Z', '<', '>', '.'):
        event = parse(raw)
        assert event.key_type == KeyType.REGULAR
        assert event.value == raw


def test_arrow_keys_are_special():
    event = parse('<UP>')
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'up'


@pytest.mark.parametrize("raw,expected", [
    ('<Ctrl-c>', TypingKey(TypingAction.QUIT)),
    ('\x03', TypingKey(TypingAction.QUIT)),
    ('<Ctrl-r>', TypingKey(TypingAction.RESTART)),
    ('<Ctrl-w>', TypingKey(TypingAction.DELETE_WORD)),
    ('<Esc+BACKSPACE>', TypingKey(TypingAction.DELETE_WORD)),
    ('<BACKSPACE>', TypingKey(TypingAction.BACKSPACE)),
    ('a', TypingKey(TypingAction.CHARACTER, 'a')),
    ('<SPACE>', TypingKey(TypingAction.CHARACTER, ' ')),
    ('<UP>', TypingKey(TypingAction.OTHER)),
    ('<Ctrl-a>', TypingKey(TypingAction.OTHER)),
    ('\t', TypingKey(TypingAction.OTHER)),
    ('<Esc+f>', TypingKey(TypingAction.OTHER)),
    ('\x1b', TypingKey(TypingAction.OTHER)),
])
def test_classify(raw, expected):
    assert classify_key(parse(raw)) == expected


def test_classify_non_printable_regular():
    event = KeyEvent(key_type=KeyType.REGULAR, value='\x00', raw='\x00')
    assert classify_key(event).action == TypingAction.OTHER


def test_get_typing_key_reads_from_terminal():
    terminal = MockTerminal()
    handler = KeyboardHandler(terminal)
    terminal.add_key('x')
    terminal.add_key('<Ctrl-r>')

    assert handler.get_typing_key() == TypingKey(TypingAction.CHARACTER, 'x')
    assert handler.get_typing_key().action == TypingAction.RESTART
    assert handler.get_typing_key() is None


def test_get_typing_key_blocks_on_terminal():
    """Keys are read with a plain blocking call."""
    terminal = Mock()
    terminal.get_key.return_value = '<Ctrl-w>'
    handler = KeyboardHandler(terminal)

    assert handler.get_typing_key() == TypingKey(TypingAction.DELETE_WORD)
    terminal.get_key.assert_called_once_with()
    assert not hasattr(handler.parse_key('<UP>'), 'is_sequence')
