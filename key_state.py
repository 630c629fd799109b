from collections import namedtuple

from config import *

ActiveKeyPress = namedtuple("ActiveKeyPress", ["key", "pressed_at"])

# What the renderer gets each frame
KeyboardSnapshot = namedtuple("KeyboardSnapshot", ["last_played", "is_active"])


class KeyStateTracker:
    """Keys that should still be drawn as pressed.

    Every press appends a new entry; entries older than EXPIRY_MS are dropped
    on the next press only. Queries never prune, so with no further input a
    stale key can stay lit past the window.
    """

    def __init__(self, expiry_ms=EXPIRY_MS):
        self.expiry = expiry_ms / 1000.0
        self.pressed = []       # ActiveKeyPress, oldest first
        self._last = None       # (key, freq)

    def press(self, key, frequency, now):
        self._last = (key, frequency)
        self.pressed.append(ActiveKeyPress(key, now))
        self.pressed = [p for p in self.pressed if now - p.pressed_at < self.expiry]

    def is_active(self, key):
        return any(p.key == key for p in self.pressed)

    def last_played(self):
        return self._last

    def active_keys(self):
        seen = []
        for p in self.pressed:
            if p.key not in seen:
                seen.append(p.key)
        return seen

    def snapshot(self):
        return KeyboardSnapshot(self._last, self.is_active)
