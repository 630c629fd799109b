from collections import namedtuple

# ---------------------- Key -> Note mapping ----------------------
# Two chromatic rows starting at C4, laid out on an AZERTY keyboard.
KEY_NOTES = [
    ('a', 'C4', 261.63), ('z', 'C#4', 277.18), ('e', 'D4', 293.66), ('r', 'D#4', 311.13),
    ('t', 'E4', 329.63), ('y', 'F4', 349.23), ('u', 'F#4', 369.99), ('i', 'G4', 392.00),
    ('o', 'G#4', 415.30), ('p', 'A4', 440.00), ('q', 'A#4', 466.16), ('s', 'B4', 493.88),
    ('d', 'C5', 523.25), ('f', 'C#5', 554.37), ('g', 'D5', 587.33), ('h', 'D#5', 622.25),
    ('j', 'E5', 659.25), ('k', 'F5', 698.46), ('l', 'F#5', 739.99), ('m', 'G5', 783.99),
]

OCTAVE_ROWS = [
    ("OCTAVE 1", [k for k, _, _ in KEY_NOTES[:12]]),
    ("OCTAVE 2", [k for k, _, _ in KEY_NOTES[12:]]),
]

PitchEvent = namedtuple("PitchEvent", ["key", "frequency"])

KEYMAP = {key: (name, freq) for key, name, freq in KEY_NOTES}


def get_frequency(key):
    entry = KEYMAP.get(key)
    return entry[1] if entry else None


def get_note_name(key):
    entry = KEYMAP.get(key)
    return entry[0] if entry else "?"


def is_black_key(key):
    return '#' in get_note_name(key)


def lookup(key):
    """Return the PitchEvent for a keystroke, or None if it isn't a note."""
    freq = get_frequency(key)
    if freq is None:
        return None
    return PitchEvent(key, freq)
