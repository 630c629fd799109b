# ---------------------- Config ----------------------
SAMPLE_RATE = 48000
BITSIZE = -16          # 16-bit signed
CHANNELS = 1           # tones are mono
AUDIO_BUFFER = 512     # smaller = lower latency, but risk crackles
MIXER_VOICES = 32      # max tones sounding at once

# Tone shape
ATTACK_MS = 100
RELEASE_MS = 50
GAIN = 0.3             # headroom so overlapping tones don't clip
TONE_DURATION_MS = 500

# A key stays highlighted this long after being pressed
EXPIRY_MS = 500

# Input poll timeout, keeps redraw at >= 20 fps
POLL_TIMEOUT_MS = 50

# Window
WINDOW_SIZE = (860, 420)
WINDOW_CAPTION = "Virtual Piano  [Esc / Ctrl+C: quit]"

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
