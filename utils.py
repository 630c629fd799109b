import math

import numpy as np
from config import *

# ---------------------- Utility ----------------------
def apply_envelope(wave, sample_rate, attack_ms=ATTACK_MS, release_ms=RELEASE_MS):
    """Linear attack/release envelope.

    Attack ramps 0 -> 1 over the first attack_ms, release ramps 1 -> 0 over
    the last release_ms. On notes shorter than both windows the ramps overlap;
    the attack ramp is used wherever both apply.
    """
    n = len(wave)
    a_samps = sample_rate * attack_ms / 1000.0
    r_samps = sample_rate * release_ms / 1000.0
    i = np.arange(n, dtype=np.float64)
    env = np.ones(n, dtype=np.float64)
    release = i > n - r_samps
    env[release] = (n - i[release]) / r_samps
    attack = i < a_samps
    env[attack] = i[attack] / a_samps
    return wave * env

def generate_tone(frequency, duration_ms, sample_rate=SAMPLE_RATE):
    """Render one enveloped sine note as a mono float32 buffer in [-GAIN, GAIN].

    The buffer holds round(sample_rate * duration_ms / 1000) samples. Python's
    round() is half-to-even, so a duration landing exactly on half a sample
    goes to the even count; integer millisecond durations at 48 kHz are exact.
    """
    if not (math.isfinite(frequency) and frequency > 0):
        raise ValueError(f"frequency must be positive, got {frequency!r}")
    if not (math.isfinite(duration_ms) and duration_ms > 0):
        raise ValueError(f"duration must be positive, got {duration_ms!r}")
    n_samps = int(round(sample_rate * duration_ms / 1000.0))
    i = np.arange(n_samps, dtype=np.float64)
    wave = np.sin(2*np.pi*frequency*i/sample_rate)
    wave = apply_envelope(wave, sample_rate, ATTACK_MS, RELEASE_MS)
    return (wave * GAIN).astype(np.float32)

def to_pcm16(buffer, channels=CHANNELS):
    """float [-1, 1] -> int16, mono copied into every output channel."""
    pcm = (np.clip(buffer, -1.0, 1.0) * 32767).astype(np.int16)
    if channels == 1:
        return pcm
    return np.ascontiguousarray(np.column_stack([pcm] * channels))
