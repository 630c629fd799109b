import math

import numpy as np
import pytest
from utils import apply_envelope, generate_tone, to_pcm16


def test_sample_count():
    assert len(generate_tone(440.0, 500)) == 24000
    assert len(generate_tone(261.63, 250)) == 12000
    assert len(generate_tone(440.0, 1)) == 48
    assert len(generate_tone(440.0, 10.01)) == round(48000 * 10.01 / 1000)

def test_deterministic():
    a = generate_tone(329.63, 300)
    b = generate_tone(329.63, 300)
    assert a.tobytes() == b.tobytes()

def test_amplitude_bounded():
    for freq, dur in [(261.63, 500), (783.99, 120), (440.0, 20)]:
        tone = generate_tone(freq, dur)
        assert np.max(np.abs(tone)) <= 0.3 + 1e-6

def test_envelope_start_and_sustain():
    freq = 261.63
    tone = generate_tone(freq, 500)
    assert tone[0] == pytest.approx(0.0, abs=1e-9)
    mid = len(tone) // 2
    expected = abs(math.sin(2 * math.pi * freq * mid / 48000)) * 0.3
    assert abs(tone[mid]) == pytest.approx(expected, abs=1e-6)

def test_attack_ramp():
    tone = generate_tone(261.63, 500)
    i = 2400   # halfway through attack
    expected = math.sin(2 * math.pi * 261.63 * i / 48000) * (i / 4800) * 0.3
    assert tone[i] == pytest.approx(expected, abs=1e-6)

def test_release_ramp_to_zero():
    tone = generate_tone(261.63, 500)
    n = len(tone)
    i = n - 1
    expected = math.sin(2 * math.pi * 261.63 * i / 48000) * (1 / 2400) * 0.3
    assert tone[i] == pytest.approx(expected, abs=1e-6)
    # the final 2400 samples stay under a shrinking bound
    assert np.all(np.abs(tone[n - 1200:]) <= 0.15 + 1e-6)

def test_short_tone_attack_wins_in_overlap():
    wave = np.ones(4800)
    env = apply_envelope(wave, 48000, 100, 50)
    # index 3000 is in both windows; attack formula applies
    assert env[3000] == pytest.approx(3000 / 4800)
    assert env[0] == 0.0

@pytest.mark.parametrize("freq, dur", [(0, 500), (-440.0, 500), (440.0, 0), (440.0, -5),
                                       (float("nan"), 500), (440.0, float("inf"))])
def test_invalid_arguments(freq, dur):
    with pytest.raises(ValueError):
        generate_tone(freq, dur)

def test_half_sample_duration_rounds_to_even():
    # 48000 * 0.03125 / 1000 == 1.5 samples exactly
    assert len(generate_tone(440.0, 0.03125)) == 2
    # 2.5 samples at 1 kHz
    assert len(generate_tone(440.0, 2.5, sample_rate=1000)) == 2
    assert len(generate_tone(440.0, 3.5, sample_rate=1000)) == 4

def test_to_pcm16_mono_and_stereo():
    buf = np.array([0.0, 0.5, -1.0, 2.0], dtype=np.float32)
    mono = to_pcm16(buf, 1)
    assert mono.dtype == np.int16
    assert list(mono) == [0, 16383, -32767, 32767]
    stereo = to_pcm16(buf, 2)
    assert stereo.shape == (4, 2)
    assert list(stereo[:, 0]) == list(stereo[:, 1]) == list(mono)
