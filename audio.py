import logging

import pygame
from config import *
from utils import to_pcm16

logger = logging.getLogger("piano.audio")


class AudioDeviceError(RuntimeError):
    """The output device could not be opened."""


class AudioSink:
    """Fire-and-forget tone playback on the pygame mixer.

    The mixer owns its own playback thread; a played Sound is never touched
    again from here. Concurrency is capped by the fixed pool of mixer voices.
    """

    def __init__(self, sample_rate=SAMPLE_RATE, channels=CHANNELS, voices=MIXER_VOICES):
        self.sample_rate = sample_rate
        self.channels = channels
        self.voices = voices
        self.is_open = False

    def open(self):
        try:
            pygame.mixer.pre_init(self.sample_rate, BITSIZE, self.channels, AUDIO_BUFFER)
            # SDL resamples to the device; only the channel count may change
            pygame.mixer.init(allowedchanges=pygame.AUDIO_ALLOW_CHANNELS_CHANGE)
        except pygame.error as e:
            raise AudioDeviceError(f"cannot open audio output: {e}") from e
        init = pygame.mixer.get_init()
        if init is None:
            raise AudioDeviceError("cannot open audio output: mixer not initialised")
        freq, fmt, chans = init
        if freq != self.sample_rate:
            pygame.mixer.quit()
            raise AudioDeviceError(
                f"audio output opened at {freq} Hz, tones need {self.sample_rate} Hz")
        self.channels = chans
        pygame.mixer.set_num_channels(self.voices)
        self.is_open = True
        logger.info("audio open: %d Hz, format %d, %d channel(s), %d voices",
                    freq, fmt, chans, self.voices)
        return self

    def play(self, buffer):
        """Start playing buffer and return at once. False if it didn't start."""
        try:
            sound = pygame.sndarray.make_sound(to_pcm16(buffer, self.channels))
            channel = sound.play()
        except (pygame.error, ValueError):
            logger.exception("tone playback failed")
            return False
        if channel is None:
            logger.debug("all %d voices busy, tone dropped", self.voices)
            return False
        return True

    def close(self, drain_ms=TONE_DURATION_MS):
        # let sounding tones end instead of cutting them off with a click
        if not self.is_open:
            return
        waited = 0
        while pygame.mixer.get_busy() and waited < drain_ms:
            pygame.time.wait(10)
            waited += 10
        pygame.mixer.quit()
        self.is_open = False
        logger.info("audio closed")
