import logging
import sys
import time

import pygame
from audio import AudioDeviceError, AudioSink
from config import *
from key_state import KeyStateTracker
from piano_mapping import lookup
from utils import generate_tone
from visualizer import Visualizer

logger = logging.getLogger("piano")

QUIT = object()   # returned by poll_key when the user asks to leave


# ---------------------- Input ----------------------
def poll_key(timeout_ms=POLL_TIMEOUT_MS):
    """Wait up to timeout_ms for input. Returns a character, QUIT, or None."""
    event = pygame.event.wait(timeout_ms)
    if event.type == pygame.QUIT:
        return QUIT
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return QUIT
        if event.key == pygame.K_c and event.mod & pygame.KMOD_CTRL:
            return QUIT
        if event.unicode:
            return event.unicode
    return None


# ---------------------- Dispatch ----------------------
def dispatch_key(tracker, sink, key, now, duration_ms=TONE_DURATION_MS):
    event = lookup(key)
    if event is None:
        return None
    # a tone that fails to play still lights the key
    sink.play(generate_tone(event.frequency, duration_ms))
    tracker.press(event.key, event.frequency, now)
    logger.debug("played %s at %.2f Hz", event.key, event.frequency)
    return event


def run(tracker, sink, render, poll=poll_key, clock=time.monotonic):
    """Render, poll, dispatch; until poll returns QUIT."""
    while True:
        render(tracker.snapshot())
        key = poll(POLL_TIMEOUT_MS)
        if key is QUIT:
            break
        if key:
            dispatch_key(tracker, sink, key, clock())


# ---------------------- Main ----------------------
def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    sink = AudioSink()
    try:
        sink.open()
    except AudioDeviceError as e:
        logger.error("%s", e)
        return 1

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_CAPTION)
        visualizer = Visualizer(screen)
        try:
            run(KeyStateTracker(), sink, visualizer.draw)
        except KeyboardInterrupt:
            logger.info("interrupted")
    finally:
        sink.close()
        pygame.quit()
    return 0

if __name__ == "__main__":
    sys.exit(main())
