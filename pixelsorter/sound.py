import logging
import math
import queue
import threading

import numpy as np
import pygame

logger = logging.getLogger(__name__)

# ============================================================
# ====================== SOUND SETTINGS ======================
# ============================================================

SAMPLE_RATE    = 44100
MIXER_CHANNELS = 2
CHUNK_SIZE     = 512

FREQ_LOW       = 200
FREQ_SPAN      = 600
SWAP_TONE_MS   = 75

# Peak amplitude as a fraction of full scale (60 of 127 steps).
TONE_VOLUME    = 60 / 127
# Fade length cap in samples; shorter tones fade over 1/7 of their length.
FADE_SAMPLES   = 20

TWO_PI = 2.0 * math.pi

# ============================================================
# ======================= TONE MAPPING =======================
# ============================================================
#
# Swap distance picks the pitch: neighbours give a low 200 Hz tone,
# swaps across the whole array give 800 Hz.
#
#   freq = 200 + 600 * min(distance, length) // max(length, 1)
#
# Each tone is a plain sine with a linear fade-in and fade-out so the
# start and end of the buffer do not click:
#
#   fade = min(n // 7, 20)
#   env[t] = t / fade                 t <  fade
#   env[t] = (n - t) / fade           t >  n - fade
#   env[t] = 1                        otherwise


def swap_frequency(distance: int, length: int) -> int:
    return FREQ_LOW + FREQ_SPAN * min(distance, length) // max(length, 1)


def tone_samples(frequency, duration_ms, sample_rate=SAMPLE_RATE,
                 channels=MIXER_CHANNELS) -> np.ndarray:
    """
    Synthesise one tone as an int16 array of shape (n,) for mono or
    (n, channels) otherwise.
    """
    n    = int(sample_rate * duration_ms / 1000)
    idx  = np.arange(n, dtype=np.float64)
    wave = np.sin(TWO_PI * frequency * idx / sample_rate)

    env  = np.ones(n, dtype=np.float64)
    fade = min(n // 7, FADE_SAMPLES)
    if fade > 0:
        head = idx < fade
        env[head] = idx[head] / fade
        tail = idx > n - fade
        env[tail] = (n - idx[tail]) / fade

    pcm = (wave * env * TONE_VOLUME * 32767).astype(np.int16)
    if channels == 1:
        return pcm
    return np.column_stack([pcm] * channels)


# ============================================================
# ======================= SOUND PLAYER =======================
# ============================================================

_STOP = object()


class SoundPlayer:
    """
    Plays tones on a dedicated worker thread.

    play_tone() only puts a request on the player's queue, so the caller
    (the animation tick) never waits on synthesis or the mixer. If the
    mixer cannot be opened the player stays silent for the rest of the
    session.
    """

    def __init__(self, enabled=True):
        self.enabled      = enabled
        self.available    = False
        self.sample_rate  = SAMPLE_RATE
        self.channels     = MIXER_CHANNELS
        self._requests    = queue.Queue()
        self._thread      = None

    def start(self):
        if not self.enabled or self._thread is not None:
            return
        try:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, MIXER_CHANNELS, CHUNK_SIZE)
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio not available: %s", e)
            return
        init = pygame.mixer.get_init()
        if init:
            self.sample_rate, _, self.channels = init
        self.available = True
        self._thread = threading.Thread(target=self._loop, name="sound", daemon=True)
        self._thread.start()

    def stop(self):
        if self._thread is None:
            return
        self._requests.put(_STOP)
        self._thread.join(timeout=1.0)
        self._thread   = None
        self.available = False

    def play_tone(self, frequency, duration_ms):
        if not (self.enabled and self.available):
            return
        self._requests.put((frequency, duration_ms))

    def _loop(self):
        while True:
            request = self._requests.get()
            if request is _STOP:
                return
            frequency, duration_ms = request
            try:
                pcm = tone_samples(frequency, duration_ms, self.sample_rate, self.channels)
                pygame.mixer.Sound(buffer=pcm.tobytes()).play()
            except Exception as e:
                logger.debug("Tone %s Hz dropped: %s", frequency, e)
