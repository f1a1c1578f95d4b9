import math
import sys

import numpy as np
import pygame

# ============================================================
# ====================== SOUND SETTINGS ======================
# ============================================================

SAMPLE_RATE = 44100
CHUNK_SIZE  = 512
TONE_MS     = 50
FREQ_LOW    = 200.0
FREQ_HIGH   = 2000.0

# Peak sample value; 8192 of 32767 keeps tones at roughly 25% volume.
AMPLITUDE   = 8192

# Channel 0 is reserved for tones. Only one tone ever plays at a time.
TONE_CHANNEL = 0

TWO_PI = 2.0 * math.pi

# ============================================================
# ======================= TONE GENERATOR =====================
# ============================================================
#
# WAVEFORM, a pure sine:
#   wave[k] = sin(2pi * f * k / sample_rate)
#
# ENVELOPE, a linear fade-out over the whole tone:
#   env[k] = 1 - k / n
#   The buffer ends at zero, so cutting one tone off with the next never
#   clicks at the buffer boundary.


def value_to_freq(value, max_value, lo=FREQ_LOW, hi=FREQ_HIGH):
    """Map an array value in 1..max_value linearly onto [lo, hi] Hz."""
    if max_value <= 1:
        return lo
    ratio = (value - 1) / (max_value - 1)
    return lo + ratio * (hi - lo)


def make_tone(freq, duration_ms=TONE_MS, sample_rate=SAMPLE_RATE) -> np.ndarray:
    """
    Synthesise one tone as mono int16 PCM.

    Same arguments always give the same buffer, so tones can be built once
    per value and reused for the whole run.
    """
    n = int(sample_rate * duration_ms / 1000)
    if n <= 0:
        return np.zeros(0, dtype=np.int16)
    k    = np.arange(n, dtype=np.float64)
    wave = np.sin(TWO_PI * freq * k / sample_rate)
    env  = 1.0 - k / n
    return (wave * env * AMPLITUDE).astype(np.int16)


# ============================================================
# ======================= AUDIO PLAYER =======================
# ============================================================

class AudioUnavailable(RuntimeError):
    """The audio output device could not be opened."""


class TonePlayer:
    """
    Plays one tone per array value on a single mixer channel.

    A new tone always cuts off the previous one instead of queueing behind
    it, so the sound never lags behind the bars on screen.
    """

    def __init__(self, max_value, freq_lo=FREQ_LOW, freq_hi=FREQ_HIGH,
                 duration_ms=TONE_MS):
        self.max_value   = max_value
        self.freq_lo     = freq_lo
        self.freq_hi     = freq_hi
        self.duration_ms = duration_ms
        self.sample_rate = SAMPLE_RATE
        self.channels    = 2
        self._sounds     = {}          # value -> pygame.mixer.Sound
        self._channel    = None

    def start(self):
        try:
            if pygame.mixer.get_init():
                pygame.mixer.quit()
            pygame.mixer.init(SAMPLE_RATE, -16, 2, CHUNK_SIZE)
            # the device may not grant exactly what was asked for
            self.sample_rate, _, self.channels = pygame.mixer.get_init()
            self._channel = pygame.mixer.Channel(TONE_CHANNEL)
        except pygame.error as e:
            self._channel = None
            raise AudioUnavailable(str(e)) from e

    def stop(self):
        # the mixer may already be gone if pygame.quit() ran first
        if self._channel and pygame.mixer.get_init():
            self._channel.stop()

    def _sound(self, value):
        snd = self._sounds.get(value)
        if snd is None:
            freq = value_to_freq(value, self.max_value, self.freq_lo, self.freq_hi)
            pcm  = make_tone(freq, self.duration_ms, self.sample_rate)
            # duplicate mono into every output channel (L/R identical)
            frames = np.column_stack([pcm] * self.channels)
            snd = pygame.mixer.Sound(buffer=frames.tobytes())
            self._sounds[value] = snd
        return snd

    def play(self, value: int):
        if self._channel is None or not (1 <= value <= self.max_value):
            return
        snd = self._sound(value)
        self._channel.stop()
        self._channel.play(snd)


def open_player(cfg):
    """
    Start a TonePlayer for the run, or return None when sound is off.

    If the device cannot be opened, a warning is printed and then
    cfg.on_audio_failure decides: "abort" re-raises AudioUnavailable and
    "mute" carries on silently.
    """
    if not cfg.sound:
        return None
    player = TonePlayer(cfg.size, cfg.freq_lo, cfg.freq_hi, cfg.tone_ms)
    try:
        player.start()
    except AudioUnavailable as e:
        print(f"Warning: Failed to initialize audio: {e}", file=sys.stderr)
        if cfg.on_audio_failure != "mute":
            raise
        print("Continuing without sound...", file=sys.stderr)
        return None
    return player
