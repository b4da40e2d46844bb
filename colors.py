"""Random color generation and RGB to Hex/HSL formatting."""

import math
import random

CHANNEL_MAX = 255


def random_channel(rng=None):
    """Return a uniformly sampled channel value in [0, 255].

    ``rng`` may be a ``random.Random`` instance; the module-level generator
    is used otherwise.
    """
    source = rng if rng is not None else random
    return source.randint(0, CHANNEL_MAX)


def _round_half_up(value):
    return math.floor(value + 0.5)


def rgb_to_hex(r, g, b):
    return '#{:02x}{:02x}{:02x}'.format(r, g, b)


def rgb_to_rgb_string(r, g, b):
    return 'rgb({}, {}, {})'.format(r, g, b)


def rgb_to_hsl_components(r, g, b):
    """Convert channel values to an integer (hue, saturation, lightness) triple.

    Hue is in degrees [0, 360), saturation and lightness in percent.
    When two channels share the maximum, red wins over green and green
    over blue when picking the hue sector.
    """
    r, g, b = r / CHANNEL_MAX, g / CHANNEL_MAX, b / CHANNEL_MAX
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    hue = saturation = 0.0

    if high != low:
        d = high - low
        if lightness > 0.5:
            saturation = d / (2 - high - low)
        else:
            saturation = d / (high + low)

        if high == r:
            hue = ((g - b) / d + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / d + 2) / 6
        else:
            hue = ((r - g) / d + 4) / 6

    # turns just below 1 round up to 360
    return (
        _round_half_up(hue * 360) % 360,
        _round_half_up(saturation * 100),
        _round_half_up(lightness * 100),
    )


def rgb_to_hsl(r, g, b):
    return 'hsl({}, {}%, {}%)'.format(*rgb_to_hsl_components(r, g, b))


def format_color(r, g, b):
    return {
        'hex': rgb_to_hex(r, g, b),
        'rgb': rgb_to_rgb_string(r, g, b),
        'hsl': rgb_to_hsl(r, g, b),
    }


def random_color(rng=None):
    r = random_channel(rng)
    g = random_channel(rng)
    b = random_channel(rng)
    return format_color(r, g, b)
