import math


def round_channel(x):
    """Round half away from zero and clamp into the 0..255 channel range."""
    r = math.floor(abs(x) + 0.5)
    r = r if x >= 0 else -r
    return max(0, min(255, int(r)))


def from_hsv(hue, saturation, value):
    """HSV to an 8-bit (r, g, b) triple.

    ``hue`` is in degrees and may run past 360; the sector is taken modulo 6.
    ``saturation`` and ``value`` are nominally 0..1.
    """
    sector = math.floor(hue / 60)
    hi = int(sector) % 6
    f = hue / 60 - sector

    value = value * 255
    v = round_channel(value)
    p = round_channel(value * (1 - saturation))
    q = round_channel(value * (1 - f * saturation))
    t = round_channel(value * (1 - (1 - f) * saturation))

    if hi == 0:
        return v, t, p
    elif hi == 1:
        return q, v, p
    elif hi == 2:
        return p, v, t
    elif hi == 3:
        return p, q, v
    elif hi == 4:
        return t, p, v
    else:
        return v, p, q


def _hue(r, g, b):
    mx = max(r, g, b)
    mn = min(r, g, b)
    if mx == mn:
        return 0.0

    delta = float(mx - mn)
    if r == mx:
        h = (g - b) / delta
    elif g == mx:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta

    h *= 60
    if h < 0:
        h += 360
    return h


def to_hsv(r, g, b):
    """8-bit (r, g, b) to (hue degrees, saturation 0..1, value 0..1)."""
    mx = max(r, g, b)
    mn = min(r, g, b)
    saturation = 0.0 if mx == 0 else 1 - mn / mx
    return _hue(r, g, b), saturation, mx / 255
