def _parse_number(text, kind):
    # reject non-ASCII digits, whitespace padding and digit underscores that int()/float() accept
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        return None
    try:
        return kind(text)
    except ValueError:
        return None

def parse_pair(s, separator, kind=float):
    """
    Parse the string `s` as a coordinate pair, like "400x600" or "1.0,0.5".

    `s` should have the form <left><sep><right>, where <sep> is `separator`
    and both sides can be parsed by `kind` (e.g. int or float). Splits on the
    first separator only. Returns (left, right), or None on any failure.
    """
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")

    left, sep, right = s.partition(separator)
    if not sep:
        return None

    left_value = _parse_number(left, kind)
    right_value = _parse_number(right, kind)
    if left_value is None or right_value is None:
        return None
    return left_value, right_value

def parse_complex(s):
    """Parse a pair of floating-point numbers separated by a comma as a complex number."""
    pair = parse_pair(s, ",", float)
    if pair is None:
        return None
    real, imag = pair
    return complex(real, imag)
