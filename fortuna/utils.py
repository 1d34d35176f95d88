"""Parsing of command line values."""

import re

__all__ = [
    "parse_seed",
    "parse_size",
]


def parse_size(length: str | None) -> int | None:
    """Parse size string with SI/IEC prefixes.

    Supports:
    - Plain numbers: 1000, 1_000_000
    - SI prefixes: k, m, g, t, p (powers of 1000)
    - IEC prefixes: ki, mi, gi, ti, pi (powers of 1024)
    - Optional 'b' suffix: kb, kib, mb, mib, etc.
    - Case insensitive

    Examples: 1k, 1ki, 1kb, 1kib, 100m, 100mi, 1g, 1gi
    """
    if length is None:
        return None
    s = length.strip().lower().replace("_", "")

    si_prefixes = {"k": 1000, "m": 1000**2, "g": 1000**3, "t": 1000**4, "p": 1000**5}
    iec_prefixes = {
        "ki": 1024,
        "mi": 1024**2,
        "gi": 1024**3,
        "ti": 1024**4,
        "pi": 1024**5,
    }

    # Try IEC first (ki, mi, etc.) - must check before SI
    m = re.match(r"^(\d+(?:\.\d+)?)\s*(ki|mi|gi|ti|pi)b?$", s)
    if m:
        num, prefix = m.groups()
        return int(float(num) * iec_prefixes[prefix])

    m = re.match(r"^(\d+(?:\.\d+)?)\s*([kmgtp])b?$", s)
    if m:
        num, prefix = m.groups()
        return int(float(num) * si_prefixes[prefix])

    # Plain number, optionally with a bare byte suffix
    m = re.match(r"^(\d+)\s*b?$", s)
    if m:
        return int(m.group(1))

    raise ValueError(f"Invalid size format: {length}")


def parse_seed(seed: str | None) -> int | None:
    """Parse a decimal or 0x-prefixed hex seed into a signed 64-bit integer."""
    if seed is None:
        return None
    s = seed.strip().replace("_", "")
    try:
        value = int(s, 0)
    except ValueError:
        raise ValueError(f"Invalid seed: {seed} (expected an integer)") from None
    if not -(1 << 63) <= value < (1 << 63):
        raise ValueError(f"Seed out of range: {seed} (must fit in 64 signed bits)")
    return value
