"""Decimal conversion for integers of any length.

``int(str)`` and ``str(int)`` refuse values longer than
``sys.get_int_max_str_digits()`` digits, so digit runs are converted a chunk
at a time instead.
"""

# Smaller than the lowest limit Python accepts (640).
CHUNK_DIGITS = 600
CHUNK_BASE = 10**CHUNK_DIGITS


def parse_decimal(digits: str) -> int:
    if not digits or not all("0" <= char <= "9" for char in digits):
        raise ValueError(f"not a decimal digit run: {digits[:20]!r}")
    value = 0
    for start in range(0, len(digits), CHUNK_DIGITS):
        chunk = digits[start : start + CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_decimal(value: int) -> str:
    if value < 0:
        return "-" + format_decimal(-value)
    chunks = []
    while value >= CHUNK_BASE:
        value, rest = divmod(value, CHUNK_BASE)
        chunks.append(f"{rest:0{CHUNK_DIGITS}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))
