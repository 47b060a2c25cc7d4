"""Column refresh order for vertically scanned panels.

The order spreads scanline updates evenly by area: outer columns of a rotating
panel sweep a larger circumference, so they are refreshed more often than the
inner ones. Entries below the field height refresh both multiplexed scanlines;
entries at or above it refresh only the outer scanline.
"""

from __future__ import annotations

# fmt: off
COLSCATTER: tuple[int, ...] = (
    44, 32, 49, 41, 54, 36, 47, 59, 29, 51, 43, 60, 21, 33, 8, 26, 38, 25, 48, 18, 37, 30, 31, 55,
    14, 10, 20, 24, 45, 22, 34, 61, 35, 27, 49, 12, 39, 28, 58, 51, 47, 41, 53, 57, 63, 62, 36, 11,
    50, 32, 40, 16, 23, 6, 54, 61, 56, 33, 59, 52, 58, 46, 37, 60, 13, 17, 42, 19, 31, 25, 30, 44,
    21, 15, 35, 39, 34, 41, 50, 29, 54, 55, 26, 27, 43, 48, 24, 40, 28, 36, 63, 20, 38, 62, 57, 49, 14,
    51, 53, 45, 32, 37, 33, 44, 42, 59, 22, 61, 58, 18, 47, 23, 31, 60, 9, 39, 56, 30, 35, 25, 16,
    43, 52, 34, 53, 40, 49, 19, 59, 46, 38, 4, 45, 26, 63, 29, 54, 28, 12, 37, 55, 62, 50, 57, 10,
    24, 15, 33, 32, 41, 21, 27, 39, 20, 51, 48, 31, 17, 58, 11, 35, 40, 60, 46, 22, 30, 25, 29, 13,
    38, 34, 23, 56, 44, 36, 18, 53, 63, 59, 47, 42, 5, 52, 51, 26, 41, 49, 57, 28, 62, 16, 33, 7, 54, 43,
    61, 32, 14, 8, 24, 31, 55, 3, 53, 45, 50, 58, 27, 38, 44, 57, 52, 19, 30, 60, 15, 34, 36, 42,
    49, 22, 29, 48, 63, 41, 37, 56, 43, 58, 21, 39, 23, 46, 33, 25, 50, 59, 62, 40, 28, 45, 20, 32,
    35, 51, 12, 47, 31, 54, 38, 17, 26, 29, 48, 24, 42, 36, 53, 2, 43, 30, 57, 55, 9, 60, 27, 18,
    46, 37, 39, 52, 63, 13, 58, 40, 19, 22, 1, 56, 47, 44, 35, 29, 16, 62, 49, 32, 21, 28, 25, 6, 10, 11,
    23, 59, 31, 58, 36, 52, 50, 41, 34, 14, 56, 51, 54, 45, 39, 30, 61, 37, 40, 48, 60, 15, 44, 57,
    53, 26, 63, 17, 35, 27, 33, 55, 43, 42, 20, 24, 38, 32, 18, 62, 51, 22, 29, 41, 46, 28, 36, 45,
    48, 31, 58, 25, 34, 39, 21, 47, 40, 59, 12, 56, 37, 49, 23, 52, 30, 60, 43, 35, 61, 42, 19, 54,
    50, 63, 33, 48, 38, 26, 46, 41, 57, 13, 32, 56, 53, 36, 27, 60, 62, 47, 55, 44, 52, 7, 8, 29, 17,
    34, 31, 51, 37, 22, 43, 58, 16, 18, 42, 24, 35, 25, 28, 14, 41, 30, 45, 59, 21, 38, 55, 63, 33,
    20, 61, 15, 44, 32, 4, 54, 51, 26, 40, 49, 60, 39, 48, 50, 56, 11, 57, 62, 63, 5, 10, 34, 27,
    23, 46, 53, 29, 45, 9, 35, 58, 52, 54, 60, 38, 47, 19, 44, 31, 33, 48, 24, 50, 30, 17, 40, 25,
    36, 43, 32, 39, 59, 61, 58, 55, 28, 21, 42, 46, 22, 37, 13, 20, 63, 34, 51, 62, 41, 47, 56, 48, 18,
    12, 38, 35, 57, 26, 29, 49, 27, 60, 40, 43, 33, 23, 54, 53, 31, 62, 39, 36, 52, 14, 45, 51, 42,
    32, 24, 16, 15, 58, 37, 61, 50, 41, 25, 44, 28, 34, 59, 30, 63, 54, 6, 17, 55, 21, 43, 52, 40,
    35, 56, 46, 19, 58, 45, 39, 33, 29, 48, 57, 36, 47, 60, 10, 18, 31, 62, 27, 22, 44, 41, 37, 53,
    32, 20, 56, 23, 26, 49, 51, 34, 11, 38, 61, 46, 57, 45, 8, 28, 63, 48, 7, 30, 47, 54, 3, 59, 50, 42,
    53, 24, 36, 33, 44, 58, 52, 51, 55, 9, 29, 25, 60, 17, 37, 31, 46, 43, 13, 62, 32, 54, 38, 34,
    16, 15, 27, 21, 40, 39, 56, 18, 61, 26, 51, 60, 42, 20, 12, 23, 63, 57, 35, 36, 49, 30, 14, 41,
    22, 33, 45, 43, 53, 37, 61, 47, 48, 24, 28, 19, 58, 27, 38, 50, 39, 31, 34, 40, 32, 52, 25, 62,
    44, 42, 49, 23, 29, 53, 54, 46, 45, 60, 36, 43, 41, 56, 35, 26, 47, 51, 63, 48, 59, 5, 33, 18, 30,
    61, 57, 39, 20, 53, 17, 38, 44, 60, 55, 40, 10, 22, 34, 58, 45, 46, 24, 31, 32, 11, 51, 61, 15,
    27, 41, 62, 16, 36, 21, 25, 52, 28, 50, 35, 49, 37, 39, 58, 44, 33, 23, 63, 54, 29, 56, 42, 13,
    6, 14, 19, 30, 8, 47, 43, 57, 53, 34, 27, 52, 60, 9, 26, 48, 32, 49, 18, 31, 4, 61, 55, 39,
    12, 24, 22, 37, 62, 45, 35, 46, 57, 42, 51, 47, 53, 20, 38, 33, 28, 43, 58, 27, 63, 40, 29, 17, 41, 50,
    55, 16, 2, 56, 30, 44, 25, 54, 7, 36, 45, 46, 21, 32, 52, 47, 19, 42, 37, 31, 26, 59, 61, 28,
    49, 35, 43, 23, 38, 50, 62, 24, 48, 41, 57, 33, 40, 44, 22, 53, 52, 46, 45, 15, 39, 63, 29, 34,
    27, 36, 51, 49, 10, 26, 28, 56, 30, 55, 18, 37, 11, 32, 25, 48, 53, 38, 41, 20, 54, 44, 35, 61,
    31, 47, 14, 59, 13, 40, 49, 56, 60, 58, 33, 19, 39, 42, 23, 30, 36, 50, 57, 43, 21, 34, 52, 16, 29,
    37, 22, 63, 44, 41, 27, 47, 24, 38, 17, 28, 46, 32, 26, 45, 62, 51, 35, 55, 8, 42, 25, 53, 61,
    52, 18, 39, 43, 54, 31, 48, 59, 33, 36, 12, 56, 47, 60, 9, 49, 30, 37, 34, 58, 46, 51, 23, 57,
    38, 29, 45, 53, 20, 42, 50, 54, 27, 32, 40, 43, 35, 48, 31, 24, 28, 62, 39, 15, 44, 49, 55, 57,
    26, 41, 19, 61, 36, 33, 14, 5, 21, 52, 59, 22, 50, 13, 34, 42, 6, 56, 30, 60, 16, 43, 31, 55, 25, 40,
    47, 17, 29, 44, 58, 32, 3, 7, 51, 41, 27, 52, 46, 54, 53, 18, 62, 56, 36, 45, 37, 28, 23, 10,
    48, 33, 57, 61, 31, 11, 47, 38, 49, 26, 34, 44, 59, 40, 20, 54, 19, 30, 24, 46, 41, 21, 55, 39,
    60, 50, 35, 32, 45, 29, 48, 63, 25, 42, 47, 37, 36, 58, 27, 49, 43, 62, 22, 52, 12, 55, 38, 56,
    51, 1, 46, 28, 53, 8, 34, 61, 41, 18, 31, 48, 45, 59, 57, 39, 15, 30, 26, 35, 42, 23, 17, 52, 0, 54,
    43, 60, 37, 24, 4, 44, 29, 19, 14, 21, 59, 63, 50, 38, 16, 62, 9, 25, 13, 40, 55, 58, 47, 34,
    33, 60, 20, 49, 39, 42, 22, 27, 61, 56, 35, 53, 43, 31, 46, 51, 30, 44, 50, 37, 55, 32, 57, 48,
    36, 28, 26, 45, 41, 59, 47, 52, 38, 29, 49, 40, 63, 24, 54, 53, 34, 62, 10, 39, 23, 46, 33, 18,
    19, 11, 59, 25, 60, 35, 12, 48, 58, 61, 63, 52, 37, 45, 15, 17, 41, 56, 30, 36, 21, 32, 22, 27, 55,
    40, 6, 50, 46, 42, 51, 31, 28, 29, 34, 7, 25, 26, 20, 16, 62, 43, 44, 47, 45, 24, 33, 59, 35,
    49, 37, 23, 53, 54, 41, 50, 63, 61, 14, 60, 51, 8, 62, 36, 42, 57, 38, 58, 52, 32, 48, 47, 27,
    56, 39, 13, 34, 44, 55, 43, 29, 31, 17, 50, 30, 21, 22, 28, 5, 46, 19, 35, 33, 9, 25, 40, 26,
    59, 20, 42, 47, 24, 63, 48, 61, 23, 38, 36, 62, 45, 18, 49, 12, 60, 39, 53, 32, 54, 11, 34, 46, 27, 51,
    57, 63, 58, 37, 52, 29, 40, 15, 56, 55, 30, 41, 35, 16, 10, 50, 28, 33, 49, 59, 45, 38, 31, 21,
    22, 44, 61, 46, 25, 36, 26, 19, 43, 39, 62, 20, 23, 24, 2, 32, 47, 40, 59, 50, 63, 48, 37, 28,
    61, 17, 42, 54, 57, 41, 53, 35, 13, 14, 55, 30, 51, 38, 44, 26, 33, 27, 63, 52, 56, 43, 29, 36,
    50, 60, 39, 47, 48, 57, 54, 40, 49, 55, 34, 62, 42, 21, 37, 31, 59, 51, 32, 46, 58, 45, 9, 61, 3,
    24, 20, 28, 12, 18, 25, 6, 55, 22, 11, 16, 30, 15, 49, 59, 63, 33, 7, 4, 8, 19, 53, 26, 29,
    42, 60, 56, 46, 52, 57, 23, 34, 45, 37, 50, 41, 62, 27, 54, 31, 44, 48, 32, 35, 17, 43, 58, 60,
    38, 61, 47, 51, 56, 21, 57, 55, 40, 52, 39, 59, 30, 14, 10, 33, 36, 50, 22, 31, 13, 28, 58, 48,
    49, 41, 29, 37, 44, 34, 24, 25, 55, 59, 19, 43, 53, 62, 20, 15, 38, 35, 63, 54, 32, 40, 26, 60, 61, 18,
    46, 42, 39, 49, 16, 27, 57, 56, 23, 45, 36, 33, 30, 51, 41, 12, 31, 21, 54, 52, 5, 61, 28, 58,
    11, 34, 47, 59, 50, 38, 57, 40, 49, 56, 55, 35, 62, 14, 48, 42, 63, 51, 32, 22, 29, 39, 53, 13,
    60, 59, 26, 20, 44, 36, 25, 9, 50, 33, 24, 55, 17, 30, 43, 15, 31, 37, 40, 38, 54, 19, 61, 27,
    34, 16, 53, 28, 46, 58, 42, 35, 57, 50, 45, 52, 23, 7, 62, 56, 63,
)
# fmt: on


def scatter_column(index: int, field_height: int = 32) -> tuple[int, bool]:
    """Column to refresh at step ``index`` and whether its inner scanline is lit too.

    Returns ``(column, inner)`` where ``column`` is below ``field_height``.
    """
    if field_height <= 0 or field_height & (field_height - 1):
        raise ValueError(f"field height must be a positive power of two, not {field_height}")
    if not 0 <= index < len(COLSCATTER):
        raise IndexError(f"scatter index {index} out of range")
    entry = COLSCATTER[index]
    return entry & (field_height - 1), entry < field_height