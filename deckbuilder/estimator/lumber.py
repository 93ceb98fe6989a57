"""
Lumber cut optimizer.

Maps a required piece length onto the standard stock lengths sold at the
yard. Every piece in one call uses the same stock length.

Known limitation: pieces longer than the longest stock (16') still get
16' stock. The plan reports the shortfall but quantities are not adjusted.
"""

STANDARD_LUMBER_LENGTHS = [16, 12, 10, 8]


def optimize_lumber_cuts(required_length: float, piece_count: int) -> dict:
    """
    Pick stock for `piece_count` pieces of `required_length` feet.

    Returns {"stock_length", "pieces", "required_length", "shortfall_ft"}.
    """
    fitting = [length for length in STANDARD_LUMBER_LENGTHS if length >= required_length]
    if fitting:
        stock_length = min(fitting)
    else:
        stock_length = max(STANDARD_LUMBER_LENGTHS)

    return {
        "stock_length": stock_length,
        "pieces": piece_count,
        "required_length": required_length,
        "shortfall_ft": max(0.0, required_length - stock_length),
    }
