"""
Positional base conversion.

Digits are big-endian (most significant first). The digits are folded into
one integer and then peeled off with divmod, least significant first.
"""


def convert(digits, from_base, to_base, fixed_length=None):
    """Re-express ``digits`` in ``from_base`` as a digit list in ``to_base``.

    With ``fixed_length`` the result is left-padded with zero digits. A result
    that is naturally longer than ``fixed_length`` is returned untruncated.
    """
    if from_base < 2 or to_base < 2:
        raise ValueError(f"bases must be >= 2, got {from_base} -> {to_base}")

    number = 0
    for digit in digits:
        if not 0 <= digit < from_base:
            raise ValueError(f"digit {digit} is not valid in base {from_base}")
        number = number * from_base + digit

    result = []
    while number > 0:
        number, remainder = divmod(number, to_base)
        result.append(remainder)
    result.reverse()

    width = fixed_length if fixed_length is not None else 1
    if len(result) < width:
        result[:0] = [0] * (width - len(result))
    return result
