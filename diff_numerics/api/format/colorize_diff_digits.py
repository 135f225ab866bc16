"""Digit-level highlighting of two numeric literals."""

from .colorize_whole import colorize_whole


def _split_exponent(literal: str) -> tuple[str, str]:
    """Split at the first ``e``/``E`` into (mantissa, exponent-with-marker)."""
    for i, char in enumerate(literal):
        if char in "eE":
            return literal[:i], literal[i:]
    return literal, ""


def _colorize_from(mantissa: str, start: int) -> str:
    if start < len(mantissa):
        return mantissa[:start] + colorize_whole(mantissa[start:])
    return mantissa


def colorize_diff_digits(literal1: str, literal2: str) -> tuple[str, str]:
    """Highlight exactly the characters responsible for the divergence.

    Each literal is split into mantissa and exponent. Mantissas are colored
    from the first differing index (or the shorter length) onward; the common
    prefix stays plain. When the mantissas differ in any way, both exponents
    are colored in full; when the mantissas are identical, exponents are
    colored only if they differ from each other.

    Args:
        literal1: Numeric literal from the first file
        literal2: Numeric literal from the second file

    Returns:
        The two literals with color escape sequences inserted
    """
    mant1, exp1 = _split_exponent(literal1)
    mant2, exp2 = _split_exponent(literal2)

    common = min(len(mant1), len(mant2))
    diff_start = common
    for i in range(common):
        if mant1[i] != mant2[i]:
            diff_start = i
            break

    out1 = _colorize_from(mant1, diff_start)
    out2 = _colorize_from(mant2, diff_start)

    mantissas_differ = diff_start < common or len(mant1) != len(mant2)
    if mantissas_differ or exp1 != exp2:
        out1 += colorize_whole(exp1) if exp1 else ""
        out2 += colorize_whole(exp2) if exp2 else ""
    else:
        out1 += exp1
        out2 += exp2
    return out1, out2
