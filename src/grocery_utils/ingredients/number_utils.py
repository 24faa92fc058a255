from decimal import Decimal, InvalidOperation

# Unicode fraction mappings
UNICODE_FRAC = {
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅛": "1/8",
}


def _is_integer(text: str) -> bool:
    """Check if a string represents a valid integer."""
    try:
        int(text)
        return True
    except ValueError:
        return False


def _is_fraction(text: str) -> bool:
    """Check if a string represents a valid fraction (e.g., '1/2')."""
    if "/" not in text:
        return False
    parts = text.split("/")
    return len(parts) == 2 and all(_is_integer(part) for part in parts)


def _parse_fraction(text: str) -> Decimal:
    """Parse a fraction string (e.g., '1/2') into a Decimal."""
    if not _is_fraction(text):
        raise ValueError(f"Not a fraction: {text}")

    numerator_str, denominator_str = text.split("/")
    numerator = Decimal(numerator_str)
    denominator = Decimal(denominator_str)

    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return numerator / denominator


def replace_unicode_fractions(text: str) -> str:
    """Rewrite vulgar fraction characters as ASCII fractions.

    A fraction glued to a whole number becomes a mixed number, so
    "1½ cups" reads as "1 1/2 cups".
    """
    out = []
    for char in text:
        if char in UNICODE_FRAC:
            if out and out[-1].isdigit():
                out.append(" ")
            out.append(UNICODE_FRAC[char])
        else:
            out.append(char)
    return "".join(out)


def parse_number(text: str) -> float:
    """Parse an integer, decimal, fraction or mixed number by summing its terms.

    Raises:
        ValueError: If a term is not a number.
        ZeroDivisionError: If a fraction has a zero denominator.

    Examples:
        >>> parse_number("2 1/4")
        2.25
        >>> parse_number("1.5")
        1.5
    """
    terms = text.split()
    if not terms:
        raise ValueError("Empty quantity")

    total = Decimal(0)
    for term in terms:
        if "/" in term:
            total += _parse_fraction(term)
        else:
            try:
                total += Decimal(term)
            except InvalidOperation:
                raise ValueError(f"Not a number: {term}") from None
    return float(total)
