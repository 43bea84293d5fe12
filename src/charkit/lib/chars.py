"""
Predefined character sets.

Each set is available as a module constant (``ALPHA_NUMERIC``) and by its
lower-case name through `get` (``get("alpha_numeric")``), which is how the
CLI and configuration refer to them.
"""

from charkit.lib.char_set import CharRange, CharSet

NUMERIC = CharSet(CharRange("0", "9"))
OCTAL = CharSet(CharRange("0", "7"))

UPPERCASE_HEXADECIMAL = NUMERIC | CharRange("A", "F")
LOWERCASE_HEXADECIMAL = NUMERIC | CharRange("a", "f")
HEXADECIMAL = UPPERCASE_HEXADECIMAL | LOWERCASE_HEXADECIMAL

UPPERCASE_ALPHA = CharSet(CharRange("A", "Z"))
LOWERCASE_ALPHA = CharSet(CharRange("a", "z"))
ALPHA = UPPERCASE_ALPHA | LOWERCASE_ALPHA
ALPHA_NUMERIC = ALPHA | NUMERIC

PUNCTUATION = CharSet(list(" '\"`,;:~-()[]{}.?!"))
SYMBOLS = PUNCTUATION | list("@#$%^&*_+=|\\<>/")
SPACE = CharSet(list(" \f\n\r\t\v"))

VISIBLE = ALPHA_NUMERIC | SYMBOLS.difference(" ")
PRINTABLE = ALPHA_NUMERIC | PUNCTUATION | SYMBOLS | SPACE

# C0 controls plus DEL
CONTROL = CharSet(range(0x00, 0x20), 0x7F)
ASCII = CharSet(range(0x00, 0x80))

CHARSETS: dict[str, CharSet] = {
    "numeric": NUMERIC,
    "octal": OCTAL,
    "uppercase_hexadecimal": UPPERCASE_HEXADECIMAL,
    "lowercase_hexadecimal": LOWERCASE_HEXADECIMAL,
    "hexadecimal": HEXADECIMAL,
    "uppercase_alpha": UPPERCASE_ALPHA,
    "lowercase_alpha": LOWERCASE_ALPHA,
    "alpha": ALPHA,
    "alpha_numeric": ALPHA_NUMERIC,
    "punctuation": PUNCTUATION,
    "symbols": SYMBOLS,
    "space": SPACE,
    "visible": VISIBLE,
    "printable": PRINTABLE,
    "control": CONTROL,
    "ascii": ASCII,
}


def names() -> list[str]:
    """Return the names of all predefined character sets."""

    return list(CHARSETS)


def get(name: str) -> CharSet:
    """
    Look up a predefined character set by name.

    Names are case-insensitive and may use dashes instead of underscores.

    Args:
        name (str): The set name, e.g. ``"alpha_numeric"``.

    Returns:
        CharSet: The predefined set.

    Raises:
        KeyError: If no set has that name.
    """

    key = name.strip().lower().replace("-", "_")
    if key not in CHARSETS:
        raise KeyError(f"Unknown character set '{name}'. Choose from: {', '.join(CHARSETS)}")

    return CHARSETS[key]


def combine(*set_names: str) -> CharSet:
    """Return the union of the named sets, in the order given."""

    return CharSet(*(get(name) for name in set_names))
