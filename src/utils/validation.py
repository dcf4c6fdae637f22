import re

_SYMBOL_PATTERN = re.compile(r"^[A-Z0-9][A-Z0-9&-]{0,28}$")


def validate_symbol(symbol: str) -> str:
    clean = symbol.strip().upper()
    if not _SYMBOL_PATTERN.fullmatch(clean):
        raise ValueError(f"Invalid symbol: {symbol!r}")
    return clean
