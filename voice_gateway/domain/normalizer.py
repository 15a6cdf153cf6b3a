"""Text normalization shared by every matching step"""

import unicodedata


def normalize(text: str) -> str:
    """Lowercase, strip diacritics and trim. Idempotent."""
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.strip()
