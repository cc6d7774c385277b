import unicodedata


def normalize(text: str | None) -> str:
    """
    Lower-case ``text`` and strip diacritics for accent-insensitive matching.

    Uses canonical decomposition (NFD) and drops the combining marks, so
    "Farmácia" and "FARMACIA" both become "farmacia". ``None`` and empty
    input give an empty string.
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.lower()
