"""Search functions over NUL-terminated byte strings.

Every string argument is a bytes-like object. The logical string ends at
the first NUL byte, or at the end of the buffer if there is none. Positions
are returned as indices into the buffer that was passed in.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

__all__ = [
    "strchr",
    "strchrnul",
    "strrchr",
    "strstr",
    "strcasestr",
    "strspn",
    "strcspn",
    "strpbrk",
    "index",
    "rindex",
]


def _terminated(s: BytesLike) -> bytes:
    """Return the part of ``s`` before its first NUL byte."""
    data = bytes(s)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _check_byte(c: int) -> int:
    if not isinstance(c, int) or isinstance(c, bool):
        raise TypeError(f"byte value must be an int, not {type(c).__name__}")
    if not 0 <= c <= 0xFF:
        raise ValueError(f"byte value out of range: {c}")
    return c


def _found(pos: int) -> Optional[int]:
    return None if pos < 0 else pos


def strchr(s: BytesLike, c: int) -> Optional[int]:
    """Index of the first ``c`` in the string, or None.

    Searching for NUL finds the terminator; with no terminator, None.
    """
    c = _check_byte(c)
    data = bytes(s)
    if c == 0:
        return _found(data.find(0))
    return _found(_terminated(data).find(c))


def strchrnul(s: BytesLike, c: int) -> int:
    """Index of the first ``c`` in the string, or the string's length."""
    c = _check_byte(c)
    text = _terminated(s)
    pos = text.find(c)
    return len(text) if pos < 0 else pos


def strrchr(s: BytesLike, c: int) -> Optional[int]:
    """Index of the last ``c`` in the string, or None.

    Searching for NUL finds the terminator; with no terminator, None.
    """
    c = _check_byte(c)
    data = bytes(s)
    length = len(_terminated(data))
    limit = min(length + 1 if c == 0 else length, len(data))
    return _found(data[:limit].rfind(c))


def strstr(haystack: BytesLike, needle: BytesLike) -> Optional[int]:
    """Index of the first occurrence of ``needle`` in ``haystack``, or None.

    An empty needle matches at index 0.
    """
    return _found(_terminated(haystack).find(_terminated(needle)))


def strcasestr(haystack: BytesLike, needle: BytesLike) -> Optional[int]:
    """Like :func:`strstr`, ignoring ASCII case."""
    hay = _terminated(haystack).lower()
    pat = _terminated(needle).lower()
    return _found(hay.find(pat))


def strspn(s: BytesLike, accept: BytesLike) -> int:
    """Length of the leading run of bytes that all appear in ``accept``."""
    text = _terminated(s)
    allowed = frozenset(_terminated(accept))
    if not allowed:
        return 0
    return next(
        (i for i, byte in enumerate(text) if byte not in allowed), len(text)
    )


def strcspn(s: BytesLike, reject: BytesLike) -> int:
    """Length of the leading run of bytes none of which appear in ``reject``."""
    text = _terminated(s)
    pos = strpbrk(text, reject)
    return len(text) if pos is None else pos


def strpbrk(s: BytesLike, accept: BytesLike) -> Optional[int]:
    """Index of the first byte of the string found in ``accept``, or None."""
    text = _terminated(s)
    wanted = frozenset(_terminated(accept))
    if not wanted:
        return None
    return next((i for i, byte in enumerate(text) if byte in wanted), None)


def index(s: BytesLike, c: int) -> Optional[int]:
    """Alias of :func:`strchr`."""
    return strchr(s, c)


def rindex(s: BytesLike, c: int) -> Optional[int]:
    """Alias of :func:`strrchr`."""
    return strrchr(s, c)