# cstrsearch

Search functions for byte strings that follow C string rules. Each string
ends at its first NUL byte, or at the end of the buffer if it has no NUL.
Positions are returned as indices into the buffer that was passed in. Where
the C function would return a null pointer, these functions return `None`.

Strings may be `bytes`, `bytearray` or `memoryview` objects. Characters are
byte values given as `int`s from 0 to 255; any other `int` raises
`ValueError`, and a value that is not an `int` (or is a `bool`) raises
`TypeError`.

## Installation

```
pip install cstrsearch
```

## Usage

```python
from cstrsearch.search import (
    strchr, strchrnul, strrchr, strstr, strcasestr,
    strspn, strcspn, strpbrk, index, rindex,
)

strchr(b"hello\0world", ord("l"))   # 2
strchr(b"hello\0world", ord("w"))   # None: 'w' comes after the NUL
strchr(b"hello\0", 0)               # 5: the terminator itself can be found
strchrnul(b"hello\0", ord("x"))     # 5: the length of the string on a miss
strrchr(b"hello\0", ord("l"))       # 3

strstr(b"hello world\0", b"wor\0")  # 6
strstr(b"hello\0", b"\0")           # 0: an empty needle matches at the start
strcasestr(b"Hello\0", b"hEl\0")    # 0: ASCII letters compared without case

strspn(b"hello\0", b"ehlo\0")       # 5
strcspn(b"hello\0", b"lo\0")        # 2
strpbrk(b"hello\0", b"lo\0")        # 2
strpbrk(b"hello\0", b"xyz\0")       # None

index(b"hello\0", ord("h"))         # 0, the same as strchr
rindex(b"hello\0", ord("h"))        # 0, the same as strrchr
```

Searching for NUL with `strchr` or `strrchr` in a buffer that holds no NUL
returns `None`. An empty `accept` set makes `strspn` return 0 and `strpbrk`
return `None`; an empty `reject` set makes `strcspn` return the length of
the string.

## Running the tests

```
pip install -e ".[test]"
pytest
```