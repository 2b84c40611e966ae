"""Version numbers: a simple major.minor pair and semantic versions."""

from __future__ import annotations

_DIGITS = frozenset("0123456789")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _is_uinteger(text: str) -> bool:
    return bool(text) and all(c in _DIGITS for c in text)


def _is_integer(text: str) -> bool:
    return _is_uinteger(text[1:] if text.startswith("-") else text)


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _to_int32(text: str) -> int:
    """Convert an integer string, yielding -1 if it does not fit 32 bits."""
    value = int(text)
    return value if _INT32_MIN <= value <= _INT32_MAX else -1


def _is_numeric_identifier(identifier: str) -> bool:
    """A non-negative integer without leading zeros."""
    return _is_uinteger(identifier) and not (len(identifier) > 1 and identifier[0] == "0")


def _is_alphanumeric_identifier(identifier: str) -> bool:
    return bool(identifier) and all(_is_alnum(c) or c == "-" for c in identifier)


def _is_pre_release_identifier(identifier: str) -> bool:
    if _is_uinteger(identifier):
        return _is_numeric_identifier(identifier)
    return _is_alphanumeric_identifier(identifier)


def _is_build_identifier(identifier: str) -> bool:
    return _is_alphanumeric_identifier(identifier) or _is_uinteger(identifier)


def _split_identifiers(identifiers: str | None) -> list[str]:
    return identifiers.split(".") if identifiers else []


def _sign(a, b) -> int:
    return (a > b) - (a < b)


class _Comparable:
    """Rich comparisons based on a ``compare`` method of the subclass."""

    __hash__ = None  # mutable

    def _cmp(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare(other)

    def __eq__(self, other):
        r = self._cmp(other)
        return r if r is NotImplemented else r == 0

    def __ne__(self, other):
        r = self._cmp(other)
        return r if r is NotImplemented else r != 0

    def __lt__(self, other):
        r = self._cmp(other)
        return r if r is NotImplemented else r < 0

    def __le__(self, other):
        r = self._cmp(other)
        return r if r is NotImplemented else r <= 0

    def __gt__(self, other):
        r = self._cmp(other)
        return r if r is NotImplemented else r > 0

    def __ge__(self, other):
        r = self._cmp(other)
        return r if r is NotImplemented else r >= 0


class MajMinVer(_Comparable):
    """A ``major.minor`` version.

    ``MajMinVer()`` is ``0.0``; ``MajMinVer(major, minor)`` takes the numbers;
    ``MajMinVer(text)`` parses a string, leaving both numbers at -1 if the
    string is not of the form ``<int>.<int>``.
    """

    def __init__(self, *args) -> None:
        self._major = 0
        self._minor = 0
        if args:
            self.set(*args)

    def set(self, *args) -> None:
        """Set from a version string or from ``major, minor``."""
        if len(args) == 1 and (args[0] is None or isinstance(args[0], str)):
            self._parse(args[0] or "")
        elif len(args) == 2 and all(isinstance(a, int) for a in args):
            self._major, self._minor = args
        else:
            raise TypeError("set() expects a string or two integers")

    def _parse(self, text: str) -> None:
        data = text.split(".")
        if len(data) == 2 and all(_is_integer(d) for d in data):
            self._major = _to_int32(data[0])
            self._minor = _to_int32(data[1])
        else:
            self._major = -1
            self._minor = -1

    def major(self) -> int:
        return self._major

    def minor(self) -> int:
        return self._minor

    def compare(self, other: MajMinVer) -> int:
        """Return <0, 0 or >0 as ``self`` is less than, equal to or greater than ``other``."""
        return _sign((self._major, self._minor), (other._major, other._minor))

    def is_valid(self) -> bool:
        """True if neither number is negative."""
        return self._major >= 0 and self._minor >= 0

    def __str__(self) -> str:
        return f"{self._major}.{self._minor}"

    def __repr__(self) -> str:
        return f"MajMinVer({str(self)!r})"


class Semver(_Comparable):
    """A version following Semantic Versioning 2.0.0.

    ``Semver()`` is ``0.0.0``; ``Semver(major, minor, patch, pre_release=None,
    build=None)`` takes the parts; ``Semver(text)`` parses a version string.
    A version part that cannot be parsed leaves major, minor and patch at -1.
    """

    def __init__(self, *args) -> None:
        self._major = 0
        self._minor = 0
        self._patch = 0
        self._pre_release: list[str] = []
        self._build: list[str] = []
        if args:
            self.set(*args)

    def set(self, *args) -> None:
        """Set from a version string or from ``major, minor, patch[, pre_release[, build]]``."""
        if len(args) == 1 and (args[0] is None or isinstance(args[0], str)):
            self._parse(args[0] or "")
            return
        if not 3 <= len(args) <= 5:
            raise TypeError("set() expects a string or 3 to 5 arguments")
        numbers, strings = args[:3], args[3:]
        if not all(isinstance(a, int) for a in numbers):
            raise TypeError("major, minor and patch must be integers")
        if not all(s is None or isinstance(s, str) for s in strings):
            raise TypeError("pre-release and build must be strings or None")
        self._major, self._minor, self._patch = numbers
        pre_release = strings[0] if len(strings) > 0 else None
        build = strings[1] if len(strings) > 1 else None
        self._pre_release = _split_identifiers(pre_release)
        self._build = _split_identifiers(build)

    def _parse(self, text: str) -> None:
        pos_hyphen = text.find("-")
        pos_plus = text.find("+")
        end_version = len(text)

        if pos_plus >= 0:
            end_version = pos_plus
            self._build = _split_identifiers(text[pos_plus + 1 :])
        else:
            self._build = []

        if pos_hyphen >= 0 and (pos_plus < 0 or pos_hyphen < pos_plus):
            end_version = pos_hyphen
            end_pre = pos_plus if pos_plus >= 0 else len(text)
            self._pre_release = _split_identifiers(text[pos_hyphen + 1 : end_pre])
        else:
            self._pre_release = []

        self._parse_version(text[:end_version])

    def _parse_version(self, text: str) -> None:
        data = text.split(".")
        if len(data) == 3 and all(_is_integer(d) for d in data):
            self._major, self._minor, self._patch = (_to_int32(d) for d in data)
        else:
            self._major = self._minor = self._patch = -1

    def major(self) -> int:
        return self._major

    def minor(self) -> int:
        return self._minor

    def patch(self) -> int:
        return self._patch

    def pre_release(self) -> str:
        return ".".join(self._pre_release)

    def build(self) -> str:
        return ".".join(self._build)

    def pre_release_identifiers(self) -> tuple[str, ...]:
        return tuple(self._pre_release)

    def build_identifiers(self) -> tuple[str, ...]:
        return tuple(self._build)

    def compare(self, other: Semver) -> int:
        """Compare by semver precedence; build metadata is ignored."""
        r = _sign(
            (self._major, self._minor, self._patch),
            (other._major, other._minor, other._patch),
        )
        if r:
            return r

        pra, prb = self._pre_release, other._pre_release
        if not pra or not prb:
            # a pre-release has lower precedence than the normal version
            return _sign(len(prb), len(pra))

        for a, b in zip(pra, prb):
            num_a = _is_numeric_identifier(a)
            num_b = _is_numeric_identifier(b)
            if num_a and num_b:
                r = _sign(int(a), int(b))
            elif num_a:
                r = -1
            elif num_b:
                r = 1
            else:
                r = _sign(a, b)
            if r:
                return r

        return _sign(len(pra), len(prb))

    def has_build(self) -> bool:
        return bool(self._build)

    def is_pre_release(self) -> bool:
        return bool(self._pre_release)

    def is_valid(self) -> bool:
        """True if all parts comply with the semver rules."""
        return (
            self._major >= 0
            and self._minor >= 0
            and self._patch >= 0
            and all(_is_pre_release_identifier(i) for i in self._pre_release)
            and all(_is_build_identifier(i) for i in self._build)
        )

    def __str__(self) -> str:
        text = f"{self._major}.{self._minor}.{self._patch}"
        if self._pre_release:
            text += "-" + self.pre_release()
        if self._build:
            text += "+" + self.build()
        return text

    def __repr__(self) -> str:
        return f"Semver({str(self)!r})"