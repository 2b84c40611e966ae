# omwkit

A small collection of general purpose helpers:

- **Fixed-width bit shifts** (`omwkit.utility`): shift a value as if it were an
  8, 16, 32 or 64 bit signed or unsigned integer, with well-defined results
  when the shift count reaches or exceeds the width.
- **Levenshtein distance** (`omwkit.algorithm`) between strings or any
  sequences.
- **Versions** (`omwkit.version`): `MajMinVer` for `major.minor` versions and
  `Semver` for Semantic Versioning 2.0.0, with parsing, validation and
  ordering.
- **Library info** (`omwkit.info`): the version of this package as a `Semver`.
- **ANSI escape sequences** (`omwkit.ansiesc`, `omwkit.manip`): builders for
  control sequences and SGR (Select Graphic Rendition) styles, with a
  module-wide switch to turn all output off.

## Installation

```
pip install omwkit
```

## Examples

### Bit shifts

```python
from omwkit.utility import shift_left, shift_right, toggle

shift_left(0x81, 1, 8, False)   # 0x02
shift_right(-128, 3, 8, True)   # -16 (sign is kept)
shift_right(-1, 8, 8, True)     # -1 (shift past the width)
shift_left(1, 64, 64, False)    # 0
toggle(True)                    # False
toggle(5)                       # 0
```

`bits` must be 8, 16, 32 or 64 and the shift count must not be negative;
otherwise `ValueError` is raised. `bits` defaults to 32 and `signed` to `True`.

### Levenshtein distance

```python
from omwkit.algorithm import levenshtein_distance

levenshtein_distance("kitten", "sitting")   # 3
levenshtein_distance([1, 2, 3], [1, 3])     # 1
```

### Versions

```python
from omwkit.version import MajMinVer, Semver

v = Semver("1.2.3-alpha.1+build.5")
v.major(), v.minor(), v.patch()   # (1, 2, 3)
v.pre_release()                   # "alpha.1"
v.pre_release_identifiers()       # ("alpha", "1")
v.build()                         # "build.5"
v.is_valid()                      # True
str(v)                            # "1.2.3-alpha.1+build.5"

Semver("1.0.0-alpha") < Semver("1.0.0")             # True
Semver(1, 0, 0, "rc.1") > Semver("1.0.0-beta.11")   # True

MajMinVer("2.7") < MajMinVer(3, 0)   # True
MajMinVer("x.y").is_valid()          # False
```

A string that cannot be parsed gives a version whose numeric parts are `-1`,
so `is_valid()` returns `False`. Build metadata is ignored when comparing.
Both classes can be changed in place with `set(...)`, which takes the same
arguments as the constructor.

### Package version

```python
from omwkit.info import version, VERSION_ID

version()    # Semver for 0.3.1-alpha
VERSION_ID   # 260117
```

### ANSI escape sequences

```python
from omwkit import ansiesc, manip
from omwkit.ansiesc import CsiType, Sgr

ansiesc.enable()                             # force escape sequences on
ansiesc.csi_seq(CsiType.CURSOR_UP, 3)        # "\x1b[3A"
ansiesc.sgr_seq(Sgr.BOLD, Sgr.FG_COLOR_RED)  # "\x1b[1;31m"

print(manip.style(Sgr.UNDERLINE) + "underlined" + manip.normal())
print(manip.font(2) + "alternative font" + manip.normal())
print(manip.fore_color(255, 128, 0) + "orange" + manip.normal())
print(manip.back_color(ansiesc.COL8BIT_BRIGHT_BLUE) + "blue background" + manip.default_colors())
```

`fore_color`, `back_color` and `underline_color` take either an 8-bit colour
index or red, green and blue values (each 0 to 255), given separately or as
one sequence.

The builder mode is a module-wide setting: `ansiesc.set_mode(...)` takes an
`ansiesc.Mode`, and `enable()`, `disable()`, `get_mode()` and `is_enabled()`
work on it. In `Mode.DISABLED` every builder returns an empty string. The
default mode is treated as disabled on Windows and enabled everywhere else.

## What it does not do

The escape sequence functions only build strings; they do not write to a
terminal, detect whether output goes to one, or switch a Windows console into
a mode that understands escape sequences. Printing the strings is up to the
caller.

## Running the tests

```
pip install -e .[test]
pytest
```