"""Library version information."""

from __future__ import annotations

from .version import Semver

# Unique version ID, always greater than the ID of the previous version.
VERSION_ID = 260117

VERSION_MAJ = 0
VERSION_MIN = 3
VERSION_PAT = 1
VERSION_PRSTR = "alpha"

VERSION_ID_0_2_0 = 1
VERSION_ID_0_2_1_ALPHA = 2
VERSION_ID_0_2_1_ALPHA_1 = 3
VERSION_ID_0_2_1_ALPHA_2 = 4
VERSION_ID_0_2_1_BETA = 5
VERSION_ID_0_2_1 = 6
# from here on the format is YYMMnn
VERSION_ID_0_3_0 = 251230


def version() -> Semver:
    """Return the library version."""
    return Semver(VERSION_MAJ, VERSION_MIN, VERSION_PAT, VERSION_PRSTR)