"""Request numbers of the hidraw report descriptor ioctls per architecture."""

import platform
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class HidIoctls:
    """The HIDIOCGRDESCSIZE and HIDIOCGRDESC request numbers."""

    hidiocgrdescsize: int
    hidiocgrdesc: int


_GENERIC = HidIoctls(hidiocgrdescsize=2147764225, hidiocgrdesc=2416199682)
_MIPS_PPC = HidIoctls(hidiocgrdescsize=1074022401, hidiocgrdesc=1342457858)

# (architecture, big endian) -> request numbers
_TABLE: dict[tuple[str, bool], HidIoctls] = {
    ("x86", False): _GENERIC,
    ("x86_64", False): _GENERIC,
    ("mips", True): _MIPS_PPC,
    ("mips", False): _MIPS_PPC,
    ("mips64", False): _MIPS_PPC,
    ("powerpc", False): _MIPS_PPC,
    ("powerpc", True): _MIPS_PPC,
    ("powerpc64", False): _MIPS_PPC,
    ("powerpc64", True): _MIPS_PPC,
    ("arm", False): _GENERIC,
    ("aarch64", False): _GENERIC,
    ("s390x", True): _GENERIC,
    ("riscv64", False): _GENERIC,
}

_ALIASES = {
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "x86": "x86",
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "mips": "mips",
    "mipsel": "mips",
    "mips64": "mips64",
    "mips64el": "mips64",
    "ppc": "powerpc",
    "ppcle": "powerpc",
    "powerpc": "powerpc",
    "ppc64": "powerpc64",
    "ppc64le": "powerpc64",
    "powerpc64": "powerpc64",
    "powerpc64le": "powerpc64",
    "aarch64": "aarch64",
    "arm64": "aarch64",
    "s390x": "s390x",
    "riscv64": "riscv64",
}


def _normalise(machine: str) -> str:
    name = machine.strip().lower()
    if name in _ALIASES:
        return _ALIASES[name]
    if name.startswith("arm"):
        return "arm"
    return name


def hid_ioctls(machine: str | None = None, big_endian: bool | None = None) -> HidIoctls:
    """Request numbers for the given machine name and byte order.

    Defaults to the running interpreter's platform. Raises ValueError for an
    architecture that is not supported.
    """
    if machine is None:
        machine = platform.machine()
    if big_endian is None:
        big_endian = sys.byteorder == "big"
    key = (_normalise(machine), bool(big_endian))
    try:
        return _TABLE[key]
    except KeyError:
        raise ValueError(f"architecture not supported: {machine}") from None