"""Request flags, key handles, device information and status updates."""

from dataclasses import dataclass, field
from enum import Enum, IntFlag


class RegisterFlags(IntFlag):
    REQUIRE_RESIDENT_KEY = 1
    REQUIRE_USER_VERIFICATION = 2
    REQUIRE_PLATFORM_ATTACHMENT = 4


class SignFlags(IntFlag):
    REQUIRE_USER_VERIFICATION = 1


class AuthenticatorTransports(IntFlag):
    USB = 1
    NFC = 2
    BLE = 4


AppId = bytes


@dataclass(frozen=True)
class KeyHandle:
    """A credential identifier and the transports it may be used over."""

    credential: bytes
    transports: AuthenticatorTransports = field(
        default_factory=lambda: AuthenticatorTransports(0)
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "credential", bytes(self.credential))
        object.__setattr__(
            self, "transports", AuthenticatorTransports(self.transports)
        )


@dataclass(frozen=True)
class DeviceInfo:
    """Identification of a U2F device."""

    vendor_name: bytes
    device_name: bytes
    version_interface: int
    version_major: int
    version_minor: int
    version_build: int
    cap_flags: int


RegisterResult = tuple[bytes, DeviceInfo]
SignResult = tuple[AppId, bytes, bytes, DeviceInfo]


class StatusKind(Enum):
    DEVICE_AVAILABLE = "device_available"
    DEVICE_UNAVAILABLE = "device_unavailable"
    SUCCESS = "success"


@dataclass(frozen=True)
class StatusUpdate:
    """A progress notification about a device."""

    kind: StatusKind
    dev_info: DeviceInfo