"""Protocol constants for U2F over USB HID."""

MAX_HID_RPT_SIZE = 64
U2FAPDUHEADER_SIZE = 7
CID_BROADCAST = b"\xff\xff\xff\xff"
TYPE_MASK = 0x80
TYPE_INIT = 0x80
TYPE_CONT = 0x80

# Size of header in U2F init USB HID packets.
INIT_HEADER_SIZE = 7
# Size of header in U2F continuation USB HID packets.
CONT_HEADER_SIZE = 5

PARAMETER_SIZE = 32

FIDO_USAGE_PAGE = 0xF1D0  # FIDO alliance HID usage page
FIDO_USAGE_U2FHID = 0x01  # U2FHID usage for top-level collection
FIDO_USAGE_DATA_IN = 0x20  # Raw IN data report
FIDO_USAGE_DATA_OUT = 0x21  # Raw OUT data report

U2FHID_IF_VERSION = 2  # Current interface implementation version
U2FHID_FRAME_TIMEOUT = 500  # Default frame timeout in ms
U2FHID_TRANS_TIMEOUT = 3000  # Default message timeout in ms

# U2FHID native commands
U2FHID_PING = TYPE_INIT | 0x01
U2FHID_MSG = TYPE_INIT | 0x03
U2FHID_LOCK = TYPE_INIT | 0x04
U2FHID_INIT = TYPE_INIT | 0x06
U2FHID_WINK = TYPE_INIT | 0x08
U2FHID_ERROR = TYPE_INIT | 0x3F

# U2FHID_MSG commands
U2F_VENDOR_FIRST = TYPE_INIT | 0x40
U2F_VENDOR_LAST = TYPE_INIT | 0x7F
U2F_REGISTER = 0x01
U2F_AUTHENTICATE = 0x02
U2F_VERSION = 0x03

YKPIV_INS_GET_VERSION = 0xFD  # Get firmware version, vendor extension

# U2F_REGISTER command defines
U2F_REGISTER_ID = 0x05
U2F_REGISTER_HASH_ID = 0x00

# U2F_AUTHENTICATE command defines
U2F_REQUEST_USER_PRESENCE = 0x03
U2F_CHECK_IS_REGISTERED = 0x07

# U2FHID_INIT command defines
INIT_NONCE_SIZE = 8
CAPFLAG_WINK = 0x01
CAPFLAG_LOCK = 0x02

# Low-level error codes.
ERR_NONE = 0x00
ERR_INVALID_CMD = 0x01
ERR_INVALID_PAR = 0x02
ERR_INVALID_LEN = 0x03
ERR_INVALID_SEQ = 0x04
ERR_MSG_TIMEOUT = 0x05
ERR_CHANNEL_BUSY = 0x06
ERR_LOCK_REQUIRED = 0x0A
ERR_INVALID_CID = 0x0B
ERR_OTHER = 0x7F

# ISO 7816-4 response status words.
SW_NO_ERROR = b"\x90\x00"
SW_CONDITIONS_NOT_SATISFIED = b"\x69\x85"
SW_WRONG_DATA = b"\x6a\x80"
SW_WRONG_LENGTH = b"\x67\x00"