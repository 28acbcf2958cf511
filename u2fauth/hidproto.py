"""Parsing of HID report descriptors for raw HID platforms."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .consts import FIDO_USAGE_PAGE, FIDO_USAGE_U2FHID, INIT_HEADER_SIZE, MAX_HID_RPT_SIZE

# The 4 MSBs (the tag) are set when it's a long item.
_MASK_LONG_ITEM_TAG = 0b1111_0000
# The 2 LSBs denote the size of a short item.
_MASK_SHORT_ITEM_SIZE = 0b0000_0011
# The 6 MSBs denote the tag (4) and type (2).
_MASK_ITEM_TAGTYPE = 0b1111_1100
_TAGTYPE_USAGE = 0b0000_1000
_TAGTYPE_USAGE_PAGE = 0b0000_0100
_TAGTYPE_INPUT = 0b1000_0000
_TAGTYPE_OUTPUT = 0b1001_0000
_TAGTYPE_REPORT_COUNT = 0b1001_0100


class ItemKind(Enum):
    USAGE_PAGE = "usage_page"
    USAGE = "usage"
    INPUT = "input"
    OUTPUT = "output"
    REPORT_COUNT = "report_count"


_KINDS = {
    _TAGTYPE_USAGE_PAGE: ItemKind.USAGE_PAGE,
    _TAGTYPE_USAGE: ItemKind.USAGE,
    _TAGTYPE_INPUT: ItemKind.INPUT,
    _TAGTYPE_OUTPUT: ItemKind.OUTPUT,
    _TAGTYPE_REPORT_COUNT: ItemKind.REPORT_COUNT,
}


@dataclass(frozen=True)
class ReportItem:
    """A recognised short item of a report descriptor."""

    kind: ItemKind
    data: int = 0


def _hid_item(buf: bytes) -> tuple[int, int, bytes] | None:
    """Return (tag_type, key_length, data) of the item at the start of buf."""
    if buf[0] & _MASK_LONG_ITEM_TAG == _MASK_LONG_ITEM_TAG:
        if len(buf) < 3:
            return None
        if buf[1] > len(buf) - 3:
            return None
        return buf[2], 3, buf[3:]

    size = buf[0] & _MASK_SHORT_ITEM_SIZE
    if size == 3:
        size = 4
    if size > len(buf) - 1:
        return None
    return buf[0] & _MASK_ITEM_TAGTYPE, 1, buf[1 : 1 + size]


def iter_report_items(descriptor: bytes) -> Iterator[ReportItem]:
    """Yield the recognised short items of a report descriptor.

    Long items and unknown tags are skipped; a truncated item ends iteration.
    """
    buf = bytes(descriptor)
    pos = 0
    while pos < len(buf):
        item = _hid_item(buf[pos:])
        if item is None:
            return
        tag_type, key_len, data = item
        pos += key_len + len(data)
        if key_len > 1:
            continue
        kind = _KINDS.get(tag_type)
        if kind is None:
            continue
        if kind in (ItemKind.INPUT, ItemKind.OUTPUT):
            yield ReportItem(kind)
        else:
            yield ReportItem(kind, int.from_bytes(data, "little"))


def has_fido_usage(descriptor: bytes) -> bool:
    """Whether the first usage page/usage pair denotes a FIDO U2F device."""
    usage_page = None
    usage = None
    for item in iter_report_items(descriptor):
        if item.kind is ItemKind.USAGE_PAGE:
            usage_page = item.data
        elif item.kind is ItemKind.USAGE:
            usage = item.data
        if usage_page is not None and usage is not None:
            return usage_page == FIDO_USAGE_PAGE and usage == FIDO_USAGE_U2FHID
    return False


def read_hid_rpt_sizes(descriptor: bytes) -> tuple[int, int]:
    """Return the (input, output) report sizes declared by a descriptor.

    Raises ValueError if the descriptor is malformed or the sizes are out of range.
    """
    in_count = None
    out_count = None
    last_count = None

    for item in iter_report_items(descriptor):
        if item.kind is ItemKind.REPORT_COUNT:
            if last_count is not None:
                raise ValueError("Duplicate HID_ReportCount")
            last_count = item.data
        elif item.kind is ItemKind.INPUT:
            if last_count is None:
                raise ValueError("HID_Input should be preceded by HID_ReportCount")
            if in_count is not None:
                raise ValueError("Duplicate HID_ReportCount")
            in_count, last_count = last_count, None
        elif item.kind is ItemKind.OUTPUT:
            if last_count is None:
                raise ValueError("HID_Output should be preceded by HID_ReportCount")
            if out_count is not None:
                raise ValueError("Duplicate HID_ReportCount")
            out_count, last_count = last_count, None

    if in_count is None or out_count is None:
        raise ValueError("Failed to extract report sizes from report descriptor")
    if (
        INIT_HEADER_SIZE < in_count <= MAX_HID_RPT_SIZE
        and INIT_HEADER_SIZE < out_count <= MAX_HID_RPT_SIZE
    ):
        return in_count, out_count
    raise ValueError("Report size is too small or too large")