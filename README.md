# u2fauth

Building blocks for talking to U2F (FIDO) security keys over USB HID:
protocol constants, a HID report descriptor parser, access to Linux hidraw
and NetBSD uhid device nodes, and a few helpers for handling requests and
responses. It has no dependencies beyond the standard library.

## Modules

- `u2fauth.consts` – protocol constants: report and header sizes,
  `CID_BROADCAST`, the U2FHID command bytes (`U2FHID_PING`, `U2FHID_MSG`,
  ...), the FIDO usage page, low-level error codes and the ISO 7816-4
  status words (`SW_NO_ERROR`, ...).
- `u2fauth.types` – `RegisterFlags`, `SignFlags` and
  `AuthenticatorTransports` (all `IntFlag`), the frozen dataclasses
  `KeyHandle`, `DeviceInfo` and `StatusUpdate`, and the `StatusKind` enum.
- `u2fauth.hidproto` – report descriptor parsing:
  - `iter_report_items(descriptor)` yields `ReportItem(kind, data)` for the
    recognised short items (`ItemKind.USAGE_PAGE`, `USAGE`, `INPUT`,
    `OUTPUT`, `REPORT_COUNT`); long items and unknown tags are skipped and a
    truncated item ends iteration.
  - `has_fido_usage(descriptor)` tells whether the first usage page / usage
    pair is the FIDO U2FHID one.
  - `read_hid_rpt_sizes(descriptor)` returns `(input, output)` report sizes
    and raises `ValueError` for malformed descriptors or sizes outside
    8..64.
- `u2fauth.callback` – `StateCallback`, a callback that fires at most once
  across all of its clones. `call(rv)` returns `False` if a result was
  already delivered, `wait(timeout)` blocks until one was, and
  `add_uncloneable_observer(observer)` attaches an observer that runs only
  when that particular instance delivers the result.
- `u2fauth.responses` – `key_handle_from_register_response(data)` extracts
  the key handle from a raw registration response (raising `ValueError` if
  it is malformed) and `challenge_digest(data)` returns the SHA-256 digest of
  bytes or UTF-8 text.
- `u2fauth.runloop` – `RunLoop(target, timeout=None)` runs
  `target(alive)` on a daemon thread; `alive()` turns false after
  `cancel()` or once the timeout (in milliseconds) has passed. `cancel()`
  joins the thread unless called from it.
- `u2fauth.linux.ioctl` – `hid_ioctls(machine=None, big_endian=None)`
  returns the `HidIoctls` request numbers for the report descriptor ioctls,
  for the running machine by default; unsupported architectures raise
  `ValueError`.
- `u2fauth.linux.hidraw` – `read_report_descriptor(fd)`,
  `is_u2f_device(fd)` and `read_hid_rpt_sizes_or_defaults(fd)` (which falls
  back to 64/64).
- `u2fauth.linux.device` – `Device(path)` opens a hidraw node, reads its
  report sizes and offers `read(size)`, `write(data)`, `is_u2f()` and
  `close()`; it is a context manager and compares equal by path.
- `u2fauth.netbsd.fd` – `Fd`, an owned file descriptor (`Fd.open(path,
  flags)`, `close()`, context manager) that compares equal to another `Fd`
  open on the same file.
- `u2fauth.netbsd.uhid` – `read_report_descriptor(fd)`,
  `is_u2f_device(fd)` and `hid_set_raw(fd, raw)`.
- `u2fauth.netbsd.device` – `Device(fd)` over a uhid node. `write(data)`
  drops the leading report number byte, `ping()` sends a broadcast ping and
  raises `OSError` if no reply arrives within ten tries, and `is_u2f()`
  checks the descriptor, switches to raw mode and pings.
- `u2fauth.netbsd.monitor` – `Monitor(new_device_cb, *, path_pattern,
  max_devices, poll_interval)` polls `/dev/uhid0` onwards while
  `run(alive)` is going, serving each opened node with
  `new_device_cb(fd, alive)` on its own `RunLoop`; `tracked_paths` lists the
  nodes being served.

## Installing

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Example

```python
from u2fauth.callback import StateCallback
from u2fauth.hidproto import has_fido_usage, read_hid_rpt_sizes
from u2fauth.responses import challenge_digest, key_handle_from_register_response

print(has_fido_usage(bytes([0x06, 0xD0, 0xF1, 0x09, 0x01])))  # True

sizes = bytes([0x95, 0x40, 0x81, 0x02, 0x95, 0x40, 0x91, 0x02])
print(read_hid_rpt_sizes(sizes))  # (64, 64)

response = bytes([0x05]) + bytes(65) + bytes([3]) + b"\x01\x02\x03" + b"attestation"
print(key_handle_from_register_response(response))  # b'\x01\x02\x03'

application = challenge_digest("https://app.example.com")

results = []
callback = StateCallback(results.append)
twin = callback.clone()
callback.call("first")
twin.call("second")   # returns False: already delivered
callback.wait(1.0)
print(results)        # ['first']
```

## What it does not do

- It does not speak the U2FHID message protocol: there is no channel
  initialisation, message framing or register/sign exchange with a key.
  Apart from the broadcast ping used by the NetBSD `Device.is_u2f()`, reading
  and writing reports is left to the caller.
- There is no service that sends requests to several devices or transports
  and cancels the rest, and no error type hierarchy beyond the standard
  `OSError` and `ValueError` raised by the functions above.
- Linux device discovery (watching for hidraw nodes appearing) is not
  provided; open a known node with `u2fauth.linux.device.Device`.
- There is no command-line program.