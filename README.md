# tofkit

Building blocks for software that works with time-of-flight depth cameras
built around the ADSD3500 depth processor: status codes, readable messages
for chip and imager error codes, dataclasses describing cameras, frames and
sensor modes, a codec for the packed per-frame metadata block, and helpers
for reading `key=value` parameter lists.

The package has no dependencies outside the standard library.

## Installation

```
pip install tofkit
```

## What is inside

- `tofkit.status`: the `Status` and `Adsd3500Status` enumerations, whose
  `str()` gives names such as `Status::BUSY` and
  `Adsd3500Status::INVALID_MODE`, and the `TofError` exception. A `TofError`
  carries a failing `Status` in its `status` attribute and an optional
  `message`; it refuses `Status.OK` with `ValueError`.
- `tofkit.adsd_errors`: the integer enumerations `Adsd3500StatusCode` (codes
  from the "Get Status" command) and `Adsd3100ErrorCode` (codes from the
  "Get Imager Error Code" command), and `ADSDErrors`, whose
  `get_string_adsd3500`, `get_string_adsd3100` and `get_string_adsd3030`
  methods return a description of a code. Codes are taken as 16-bit values;
  an unknown code gives an empty string, and no ADSD3030 codes are defined,
  so `get_string_adsd3030` always returns an empty string.
- `tofkit.connections`: `ConnectionType` (`ON_TARGET`, `USB`, `NETWORK`,
  `OFFLINE`).
- `tofkit.definitions`: dataclasses `CameraDetails`, `FrameDetails`,
  `FrameDataDetails`, `IntrinsicParameters`, `DepthSensorModeDetails`,
  `SensorDetails`, `DriverConfiguration` and `Point3I`, the `ImagerType`
  enumeration, and `Metadata`, which reads (`Metadata.unpack`) and writes
  (`Metadata.pack`) the packed little-endian metadata block of
  `Metadata.SIZE` bytes. `pack` raises `ValueError` if a field does not fit
  its binary width; `unpack` raises `ValueError` if given too few bytes.
- `tofkit.utils`: `split_into_tokens(s, delimiter)`, which splits on a
  single character and keeps empty tokens.
- `tofkit.ini`: `parse_key_value_string(text)` and
  `read_key_value_file(path)`, which read newline-separated `key=value`
  lines into a dict sorted by key.

## Examples

Look up an error message:

```python
from tofkit.adsd_errors import ADSDErrors

errors = ADSDErrors()
print(errors.get_string_adsd3500(0x0005))  # The ADSD3500 firmware CRC check failed.
print(errors.get_string_adsd3100(0x0020))  # Laser driver overheat.
```

Decode and re-encode the metadata block at the start of a frame:

```python
from tofkit.definitions import Metadata

meta = Metadata.unpack(raw_bytes)
print(meta.width, meta.height, meta.frame_number)
assert Metadata.unpack(meta.pack()) == meta
```

Read depth-compute parameters:

```python
from tofkit.ini import parse_key_value_string, read_key_value_file
from tofkit.status import Status, TofError

params = parse_key_value_string("confThresh=25\nabThreshMin=3\n")
# {'abThreshMin': '3', 'confThresh': '25'}

try:
    params = read_key_value_file("depth_params.ini")
except TofError as err:
    assert err.status is Status.UNREACHABLE
```

Lines without `=` and keys with an empty value are skipped and reported
through the `tofkit.ini` logger at warning level; when a key appears more
than once, its first value is kept. A file that cannot be opened raises
`TofError` with `Status.UNREACHABLE`.

## What this package does not do

It does not talk to cameras. There are no sensor drivers, no USB or network
backends, no camera discovery and no frame capture here, and no command-line
tool: the package provides the types, codes and parsing helpers that such
software would use.

## Running the tests

```
pip install -e ".[test]"
pytest
```