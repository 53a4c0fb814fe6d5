# wififrame

`wififrame` parses raw IEEE 802.11 frames into Python objects. It expects the
bytes of the 802.11 frame itself, starting with the two byte frame control
header, with any radiotap header already removed.

## What it does not do

- It does not capture packets. Reading frames from a wireless card in monitor
  mode, or from a capture file, has to be done with other tools; `wififrame`
  only turns the bytes of one frame into an object.
- It does not strip radiotap headers.
- It does not check the frame check sequence (FCS). Do that before parsing if
  your capture includes it.

## Supported frames

- Management: `Beacon`, `ProbeRequest`, `ProbeResponse`,
  `AssociationRequest`, `AssociationResponse`
- Control: `Rts`, `Cts`, `Ack`, `BlockAckRequest`, `BlockAck`
- Data: `Data`, `NullData`, `QosData`, `QosNull`

These classes live in `wififrame.frames` and are dataclasses. Any other
subtype makes `parse_frame` raise `UnhandledFrameSubtype`; the exception
carries the parsed `frame_control` header, so you can see which subtype it
was, and the remaining bytes as `data`.

## Installation

```
pip install wififrame
```

## Usage

```python
from wififrame.parser import parse_frame
from wififrame.frames import Cts

# A CTS frame: frame control, duration, receiver address
payload = bytes([
    196, 0,
    246, 14,
    0x02, 0x00, 0x00, 0x00, 0x00, 0x01,
])

frame = parse_frame(payload)
assert isinstance(frame, Cts)
print(frame.dest())   # 02:00:00:00:00:01
print(frame.src())    # None, CTS frames carry no sender
print(frame.frame_control.frame_subtype)  # Cts
```

Every frame answers `src()`, `dest()` and `bssid()`, each returning a
`MacAddress` or `None`. For management and data frames the answer comes from
the frame's `header` (`ManagementHeader` or `DataHeader` in
`wififrame.header`) and depends on the `to_ds` and `from_ds` flags of the
frame control header. Control frames return their `source` (or `None` for
`Cts` and `Ack`), their `destination`, and never a BSSID.

The frame control header (`wififrame.frame_control.FrameControl`) holds the
protocol version, the `FrameType` and `FrameSubType` (from
`wififrame.frame_types`) and the flag byte, with one method per flag:
`to_ds()`, `from_ds()`, `more_frag()`, `retry()`, `pwr_mgmt()`,
`more_data()`, `wep()` and `order()`.

### Management frames

Management frames carry a `station_info` (`wififrame.station_info.StationInfo`)
built from the tagged elements that follow the fixed fields:

- `ssid`, with NUL characters replaced by spaces
- `supported_rates`, in Mbit/s
- `transmitting_power`, `extended_capabilities`
- `ht_capabilities_info`, `ht_a_mpdu_parameters`, `ht_rx_mcs`
- `vht_capabilities_info`, `vht_rx_mcs`, `vht_tx_mcs`
- `tagged_parameters`, the element ids in the order received, with vendor
  specific elements shown together with their OUI and subtype
- `data`, a list of `(element_id, payload)` for every element without a field
  of its own

### Data frames

`Data` and `QosData` keep everything after the header as `data`. The header
reads a fourth address when both `to_ds` and `from_ds` are set, and two QoS
bytes for QoS subtypes.

### Block acknowledgments

`BlockAckRequest` and `BlockAck` report their `mode` as a `BlockAckMode`
(basic, compressed or multi-TID) and a `policy` flag. `BlockAck.acks` is a
`BasicBlockAckInfo` with a 128 byte bitmap in basic mode, and a
`CompressedBlockAckInfo` holding `(tid, sequence_control, bitmap)` tuples
otherwise.

### MAC addresses

```python
from wififrame.mac_address import MacAddress, parse_mac_address

address = parse_mac_address("ff:ff:ff:ff:ff:ff")
address.is_broadcast()    # True
address.is_real_device()  # False

str(MacAddress(bytes([0x02, 0, 0, 0, 0, 0x01])))  # '02:00:00:00:00:01'
```

A malformed address string raises `MacParseError`, a `ValueError` whose
`kind` is `"invalid_length"` or `"invalid_digit"`.

### Errors

Parsing errors derive from `wififrame.errors.WifiError`:

- `ParseFailure`: the bytes could not be parsed, for example because the
  input ended before the frame did. The unread bytes are kept as `data`.
- `Incomplete`: a bit field ran past the end of its input.
- `UnhandledFrameSubtype`: the frame's subtype is not supported.
- `UnhandledProtocol`: the frame uses a feature that is not supported,
  such as the reserved block-ack mode.

```python
from wififrame.errors import WifiError
from wififrame.parser import parse_frame

try:
    frame = parse_frame(payload)
except WifiError as error:
    print(f"could not parse frame: {error}")
```

## Running the tests

```
pip install -e ".[test]"
pytest
```