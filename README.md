# zenkit

A small library of building blocks for media data and TCP networking.

- `zenkit.audio`: `Audio`, an in-memory block of interleaved PCM samples,
  and the abstract `AudioDecoder` and `AudioEncoder` interfaces.
- `zenkit.audio_raw`: `AudioRawDecoder`, `AudioRawEncoder` and
  `AudioRawCoder` for a simple raw container (16-byte big-endian header with
  the signature `jaiw`, followed by the sample bytes).
- `zenkit.audio_wav`: `AudioWavDecoder`, `AudioWavEncoder` and
  `AudioWavCoder` for PCM WAV (RIFF) data.
- `zenkit.color`: the `Pixel` and `NamedColor` enums, the colour types
  `Color3b`, `Color4b` and `Color4f`, and `channel_lerp` / `color4f_lerp`.
- `zenkit.image`: `Image`, a pixel buffer in grey, grey+alpha, RGB or RGBA,
  with fills and conversions between formats, and the abstract
  `ImageDecoder` and `ImageEncoder` interfaces.
- `zenkit.image_raw`: `ImageRawDecoder`, `ImageRawEncoder` and
  `ImageRawCoder` for a raw bitmap container (16-byte big-endian header with
  the signature `jaii`, followed by the pixel bytes).
- `zenkit.atom`: lock-guarded containers `AtomQueue`, `AtomConditionQueue`
  (bounded, blocking), `AtomMap` and `AtomSet`.
- `zenkit.ip`: socket enums (`Family`, `SockType`, `IPProto`, `Shut`,
  `MsgType`), `Config`, the `Address` endpoint type, `make_address` and
  `resolve_address`.
- `zenkit.link`: `Link` (one socket with its closed-direction
  `LinkStatus`), `TCPConnector` and `TCPListener`.
- `zenkit.poll`: `Poll`, a readability watcher built on `selectors`, and
  `PollEvent`.
- `zenkit.utils`: `Utils` and `get_utils()` for reading resources and
  reading and writing documents relative to the working directory.
- `zenkit.errors`: `DecodeError`, raised by every decoder on malformed or
  truncated input. It is a subclass of `ValueError`.

There are no third-party dependencies.

## Installation

```
pip install .
```

## Audio

`Audio.sample_size` is the number of bytes in one frame across all channels.
The buffer `Audio.data` is a `bytearray` of `sample_count * sample_size`
bytes.

```python
from zenkit.audio import Audio
from zenkit.audio_wav import AudioWavCoder
from zenkit.audio_raw import AudioRawCoder

audio = Audio.create(2, 4, 44100, 1000)   # stereo, 16-bit frames, silent
wav = AudioWavCoder()
data = wav.encode(audio)
decoded = wav.decode(data)
assert decoded.sample_count == 1000 and decoded.frequency == 44100

raw = AudioRawCoder()
assert raw.decode(raw.encode(audio)).data == audio.data
```

The WAV decoder accepts 16- and 18-byte `fmt ` chunks. It skips a single
chunk (for example `fact`) placed before `data`. It rejects anything that is
not PCM (format tag 1).

`Audio.create_sine` only allocates a silent buffer of the requested size. It
does not write a waveform.

## Colours and images

```python
from zenkit.color import Pixel, Color4b, Color4f, NamedColor, color4f_lerp
from zenkit.image import Image
from zenkit.image_raw import ImageRawCoder

red = Color4b.from_named(NamedColor.RED)
assert red.to_rgba() == 0xFF0000FF

half = color4f_lerp(Color4f(), Color4f.from_named(NamedColor.WHITE), 0.5)

img = Image.create(Pixel.RGBA, 4, 4)
img.fill_rgba(Color4b.from_rgba(0xFF8000FF))

grey = Image.create(Pixel.GA, 4, 4)
grey.copy(Pixel.RGBA, img.data)      # green channel and alpha are copied

coder = ImageRawCoder()
again = coder.decode(coder.encode(img))
assert again.data == img.data
```

The conversion methods are `Image.copy`, `copy_color` and `copy_alpha`.
They return `False` when the two formats cannot be combined, and raise
`ValueError` when the source data is shorter than the image needs.
`Image.create_with_data` returns `None` when it is given `None` as data.

## Thread-safe containers

```python
from zenkit.atom import AtomConditionQueue, AtomMap

queue = AtomConditionQueue(max_size=8)
queue.push("job")
assert queue.pop() == "job"

table = AtomMap()
table.insert("a", 1)
assert table.find("a", print)        # calls print(1) under the lock
```

`AtomConditionQueue.push` blocks while the queue is full. `pop` blocks while
it is empty. `pop_all` never blocks.

## Networking

```python
from zenkit.ip import make_address
from zenkit.link import TCPConnector, TCPListener
from zenkit.poll import Poll

listener = TCPListener()
listener.bind(make_address(127, 0, 0, 1, 0))
listener.listen(5)
address = listener.link.local_address()

client = TCPConnector().connect(address)
server = listener.accept()
client.send(b"hello")

with Poll() as poll:
    poll.add(server, "server")
    poll.wait(lambda data, event: print(data, event), timeout=1000)

assert server.recv(5) == b"hello"
```

When an operation fails, these classes report it through their return
values. A failed connect or accept returns `None`, and a failed bind,
listen, shutdown or option call returns `False`. Errors are logged through
the `logging` module.

`Link.recv` returns empty bytes when no data is available. When the peer
closes the connection or a hard error occurs, it sets
`LinkStatus.RECV_CLOSED` on `Link.status`. `Poll.wait` takes its timeout in
milliseconds: 0 returns at once and a negative value waits indefinitely. It
reports at most 32 events per call.

## Utilities

`get_utils()` returns one shared `Utils`. Documents are resolved with
`get_document_path`: absolute paths are used as they are, and other paths
are placed under `./`. `load_resource` and `load_document` return empty bytes
when the file cannot be read. `save_document` returns whether the write
succeeded. `load_url` runs the external `curl` program and saves into the
document `_utils_load_url.temp~`, then returns that file's contents.
`get_app_id`, `get_device_id` and `get_system_language` return empty strings.

## What this package does not do

- It does not play audio. There is no audio output or mixer, only buffers
  and codecs.
- It reads and writes no image file formats other than the raw container
  above (no PNG, JPEG or similar).
- It provides no command-line program.

## Running the tests

```
pip install .[test]
pytest
```