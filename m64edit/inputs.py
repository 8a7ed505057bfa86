from typing import *
from dataclasses import dataclass
import struct

from m64edit.errors import *
from m64edit.input_buttons import INPUT_BUTTON_FLAGS, INPUT_BUTTON_LABELS
from m64edit.layout import SAMPLE_SIZE, MAX_CONTROLLERS


# Little-endian button word, then signed stick x and y
SAMPLE_FORMAT = '<Hbb'


@dataclass(frozen=True)
class Input:
  d_right: bool = False
  d_left: bool = False
  d_down: bool = False
  d_up: bool = False
  start: bool = False
  z: bool = False
  b: bool = False
  a: bool = False
  c_right: bool = False
  c_left: bool = False
  c_down: bool = False
  c_up: bool = False
  r: bool = False
  l: bool = False
  x: int = 0
  y: int = 0

  @property
  def buttons(self) -> int:
    buttons = 0
    for button, flag in INPUT_BUTTON_FLAGS.items():
      if getattr(self, button):
        buttons |= flag
    return buttons

  @staticmethod
  def from_buttons(buttons: int, x: int = 0, y: int = 0) -> 'Input':
    flags = {button: bool(buttons & flag) for button, flag in INPUT_BUTTON_FLAGS.items()}
    return Input(x=x, y=y, **flags)

  def labels(self) -> List[str]:
    return [label for button, label in INPUT_BUTTON_LABELS.items() if getattr(self, button)]

  def __str__(self) -> str:
    return ' '.join([str(self.x), str(self.y)] + self.labels())


def decode_input(record: bytes) -> Input:
  if len(record) != SAMPLE_SIZE:
    raise TruncatedSampleData(len(record), SAMPLE_SIZE)
  buttons, x, y = struct.unpack(SAMPLE_FORMAT, record)
  return Input.from_buttons(buttons, x, y)


def encode_input(input: Input) -> bytes:
  for axis in ['x', 'y']:
    value = getattr(input, axis)
    if not isinstance(value, int) or not -0x80 <= value <= 0x7F:
      raise FieldOutOfRange(axis, value)
  return struct.pack(SAMPLE_FORMAT, input.buttons, input.x, input.y)


def decode_samples(
  sample_bytes: bytes,
  controllers: Sequence[int],
) -> Tuple[List[Input], ...]:
  """
  Split the interleaved sample stream into one input list per controller
  port.

  Records cycle through the active controllers in ascending port order, so
  record i belongs to controllers[i % len(controllers)]. Inactive ports get
  empty lists.
  """
  if len(controllers) == 0:
    raise NoActiveControllers(0)
  if len(sample_bytes) % SAMPLE_SIZE != 0:
    raise TruncatedSampleData(len(sample_bytes), SAMPLE_SIZE)
  cycle_size = SAMPLE_SIZE * len(controllers)
  if len(sample_bytes) % cycle_size != 0:
    raise TruncatedSampleData(len(sample_bytes), cycle_size, incomplete_rotation=True)

  inputs: Tuple[List[Input], ...] = tuple([] for _ in range(MAX_CONTROLLERS))
  for i, (buttons, x, y) in enumerate(struct.iter_unpack(SAMPLE_FORMAT, sample_bytes)):
    port = controllers[i % len(controllers)]
    inputs[port].append(Input.from_buttons(buttons, x, y))
  return inputs


def encode_samples(
  inputs: Sequence[Sequence[Input]],
  controllers: Sequence[int],
) -> bytes:
  if len(controllers) == 0:
    raise NoActiveControllers(0)
  if len(inputs) != MAX_CONTROLLERS:
    raise ValueError(f'Expected {MAX_CONTROLLERS} input sequences, got {len(inputs)}')

  lengths = {port: len(inputs[port]) for port in controllers}
  for port in range(MAX_CONTROLLERS):
    if port not in lengths and len(inputs[port]) != 0:
      lengths[port] = len(inputs[port])
      raise MismatchedControllerLengths(lengths)
  if len(set(lengths.values())) > 1:
    raise MismatchedControllerLengths(lengths)

  frames = lengths[controllers[0]]
  buffer = bytearray()
  for frame in range(frames):
    for port in controllers:
      buffer += encode_input(inputs[port][frame])
  return bytes(buffer)


__all__ = [
  'SAMPLE_FORMAT',
  'Input',
  'decode_input',
  'encode_input',
  'decode_samples',
  'encode_samples',
]
