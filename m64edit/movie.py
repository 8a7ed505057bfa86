from typing import *
from dataclasses import dataclass, field, replace

from m64edit.controllers import active_controllers, controller_flags_for
from m64edit.header import Header, decode_header, encode_header, default_header
from m64edit.inputs import Input, decode_samples, encode_samples
from m64edit.layout import HEADER_SIZE, MAX_CONTROLLERS, HEADER_FIELDS_BY_NAME


def _empty_inputs() -> Tuple[List[Input], ...]:
  return tuple([] for _ in range(MAX_CONTROLLERS))


@dataclass(frozen=True)
class Movie:
  header: Header = field(default_factory=Header)
  inputs: Tuple[List[Input], ...] = field(default_factory=_empty_inputs)

  # Input lists stay editable in place, so a movie is not hashable
  __hash__ = None # type: ignore

  def __post_init__(self) -> None:
    if len(self.inputs) != MAX_CONTROLLERS:
      raise ValueError(f'Expected {MAX_CONTROLLERS} input sequences, got {len(self.inputs)}')

  def __getattr__(self, name: str) -> Any:
    # Header fields are readable directly on the movie
    if name in HEADER_FIELDS_BY_NAME:
      return getattr(self.header, name)
    raise AttributeError(name)

  @property
  def active_controllers(self) -> List[int]:
    return active_controllers(self.header.controller_flags)

  @property
  def frame_count(self) -> int:
    return max((len(inputs) for inputs in self.inputs), default=0)

  def with_header(self, **changes: Any) -> 'Movie':
    return replace(self, header=replace(self.header, **changes))

  def with_inputs(self, inputs: Sequence[Sequence[Input]]) -> 'Movie':
    """Replace the input sequences and update num_samples to match."""
    inputs = tuple(list(port_inputs) for port_inputs in inputs)
    num_samples = sum(len(port_inputs) for port_inputs in inputs)
    return Movie(replace(self.header, num_samples=num_samples), inputs)


def from_bytes(buffer: bytes, strict_ascii: Optional[bool] = None) -> Movie:
  header = decode_header(buffer, strict_ascii)
  controllers = active_controllers(header.controller_flags)
  inputs = decode_samples(buffer[HEADER_SIZE:], controllers)
  return Movie(header, inputs)


def to_bytes(movie: Movie, strict_ascii: Optional[bool] = None) -> bytes:
  controllers = active_controllers(movie.header.controller_flags)
  sample_bytes = encode_samples(movie.inputs, controllers)
  header_bytes = encode_header(movie.header, strict_ascii)
  return header_bytes + sample_bytes


def new_movie(game_version: str = 'us', controllers: Sequence[int] = (0,)) -> Movie:
  header = replace(
    default_header(game_version),
    controller_count=len(controllers),
    controller_flags=controller_flags_for(controllers),
  )
  return Movie(header, _empty_inputs())


__all__ = [
  'Movie',
  'from_bytes',
  'to_bytes',
  'new_movie',
]
