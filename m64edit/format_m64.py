from typing import *
import os

from m64edit.movie import Movie, from_bytes, to_bytes
from m64edit.tas_metadata import TasMetadata
from m64edit.util import *


def read_bytes(filename: str) -> bytes:
  with open(filename, 'rb') as f:
    return f.read()


def write_bytes(filename: str, data: bytes) -> None:
  with open(filename, 'wb') as f:
    f.write(data)


def load_m64(filename: str, strict_ascii: Optional[bool] = None) -> Movie:
  movie = from_bytes(read_bytes(filename), strict_ascii)
  log.info(
    'Loaded', filename + ':',
    movie.frame_count, 'frames for controllers', movie.active_controllers,
  )
  if not movie.header.has_valid_signature:
    log.warn('Unexpected signature in', filename + ':', movie.header.signature.hex())
  return movie


def save_m64(filename: str, movie: Movie, strict_ascii: Optional[bool] = None) -> None:
  data = to_bytes(movie, strict_ascii)
  write_bytes(filename, data)
  log.info('Saved', filename + ':', len(data), 'bytes')


def load_metadata(filename: str) -> TasMetadata:
  movie = from_bytes(read_bytes(filename))
  return TasMetadata.from_movie(movie, os.path.split(filename)[1])
