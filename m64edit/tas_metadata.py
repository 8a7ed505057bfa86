from typing import *

from m64edit.header import game_version
from m64edit.movie import Movie


class TasMetadata:
  def __init__(
    self,
    game_version: Optional[str],
    title: str,
    authors: str,
    description: str,
    rerecords: Optional[int] = None,
  ) -> None:
    self.game_version = game_version
    self.title = title
    self.authors = authors
    self.description = description
    self.rerecords = rerecords

  @staticmethod
  def from_movie(movie: Movie, title: str) -> 'TasMetadata':
    return TasMetadata(
      game_version(movie.header),
      title,
      movie.header.text('author'),
      movie.header.text('movie_desc'),
      movie.header.rerecord_count,
    )

  def __repr__(self) -> str:
    return 'TasMetadata(' + ', '.join(map(repr, [
      self.game_version,
      self.title,
      self.authors,
      self.description,
      self.rerecords,
    ])) + ')'
