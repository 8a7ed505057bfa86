from m64edit.errors import *
from m64edit.controllers import active_controllers, controller_flags_for
from m64edit.header import Header, decode_header, encode_header, default_header, game_version
from m64edit.inputs import Input, decode_input, encode_input, decode_samples, encode_samples
from m64edit.movie import Movie, from_bytes, to_bytes, new_movie
