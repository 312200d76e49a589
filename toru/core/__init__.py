from .errors import ToruError, InvalidResult
from .itera import ensure_traversable, apply
from .carry import Carry, Flow, carry
from .pipe import Pipe, through, through_stages
from .regenerator import Regenerator
