"""toru — composable value chains, stage pipelines and re-iterable sequences."""

from .core import (
    Carry,
    Flow,
    InvalidResult,
    Pipe,
    Regenerator,
    ToruError,
    apply,
    carry,
    ensure_traversable,
    through,
    through_stages,
)

__version__ = '0.1.0'

__all__ = [
    'Carry',
    'Flow',
    'InvalidResult',
    'Pipe',
    'Regenerator',
    'ToruError',
    'apply',
    'carry',
    'ensure_traversable',
    'through',
    'through_stages',
]
