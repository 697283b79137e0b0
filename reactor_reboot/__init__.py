from .cuboid import Cuboid
from .exceptions import InvalidRangeError, ParseError, ReactorError, ValidationError
from .reactor import (
    Instruction,
    Reactor,
    clip_to_limit,
    initialisation_limit,
    limit_instructions,
    merge_instruction,
    run_all,
    total_active_volume,
    volume_active,
)
from .regionstore import ArrayRegionStore, MemoryRegionStore, RegionStore
from .parsing import parse_input, parse_instruction, read_instructions
from .dense import dense_active_volume
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("reactor-reboot")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    'Cuboid',
    'Instruction',
    'Reactor',
    'RegionStore',
    'MemoryRegionStore',
    'ArrayRegionStore',
    'ReactorError',
    'ParseError',
    'InvalidRangeError',
    'ValidationError',
    'clip_to_limit',
    'initialisation_limit',
    'limit_instructions',
    'merge_instruction',
    'run_all',
    'total_active_volume',
    'volume_active',
    'parse_input',
    'parse_instruction',
    'read_instructions',
    'dense_active_volume',
]
