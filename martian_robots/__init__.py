from .entities.robot import Robot, create
from .entities.scents import LossRegistry, DEFAULT_REGISTRY
from .entities.grid import Grid, MARS
from .utils.enums import Heading, Instruction
from .utils.errors import InstructionError
from .utils.types import Position, Pose, Move, apply_update, format_move

__all__ = [
    'Robot', 'create', 'LossRegistry', 'DEFAULT_REGISTRY', 'Grid', 'MARS',
    'Heading', 'Instruction', 'InstructionError',
    'Position', 'Pose', 'Move', 'apply_update', 'format_move',
]
