"""Text adapter turning reboot step lines into Instruction records.

Each line reads ``on x=10..12,y=10..12,z=10..12`` (or ``off ...``). Order
matters to the reactor, so the parsed list keeps input order exactly. Any
line that does not match is a fatal ParseError; nothing is skipped except
blank lines.
"""

import logging
import re
from pathlib import Path
from typing import Iterable

from reactor_reboot.exceptions import InvalidRangeError, ParseError
from reactor_reboot.reactor import Instruction
from reactor_reboot.cuboid import Cuboid

logger = logging.getLogger(__name__)

_INT = r"([-+]?[0-9]+)"
INSTRUCTION_PATTERN = re.compile(
    rf"^(on|off) x={_INT}\.\.{_INT},y={_INT}\.\.{_INT},z={_INT}\.\.{_INT}$"
)


def parse_instruction(line: str, line_no: int | None = None) -> Instruction:
    """Parse one instruction line.

    Args:
        line: Text such as ``off x=9..11,y=9..11,z=9..11``. Surrounding
              whitespace is ignored.
        line_no: 1-based position in the input, reported in errors.

    Raises:
        ParseError: If the flag is not ``on``/``off``, the ranges are malformed,
                    or any range is inverted.
    """
    match = INSTRUCTION_PATTERN.match(line.strip())
    if match is None:
        raise ParseError(line, line_no)
    flag, *bounds = match.groups()
    try:
        cuboid = Cuboid(*(int(b) for b in bounds))
    except InvalidRangeError as exc:
        raise ParseError(line, line_no) from exc
    return Instruction(flag == "on", cuboid)


def parse_lines(lines: Iterable[str]) -> list[Instruction]:
    instructions = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        instructions.append(parse_instruction(line, line_no))
    logger.debug(f"Parsed {len(instructions)} instructions")
    return instructions


def parse_input(text: str) -> list[Instruction]:
    """Parse the puzzle input as a list of instructions."""
    return parse_lines(text.splitlines())


def read_instructions(path: str | Path) -> list[Instruction]:
    """Read and parse an instruction file."""
    path = Path(path)
    logger.info(f"Reading instructions from {path}")
    with path.open("r", encoding="utf-8") as fh:
        return parse_lines(fh)
