import re
import sys

import readchar

from GameOfLife import SeedFormatError

ALIVE_SEED_CHARS = "#Oo*"
DEAD_SEED_CHARS = "."
COORDINATE_LINE = re.compile(r"^\s*(-?\d+)\s*,\s*(-?\d+)\s*$")


class InputExhausted(EOFError):
    """Raised when the command stream closes while a key is awaited."""


class GameController:
    @staticmethod
    def getValidDimensions(rows, cols):
        if isinstance(rows, int) and isinstance(cols, int) and rows >= 1 and cols >= 1:
            return rows, cols
        raise ValueError(f"Invalid grid size {rows}x{cols}, please use values of 1 or more.")

    @staticmethod
    def parseSeed(text, rows, cols):
        """
        Args:
            text (str) - seed file contents, either a pattern block or `row,col` lines
            rows (int) - Num of grid rows
            cols (int) - Num of grid cols
        Returns:
            list of (row, col) tuples of ALIVE cells
        Raises:
            SeedFormatError: if the pattern has unknown characters or does not fit the grid
        """
        rows, cols = GameController.getValidDimensions(rows, cols)
        lines = [line.rstrip("\r\n") for line in text.splitlines()]
        lines = [line for line in lines if not line.startswith("!")] #plaintext comments

        while lines and not lines[0].strip():
            lines.pop(0)
        while lines and not lines[-1].strip():
            lines.pop()
        if not lines:
            return []

        filled = [line for line in lines if line.strip()] #blank rows only matter to patterns
        matches = [COORDINATE_LINE.match(line) for line in filled]
        if all(matches):
            return [(int(m.group(1)), int(m.group(2))) for m in matches]
        if any(matches):
            raise SeedFormatError("Seed mixes row,col coordinate lines with pattern rows.")

        return GameController.parsePattern([line.rstrip() for line in lines], rows, cols)

    @staticmethod
    def parsePattern(lines, rows, cols):
        height = len(lines)
        width = max(len(line) for line in lines)
        if height > rows or width > cols:
            raise SeedFormatError(
                f"Seed pattern is {height}x{width} but the grid is only {rows}x{cols}.")

        top = (rows - height) // 2 #centre the pattern on the grid
        left = (cols - width) // 2
        cells = []
        for i, line in enumerate(lines):
            for j, char in enumerate(line):
                if char in ALIVE_SEED_CHARS:
                    cells.append((top + i, left + j))
                elif char not in DEAD_SEED_CHARS:
                    raise SeedFormatError(
                        f"Unexpected character {char!r} in seed at line {i + 1}, column {j + 1}.")
        return cells

    @staticmethod
    def loadSeed(path, rows, cols):
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SeedFormatError(f"Could not read seed file '{path}': {e}") from e
        return GameController.parseSeed(text, rows, cols)

    @staticmethod
    def readKey(stream=None):
        """
        Blocks for exactly one input symbol.

        Raw keypresses come from readchar when the stream is a terminal,
        anything else (pipes, files) is read one character at a time.
        """
        stream = stream if stream is not None else sys.stdin
        try:
            if stream.isatty():
                key = readchar.readchar()
            else:
                key = stream.read(1)
        except EOFError:
            raise InputExhausted("Input closed while waiting for a command.") from None
        if not key:
            raise InputExhausted("Input closed while waiting for a command.")
        return key
