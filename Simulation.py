import logging
import os
import sys
from enum import Enum, auto

import readchar

from GameController import GameController, InputExhausted
from GameOfLife import GameOfLife, SeedFormatError

ADVANCE_KEYS = (readchar.key.LF, readchar.key.CR)
INTERRUPT_KEYS = (readchar.key.CTRL_C, readchar.key.CTRL_D)


class SimulationState(Enum):
    INIT = auto()
    RENDER = auto()
    AWAIT_COMMAND = auto()
    TERMINATED = auto()


class Command(Enum):
    ADVANCE = auto()
    QUIT = auto()
    STATUS = auto()
    IGNORE = auto()


def clearConsole():
    os.system('cls' if os.name == 'nt' else 'clear')


class Simulation:
    def __init__(self, rows=10, cols=10, seed=None, boundary="bounded", alive_char="#", dead_char=".",
                 quit_key="q", status_key="#", clear_screen=False, readKey=None, write=None, messages=None):
        """
        Args:
            rows (int) - Num of grid rows
            cols (int) - Num of grid cols
            seed (iterable | None) - (row, col) pairs of ALIVE cells, or None for an empty grid
            boundary (str) - "bounded" or "toroidal"
            quit_key (str) - key that ends the simulation
            status_key (str) - key that prints the generation and live cell count
            clear_screen (bool) - clear the terminal before each frame
            readKey (callable) - returns one input symbol, raises InputExhausted on EOF
            write (callable) - receives output text
            messages (list | None) - diagnostics to show above the first frame
        """
        self.game = GameOfLife(rows, cols, boundary=boundary, alive_char=alive_char, dead_char=dead_char)
        self.seed = seed if seed is not None else []
        self.quit_key = quit_key
        self.status_key = status_key
        self.clear_screen = clear_screen
        self.readKey = readKey or GameController.readKey
        self.write = write or self.writeStdout
        self.state = SimulationState.INIT
        self.framesRendered = 0
        self.messages = list(messages or [])

    @staticmethod
    def writeStdout(text):
        sys.stdout.write(text)
        sys.stdout.flush()

    def parseCommand(self, key):
        if key in ADVANCE_KEYS:
            return Command.ADVANCE
        if key == self.quit_key or key in INTERRUPT_KEYS:
            return Command.QUIT
        if key == self.status_key:
            return Command.STATUS
        return Command.IGNORE

    def initGrid(self):
        try:
            self.game.initialize(self.seed)
            logging.info(f"Grid {self.game.rows}x{self.game.cols} seeded with {self.game.liveCount()} live cells.")
        except SeedFormatError as e:
            logging.error(f"Seed rejected: {e}")
            self.messages.append(f"Seed error: {e} Starting from an empty grid.")

    def renderFrame(self):
        if self.clear_screen:
            clearConsole()
        for message in self.messages: #written after the clear so they stay visible
            self.write(message + "\n")
        self.messages = []
        self.write(f"Generation {self.game.generation}:\n")
        self.write(self.game.render() + "\n")
        self.framesRendered += 1

    def awaitCommand(self):
        while True:
            try:
                key = self.readKey()
            except InputExhausted:
                logging.info("Input exhausted, quitting.")
                return SimulationState.TERMINATED

            command = self.parseCommand(key)
            if command is Command.ADVANCE:
                self.game.step()
                logging.info(f"Generation {self.game.generation}: {self.game.liveCount()} live cells.")
                return SimulationState.RENDER
            elif command is Command.QUIT:
                logging.info(f"User quit at generation {self.game.generation}.")
                return SimulationState.TERMINATED
            elif command is Command.STATUS:
                logging.info(f"Status requested at generation {self.game.generation}.")
                self.write(f"Generation {self.game.generation}, live cells {self.game.liveCount()}\n")
            #anything else is ignored, keep waiting

    def run(self):
        """
        Returns:
            int - process exit status
        """
        while self.state is not SimulationState.TERMINATED:
            if self.state is SimulationState.INIT:
                self.initGrid()
                self.state = SimulationState.RENDER
            elif self.state is SimulationState.RENDER:
                self.renderFrame()
                self.state = SimulationState.AWAIT_COMMAND
            elif self.state is SimulationState.AWAIT_COMMAND:
                self.state = self.awaitCommand()
        return 0
