import argparse
import logging
import sys

from GameController import GameController
from GameOfLife import SeedFormatError
from Simulation import Simulation

DEFAULT_CONFIG = {
        'rows': 10,
        'cols': 10,
        'boundary': 'bounded',
        'alive_char': '#',
        'dead_char': '.',
        'quit_key': 'q',
        'status_key': '#',
        'clear_screen': True,
        'log_file': 'game_of_life.log'
    }

#glider, used when no seed file is given
DEFAULT_SEED = """\
.#.
..#
###
"""

DESCRIPTION = "Conway's Game of Life in the terminal, one generation per Enter press."

EPILOG = """SEED_FILE holds either a pattern block ('.' dead, '#' 'O' '*' alive,
'!' comment lines) centred on the grid, or one 'row,col' pair per line.
Without a seed file a glider is used.

Keys: Enter = next generation, '{quit}' = quit, '{status}' = show status.
"""


def setupLogging(logFile):
    logging.basicConfig(filename=logFile,
                        filemode='a', #append, a run never truncates earlier logs
                        format='%(asctime)s - %(levelname)s - %(message)s',
                        level=logging.INFO,
                        datefmt='%Y-%m-%d %H:%M:%S')


def buildParser(prog, config):
    parser = argparse.ArgumentParser(
        prog=prog,
        description=DESCRIPTION,
        epilog=EPILOG.format(quit=config['quit_key'], status=config['status_key']),
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('seed_file', nargs='?', default=None, metavar='SEED_FILE',
                        help='seed pattern to start from (default: glider)')
    return parser


def loadInitialSeed(path, config):
    """
    Returns:
        tuple(seed, messages) - list of (row, col) cells, or None when the seed
        could not be used, and the diagnostics to show the user
    """
    rows, cols = config['rows'], config['cols']
    source = f"seed file '{path}'" if path is not None else "default glider"
    try:
        if path is None:
            logging.info("No seed file given, using the default glider.")
            seed = GameController.parseSeed(DEFAULT_SEED, rows, cols)
        else:
            seed = GameController.loadSeed(path, rows, cols)
        logging.info(f"Loaded {len(seed)} live cells from {source}.")
        return seed, []
    except SeedFormatError as e:
        logging.error(f"The {source} was rejected: {e}")
        return None, [f"Seed error: {e} Starting from an empty grid."]


def main(argv=None, config=None):
    argv = sys.argv if argv is None else argv
    config = {**DEFAULT_CONFIG, **(config or {})}
    prog = argv[0] if argv else 'game-of-life'
    args = buildParser(prog, config).parse_args(argv[1:])

    setupLogging(config['log_file'])
    logging.info(f"Starting simulation with config: {config}")

    seed, messages = loadInitialSeed(args.seed_file, config)
    simulation = Simulation(rows=config['rows'],
                            cols=config['cols'],
                            seed=seed,
                            boundary=config['boundary'],
                            alive_char=config['alive_char'],
                            dead_char=config['dead_char'],
                            quit_key=config['quit_key'],
                            status_key=config['status_key'],
                            clear_screen=config['clear_screen'] and sys.stdout.isatty(),
                            messages=messages)
    exitCode = simulation.run()
    logging.info(f"Simulation ended after {simulation.game.generation} generations.")
    return exitCode


if __name__ == "__main__":
    sys.exit(main())
