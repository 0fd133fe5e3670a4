"""
Main entry point and event loop for dualtodo.
"""
import argparse
import curses
import locale
import os
import sys

from dualtodo import __version__, loader, logger, ui
from dualtodo.config import load_config
from dualtodo.editor import EditorState

def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="dualtodo", description="Daily and long-term todo lists in the terminal.")
    parser.add_argument("--config", help="path to a key=value config file")
    parser.add_argument("--data-dir", help="directory scanned for todo files at startup")
    parser.add_argument("--log-file", help="file that receives the debug log")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)

def main(stdscr, state: EditorState = None):
    """Run the editor until the quit key is pressed."""
    ui.screen.init_colors()
    stdscr.keypad(True)
    if state is None:
        state = EditorState()
    logger.log("Editor started.")

    scroll = 0
    while not state.exit_flag:
        scroll = ui.screen.display(state, stdscr, scroll)
        try:
            key = stdscr.get_wch()
        except curses.error:
            # Interrupted read (e.g. terminal resize); just redraw
            continue
        if key == curses.KEY_RESIZE:
            continue
        ui.input.dispatch(state, key)
    return state

def run(argv=None):
    """
    Parse arguments, load configuration, run the startup file load and start
    the curses wrapper with main().
    """
    args = parse_args(argv)
    config = load_config(args.config)
    if args.data_dir:
        config.data_dir = args.data_dir
    if args.log_file:
        config.log_file = args.log_file
    logger.set_log_file(config.log_file)

    loader.initialize(config.data_dir, config.data_file)

    locale.setlocale(locale.LC_ALL, '')
    # Make ESC leave editing mode without the default one second delay
    os.environ.setdefault("ESCDELAY", "25")
    try:
        curses.wrapper(main)
    except KeyboardInterrupt:
        logger.log("Interrupted.")
        return 130
    return 0

if __name__ == "__main__":
    sys.exit(run())
