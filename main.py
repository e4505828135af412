#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Console for the cube simulator.

Type turns such as "R U R' U'" or one of the commands listed by "help".
Pass a formula (positionally or with --formula) for a one-shot run that
applies it and prints the net.
"""
import argparse

from cube_colors import DEFAULT_SCHEME, COLOR_SCHEMES, draw_cube, format_net, get_scheme
from cube_rotation import InvalidMoveError, format_formula, parse_formula
from cube_session import CubeSession
from random_cube_generator import DEFAULT_SCRAMBLE_LENGTH, ScrambleGenerator, pattern_moves

SEPARATOR = "-----------------------------------"

HELP_DISPLAY = "\n".join([
    SEPARATOR,
    "SCRAMBLE - Randomly scrambles the cube",
    "UNSCRAMBLE - Undoes the last scramble",
    "RESET - Resets the cube to solved state",
    "COLOR scheme - Changes the cube's color scheme",
    "PATTERN - Display a checker pattern on the cube",
    "SHOW - Prints the cube net",
    "QUIT - Quit the program",
    "HELP - Displays this help menu",
    SEPARATOR,
    "R - Right face clockwise turn",
    "R' - Right face counterclockwise turn",
    "R2 - Two right face turns",
    "(same for L, U, D, F and B)",
    SEPARATOR,
])


class CubeConsole:
    """Reads user commands and turns them into session calls"""

    def __init__(self, session=None, scheme=DEFAULT_SCHEME,
                 scramble_length=DEFAULT_SCRAMBLE_LENGTH, image=None, debug=False):
        self.session = session if session is not None else CubeSession()
        self.scheme = get_scheme(scheme)
        self.scramble_length = scramble_length
        self.image = image
        self.debug = debug

    def do_command(self, command):
        """
        Execute one line of input

        Returns:
            False when the user asked to quit, True otherwise
        """
        command = command.strip()
        lower_case_command = command.lower()

        if lower_case_command == "quit":
            print("Program terminated.")
            print(SEPARATOR)
            return False

        if lower_case_command == "reset":
            self.session.reset()
            print("Cube reset.")
        elif lower_case_command == "solve":
            print("Solving is not available.")
        elif lower_case_command == "help":
            print(HELP_DISPLAY)
        elif lower_case_command == "show":
            print(format_net(self.session.snapshot(), self.scheme))
        elif lower_case_command == "scramble":
            moves = self.session.scramble(self.scramble_length, self._after_turn)
            print(f"Scramble: {format_formula(moves)}")
        elif lower_case_command == "unscramble":
            self._unscramble()
        elif lower_case_command == "pattern":
            self._checker_pattern()
        elif lower_case_command == "color" or lower_case_command.startswith("color "):
            self._process_color(lower_case_command)
        else:
            self._parse_turns(command)

        print(SEPARATOR)
        self.save_image()
        return True

    def run(self, input_func=input):
        print("Type \"help\" to display a list of valid commands.")
        while True:
            try:
                command = input_func("> ")
            except EOFError:
                break
            if not self.do_command(command):
                break

    def _parse_turns(self, command):
        try:
            moves = parse_formula(command)
            if not moves:
                raise InvalidMoveError(command)
        except InvalidMoveError as e:
            if self.debug:
                print(e)
            print("Command not recognized!")
            print("Type \"help\" to display a list of valid commands.")
            return
        if self.debug:
            print(f"Applying: {format_formula(moves)}")
        self.session.apply_formula(moves, self._after_turn)

    def _unscramble(self):
        moves = self.session.undo_scramble(self._after_turn)
        if not moves:
            print("Nothing to unscramble.")
            return
        if self.debug:
            print(f"Undone with: {format_formula(moves)}")

    def _checker_pattern(self):
        # The pattern only comes out right on a solved cube
        if not self.session.is_solved():
            print("Please make sure the cube is solved before attempting to make the pattern.")
            return
        self.session.apply_formula(pattern_moves("checker"), self._after_turn)

    def _process_color(self, command):
        command_set = command.split()
        if len(command_set) == 2 and command_set[1] in COLOR_SCHEMES:
            self.scheme = get_scheme(command_set[1])
            print(f"Color scheme set to {self.scheme.name}.")
        else:
            print("Please enter a valid color scheme! Possible options include:")
            print("\t".join(COLOR_SCHEMES))

    def _after_turn(self, move, solved):
        # Called after every turn, not only at the end of a formula
        if solved:
            print("Cube solved!")

    def report_solved(self):
        if self.session.is_solved():
            print("Cube solved!")

    def save_image(self):
        if self.image:
            draw_cube(self.session.snapshot(), self.scheme, self.image)
            if self.debug:
                print(f"Cube net diagram saved as {self.image}")


def main(argv=None):
    """Main function - parse arguments and run the console"""
    parser = argparse.ArgumentParser(description='3x3 Rubik\'s Cube simulator')

    parser.add_argument('moves', type=str, nargs='?', default=None,
                        help='Same as --formula')

    parser.add_argument('--formula', type=str, default=None,
                        help='Apply a formula (e.g., "R U R\' U\'"), print the net and exit')

    parser.add_argument('--scramble-length', type=int, default=DEFAULT_SCRAMBLE_LENGTH,
                        help='Number of moves used by the scramble command')

    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for reproducible scrambles')

    parser.add_argument('--scheme', type=str, default=DEFAULT_SCHEME,
                        choices=sorted(COLOR_SCHEMES),
                        help='Color scheme used for display')

    parser.add_argument('--image', type=str, default=None,
                        help='Save a cube net image to this file after every command')

    parser.add_argument('--pause', type=float, default=0.0,
                        help='Seconds to wait between turns')

    parser.add_argument('--debug', action='store_true',
                        help='Print extra information')

    args = parser.parse_args(argv)
    if args.moves is not None:
        if args.formula is not None:
            parser.error("give the formula either positionally or with --formula, not both")
        args.formula = args.moves

    session = CubeSession(generator=ScrambleGenerator(seed=args.seed), pause=args.pause)
    console = CubeConsole(session, scheme=args.scheme, scramble_length=args.scramble_length,
                          image=args.image, debug=args.debug)

    if args.formula is not None:
        try:
            session.apply_formula(args.formula)
        except InvalidMoveError as e:
            parser.error(str(e))
        print(format_net(session.snapshot(), console.scheme))
        console.report_solved()
        console.save_image()
        return 0

    console.run()
    return 0


if __name__ == "__main__":
    main()
