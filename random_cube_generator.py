#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
This file generates scrambles and named patterns:
- Random scrambles: moves drawn independently and uniformly, with replacement,
  from the 18 face turns. Consecutive moves may cancel each other.
- Checker pattern: "R2 L2 U2 D2 F2 B2", applied to a solved cube

Pass a seed (or a random.Random instance) to get the same scramble every time.
"""
import random

from cube_rotation import ALL_MOVES, format_formula, parse_formula

DEFAULT_SCRAMBLE_LENGTH = 25

CHECKER_PATTERN = "R2 L2 U2 D2 F2 B2"

PATTERNS = {
    "checker": CHECKER_PATTERN,
}


class ScrambleGenerator:
    """Draws random move sequences from the 18 face turns"""

    def __init__(self, seed=None, rng=None):
        """
        Args:
            seed: Seed for a private random.Random, ignored when rng is given
            rng: Random source with a choice() method
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(self, count=DEFAULT_SCRAMBLE_LENGTH):
        """
        Generate a scramble

        Args:
            count: Number of moves to draw

        Returns:
            List of Move members in the order they should be applied
        """
        if count < 0:
            raise ValueError(f"Scramble length must be non-negative, got {count}")
        return [self.rng.choice(ALL_MOVES) for _ in range(count)]

    def generate_formula(self, count=DEFAULT_SCRAMBLE_LENGTH):
        """Same as generate() but returned as a notation string"""
        return format_formula(self.generate(count))


def generate_scramble(count=DEFAULT_SCRAMBLE_LENGTH, seed=None):
    """Generate a scramble with a fresh generator"""
    return ScrambleGenerator(seed=seed).generate(count)


def pattern_moves(name):
    """
    Look up a named pattern

    Returns:
        List of Move members
    """
    try:
        formula = PATTERNS[name]
    except KeyError:
        raise ValueError(
            f"Unknown pattern: {name}. Possible options include: {', '.join(PATTERNS)}"
        ) from None
    return parse_formula(formula)


def main():
    generator = ScrambleGenerator()
    for length in (5, DEFAULT_SCRAMBLE_LENGTH):
        print(f"{length}-move scramble:")
        print(generator.generate_formula(length))
        print()


if __name__ == '__main__':
    main()
