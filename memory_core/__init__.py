"""
Memory Match core Python package.

Pure game logic for the concentration puzzle, kept apart from terminal I/O
so the turn rules can be tested without a console.
Modules:
- board.py: Board, Cell, Coord
- deal.py: symbol pool, Fisher-Yates shuffle, dealing
- state.py: GameState, Phase
- turns.py: pick validation and turn resolution
- console.py: rendering and input parsing
- cli.py: argument parsing and the game loop
"""
