from dataclasses import dataclass

@dataclass(frozen=True)
class ModeFlags:
    # Browser-client mode must mirror astray/maze.js exactly: a*state+c is
    # evaluated in IEEE doubles. False selects the exact integer recurrence.
    js_float_lcg: bool = True

# Global flags (can be swapped by launcher)
FLAGS = ModeFlags()
