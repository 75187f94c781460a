"""
Global / diagnostic configuration flags.
"""

from dataclasses import dataclass


@dataclass
class HTConfig:
    debug: bool = False
    # Check binomial invariants after every union during propagation.
    validate_heaps: bool = False


config = HTConfig()
