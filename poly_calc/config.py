"""Central configuration dataclass for the polynomial calculator.

All limits of the input protocol live here as a single frozen dataclass so
that an interpreter session can be set up (and tested) with one object.
Defaults reproduce the C type limits the protocol is defined with.
"""

from __future__ import annotations

from dataclasses import dataclass

from .core.numbers import LONG_MAX, LONG_MIN, UINT_MAX, ULONG_MAX

DUMP_FORMATS = ("human", "card", "cardinal")


@dataclass(frozen=True)
class Config:
    """Frozen settings for parsing and command execution.

    Groups:
        Literals:  coeff_min/max, exp_min/max
        Commands:  var_idx_max (DEG_BY), at_min/max (AT), pow_exp_max (POW),
                   compose_count_max (COMPOSE), max_command_length
        Output:    dump_format
    """
    # --- Polynomial literals ---
    coeff_min: int = LONG_MIN
    coeff_max: int = LONG_MAX
    exp_min: int = 0
    exp_max: int = UINT_MAX

    # --- Command arguments ---
    var_idx_max: int = UINT_MAX
    at_min: int = LONG_MIN
    at_max: int = LONG_MAX
    pow_exp_max: int = ULONG_MAX
    compose_count_max: int = UINT_MAX
    max_command_length: int = 25   # longest accepted command token

    # --- Output ---
    dump_format: str = "human"     # one of DUMP_FORMATS

    def __post_init__(self):
        if self.coeff_min > 0 or self.coeff_max < 0:
            raise ValueError("Coefficient range must contain 0")
        if self.exp_min < 0 or self.exp_min > self.exp_max:
            raise ValueError(f"Invalid exponent range [{self.exp_min}, {self.exp_max}]")
        if self.var_idx_max < 0:
            raise ValueError(f"Invalid var_idx_max {self.var_idx_max}")
        if self.at_min > self.at_max:
            raise ValueError(f"Invalid AT range [{self.at_min}, {self.at_max}]")
        if self.pow_exp_max < 0:
            raise ValueError(f"Invalid pow_exp_max {self.pow_exp_max}")
        if self.compose_count_max < 0:
            raise ValueError(f"Invalid compose_count_max {self.compose_count_max}")
        if self.max_command_length < 1:
            raise ValueError("max_command_length must be >= 1")
        if self.dump_format not in DUMP_FORMATS:
            raise ValueError(f"Unknown dump format {self.dump_format!r}")
