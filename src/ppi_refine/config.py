"""Parameters of a refinement run."""

import os
from dataclasses import dataclass, field

import dotenv

ENV_PREFIX = "PPI_REFINE_"


def default_n_cores() -> int:
    """All available cores but one, and at least one."""
    return max((os.cpu_count() or 1) - 1, 1)


@dataclass(frozen=True)
class PipelineParams:
    """Parameters for the trim, cross, trim, merge pipeline.

    Attributes:
        tau: Minimum homology score kept before crossing.
        zeta: Minimum homology score kept before merging.
        xi: Maximum number of homology hops searched during crossing.
        n_cores: Worker threads per pass.
        no_cross: Skip the crossing pass.
        no_merge: Skip the merging pass.
        concurrent_merge: Run one merging job per connected component.
    """

    tau: float = 0.5
    zeta: float = 0.7
    xi: int = 2
    n_cores: int = field(default_factory=default_n_cores)
    no_cross: bool = False
    no_merge: bool = False
    concurrent_merge: bool = True

    @classmethod
    def from_env(cls, **overrides) -> "PipelineParams":
        """Read parameters from ``PPI_REFINE_*`` variables, loading ``.env`` first.

        Keyword arguments that are not None take precedence over the environment.
        """
        dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))
        values: dict = {}
        for name, convert in (("tau", float), ("zeta", float), ("xi", int), ("n_cores", int)):
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw:
                values[name] = convert(raw)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def validate(self) -> None:
        """Raise ValueError for out-of-range parameters."""
        for name in ("tau", "zeta"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be a probability, got {value}")
        if self.xi < 1:
            raise ValueError(f"xi must be a positive integer, got {self.xi}")
        if self.n_cores < 1:
            raise ValueError(f"n_cores must be at least 1, got {self.n_cores}")
