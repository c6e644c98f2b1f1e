"""
Reference ellipsoid parameters
"""

__all__ = ['Ellipsoid', 'GRS80']

from dataclasses import dataclass, field

import numpy as np

from nzgrid._const import GRS80_A, GRS80_RF


@dataclass(frozen=True)
class Ellipsoid:
    """
    An ellipsoid of revolution, defined by its semi-major axis and inverse flattening.

    The flattening and eccentricity terms are derived once on construction. An inverse
    flattening of zero describes a sphere. Inputs are not validated; nonsensical values
    simply propagate into the projection results.

    Args:
        a:
            The semi-major axis, in meters

        rf:
            The inverse flattening (0 for a sphere)
    """
    a: float
    rf: float
    f: float = field(init=False)
    e2: float = field(init=False)
    ep2: float = field(init=False)

    def __post_init__(self):
        f = 1.0 / self.rf if self.rf != 0.0 else 0.0
        e2 = 2.0 * f - f * f

        with np.errstate(divide='ignore', invalid='ignore'):
            ep2 = float(np.float64(e2) / (1.0 - e2))

        object.__setattr__(self, 'f', f)
        object.__setattr__(self, 'e2', e2)
        object.__setattr__(self, 'ep2', ep2)

    @property
    def n(self) -> float:
        """The third flattening"""
        return self.f / (2.0 - self.f)


GRS80 = Ellipsoid(GRS80_A, GRS80_RF)
