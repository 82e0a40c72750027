"""Unit cells, Miller indices, d-spacings and Bragg diffraction."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional

_TOL = 1e-6


@dataclass(frozen=True)
class UnitCell:
    """A unit cell: lengths in angstroms, angles in degrees."""

    a: float
    b: float
    c: float
    alpha: float
    beta: float
    gamma: float

    @classmethod
    def cubic(cls, a: float) -> UnitCell:
        """Cubic cell (a = b = c, all angles 90 degrees)."""
        return cls(a, a, a, 90.0, 90.0, 90.0)

    @classmethod
    def hexagonal(cls, a: float, c: float) -> UnitCell:
        """Hexagonal cell (a = b, alpha = beta = 90, gamma = 120)."""
        return cls(a, a, c, 90.0, 90.0, 120.0)

    @classmethod
    def rhombohedral(cls, a: float, c: float) -> UnitCell:
        """Rhombohedral cell in the hexagonal setting."""
        return cls.hexagonal(a, c)

    @classmethod
    def orthorhombic(cls, a: float, b: float, c: float) -> UnitCell:
        """Orthorhombic cell (all angles 90 degrees)."""
        return cls(a, b, c, 90.0, 90.0, 90.0)

    @classmethod
    def halite(cls) -> UnitCell:
        """Halite (NaCl): cubic, a = 5.64."""
        return cls.cubic(5.64)

    @classmethod
    def quartz(cls) -> UnitCell:
        """Quartz (SiO2): hexagonal, a = 4.913, c = 5.405."""
        return cls.hexagonal(4.913, 5.405)

    @classmethod
    def calcite(cls) -> UnitCell:
        """Calcite (CaCO3): rhombohedral, a = 4.989, c = 17.062."""
        return cls.rhombohedral(4.989, 17.062)

    @classmethod
    def diamond(cls) -> UnitCell:
        """Diamond (C): cubic, a = 3.567."""
        return cls.cubic(3.567)

    def volume(self) -> float:
        """Cell volume from the general triclinic formula."""
        ca = math.cos(math.radians(self.alpha))
        cb = math.cos(math.radians(self.beta))
        cg = math.cos(math.radians(self.gamma))
        factor = 1.0 - ca * ca - cb * cb - cg * cg + 2.0 * ca * cb * cg
        return self.a * self.b * self.c * math.sqrt(factor)

    def _right_angles(self) -> bool:
        return all(abs(angle - 90.0) < _TOL for angle in (self.alpha, self.beta, self.gamma))

    def is_cubic(self) -> bool:
        """True if a = b = c and all angles are 90 degrees."""
        return (
            abs(self.a - self.b) < _TOL
            and abs(self.b - self.c) < _TOL
            and self._right_angles()
        )

    def is_hexagonal(self) -> bool:
        """True if a = b, alpha = beta = 90 and gamma = 120 degrees."""
        return (
            abs(self.a - self.b) < _TOL
            and abs(self.alpha - 90.0) < _TOL
            and abs(self.beta - 90.0) < _TOL
            and abs(self.gamma - 120.0) < _TOL
        )

    def is_tetragonal(self) -> bool:
        """True if a = b != c and all angles are 90 degrees."""
        return (
            abs(self.a - self.b) < _TOL
            and abs(self.a - self.c) >= _TOL
            and self._right_angles()
        )

    def is_orthorhombic(self) -> bool:
        """True if all angles are 90 degrees and a != b != c."""
        return (
            self._right_angles()
            and abs(self.a - self.b) >= _TOL
            and abs(self.b - self.c) >= _TOL
        )

    def to_dict(self) -> dict[str, float]:
        """Plain mapping of the lattice parameters."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UnitCell:
        """Build a cell from a mapping produced by :meth:`to_dict`."""
        return cls(**{f.name: float(data[f.name]) for f in fields(cls)})


@dataclass(frozen=True)
class MillerIndex:
    """Miller indices (hkl) of a crystallographic plane."""

    h: int
    k: int
    l: int  # noqa: E741

    def __str__(self) -> str:
        return f"({self.h} {self.k} {self.l})"

    def to_dict(self) -> dict[str, int]:
        """Plain mapping of the indices."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MillerIndex:
        """Build an index from a mapping produced by :meth:`to_dict`."""
        return cls(int(data["h"]), int(data["k"]), int(data["l"]))


def d_spacing(cell: UnitCell, hkl: MillerIndex) -> float:
    """Interplanar spacing for ``hkl`` in ``cell``.

    Cubic cells use d = a / sqrt(h^2 + k^2 + l^2); all others use the
    orthorhombic relation. Raises ValueError for the (0 0 0) index.
    """
    if hkl.h == 0 and hkl.k == 0 and hkl.l == 0:
        raise ValueError("d-spacing is undefined for Miller index (0 0 0)")
    h2, k2, l2 = hkl.h * hkl.h, hkl.k * hkl.k, hkl.l * hkl.l
    if cell.is_cubic():
        return cell.a / math.sqrt(h2 + k2 + l2)
    inv_d2 = h2 / (cell.a * cell.a) + k2 / (cell.b * cell.b) + l2 / (cell.c * cell.c)
    return 1.0 / math.sqrt(inv_d2)


def bragg_angle(d_spacing: float, wavelength: float) -> Optional[float]:
    """First-order Bragg angle in degrees, or None when no diffraction is possible."""
    if d_spacing == 0.0:
        return None
    sin_theta = wavelength / (2.0 * d_spacing)
    if abs(sin_theta) > 1.0:
        return None
    return math.degrees(math.asin(sin_theta))


def bragg_wavelength(d_spacing: float, angle_deg: float) -> float:
    """Wavelength satisfying first-order Bragg's law for the given angle."""
    return 2.0 * d_spacing * math.sin(math.radians(angle_deg))