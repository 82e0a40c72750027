"""Major oxide analysis, TAS classification, differentiation indices and Rayleigh fractionation."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional

# Molecular weights (g/mol) for molar ratio conversions.
_MW_AL2O3 = 101.961
_MW_CAO = 56.077
_MW_NA2O = 61.979
_MW_K2O = 94.196
_MW_MGO = 40.304
_MW_FEO = 71.844


class TasClassification(Enum):
    """Volcanic rock names on the Total Alkali-Silica diagram (Le Bas et al., 1986)."""

    PICRITE = "Picrite"
    PICROBASALT = "Picrobasalt"
    BASALT = "Basalt"
    BASALTIC_ANDESITE = "BasalticAndesite"
    ANDESITE = "Andesite"
    DACITE = "Dacite"
    RHYOLITE = "Rhyolite"
    TRACHYBASALT = "Trachybasalt"
    BASALTIC_TRACHYANDESITE = "BasalticTrachyandesite"
    TRACHYANDESITE = "Trachyandesite"
    TRACHYTE = "Trachyte"
    PHONOLITE = "Phonolite"
    TEPHRITE = "Tephrite"
    PHONOTEPHRITE = "Phonotephrite"
    TEPHRIPHONOLITE = "Tephriphonolite"
    FOIDITE = "Foidite"


class AsiClassification(Enum):
    """Alumina saturation classes (Shand, 1943)."""

    PERALUMINOUS = "Peraluminous"
    METALUMINOUS = "Metaluminous"
    PERALKALINE = "Peralkaline"


def classify_tas(sio2: float, total_alkali: float) -> TasClassification:
    """Classify a volcanic rock from SiO2 and Na2O + K2O (both in weight percent).

    Uses simplified field boundaries after Le Bas et al. (1986) and the
    Irvine & Baragar (1971) alkaline/sub-alkaline divide.
    """
    if total_alkali > sio2 - 25.0 and sio2 < 41.0:
        return TasClassification.FOIDITE

    if sio2 < 41.0:
        if total_alkali >= 3.0:
            return TasClassification.FOIDITE
        return TasClassification.PICRITE

    is_alkaline = total_alkali > 0.37 * sio2 - 14.43

    if sio2 < 45.0:
        if is_alkaline:
            if total_alkali >= 9.0:
                return TasClassification.PHONOTEPHRITE
            return TasClassification.TEPHRITE
        if total_alkali < 2.0:
            return TasClassification.PICRITE
        return TasClassification.PICROBASALT

    if sio2 < 52.0:
        if is_alkaline:
            if total_alkali >= 9.5:
                return TasClassification.TEPHRIPHONOLITE
            if total_alkali >= 5.0:
                return TasClassification.TRACHYBASALT
        return TasClassification.BASALT

    if sio2 < 57.0:
        if is_alkaline:
            if total_alkali >= 11.0:
                return TasClassification.PHONOLITE
            if total_alkali >= 7.0:
                return TasClassification.BASALTIC_TRACHYANDESITE
        return TasClassification.BASALTIC_ANDESITE

    if sio2 < 63.0:
        if is_alkaline:
            if total_alkali >= 11.5:
                return TasClassification.PHONOLITE
            if total_alkali >= 7.5:
                return TasClassification.TRACHYANDESITE
        return TasClassification.ANDESITE

    if sio2 < 69.0:
        if total_alkali >= 11.0:
            return TasClassification.TRACHYTE
        return TasClassification.DACITE

    if total_alkali >= 12.0:
        return TasClassification.TRACHYTE
    return TasClassification.RHYOLITE


def mg_number(feo: float, mgo: float) -> float:
    """Molar MgO / (MgO + FeO); 0 when both are zero."""
    mgo_mol = mgo / _MW_MGO
    feo_mol = feo / _MW_FEO
    denom = mgo_mol + feo_mol
    if denom <= 0.0:
        return 0.0
    return mgo_mol / denom


def alumina_saturation_index(al2o3: float, cao: float, na2o: float, k2o: float) -> float:
    """Molar Al2O3 / (CaO + Na2O + K2O); infinity when the denominator is zero."""
    al_mol = al2o3 / _MW_AL2O3
    denom = cao / _MW_CAO + na2o / _MW_NA2O + k2o / _MW_K2O
    if denom <= 0.0:
        return math.inf
    return al_mol / denom


def classify_asi(asi: float) -> AsiClassification:
    """Peraluminous above 1, metaluminous from 0.5 to 1, peralkaline below 0.5."""
    if asi > 1.0:
        return AsiClassification.PERALUMINOUS
    if asi >= 0.5:
        return AsiClassification.METALUMINOUS
    return AsiClassification.PERALKALINE


def fractional_crystallization(
    c0: float, f_remaining: float, partition_coeff: float
) -> Optional[float]:
    """Rayleigh fractionation: concentration in the residual melt, C0 * F^(D - 1).

    Returns None unless 0 < f_remaining <= 1.
    """
    if f_remaining <= 0.0 or f_remaining > 1.0:
        return None
    return c0 * f_remaining ** (partition_coeff - 1.0)


@dataclass
class MajorOxides:
    """Major-element oxide analysis of a rock sample in weight percent."""

    sio2: float
    tio2: float
    al2o3: float
    fe2o3: float
    feo: float
    mno: float
    mgo: float
    cao: float
    na2o: float
    k2o: float
    p2o5: float
    h2o: float

    def total(self) -> float:
        """Sum of all oxide weight percentages."""
        return sum(getattr(self, f.name) for f in fields(self))

    def is_valid(self) -> bool:
        """True when the oxide total lies within 100 +/- 2 wt%."""
        return 98.0 <= self.total() <= 102.0

    def total_alkali(self) -> float:
        """Na2O + K2O."""
        return self.na2o + self.k2o

    def tas_classification(self) -> TasClassification:
        """Position of this analysis on the TAS diagram."""
        return classify_tas(self.sio2, self.total_alkali())

    def mg_number(self) -> float:
        """Mg-number from the FeO and MgO of this analysis."""
        return mg_number(self.feo, self.mgo)

    def asi(self) -> float:
        """Alumina saturation index of this analysis."""
        return alumina_saturation_index(self.al2o3, self.cao, self.na2o, self.k2o)

    def to_dict(self) -> dict[str, float]:
        """Plain mapping of the oxide values."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MajorOxides:
        """Build an analysis from a mapping produced by :meth:`to_dict`."""
        return cls(**{f.name: float(data[f.name]) for f in fields(cls)})