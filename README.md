# khanij

A small geology and mineralogy toolkit in pure Python with no runtime
dependencies. It is a library of functions and data classes; each area lives
in its own module:

- `khanij.crystallography`: `UnitCell` (with `cubic`, `hexagonal`,
  `rhombohedral`, `orthorhombic` constructors and `halite`, `quartz`,
  `calcite`, `diamond` presets), cell `volume()` and the checks
  `is_cubic()`, `is_hexagonal()`, `is_tetragonal()`, `is_orthorhombic()`;
  `MillerIndex`; `d_spacing`, `bragg_angle` and `bragg_wavelength`.
- `khanij.dating`: `parent_remaining`, `age_from_ratio`, `half_life`,
  `decay_constant`; the `IsotopeSystem` enum (U-Pb, K-Ar, Rb-Sr, C-14,
  Sm-Nd, Lu-Hf) with decay constants, half-lives, useful age ranges and
  `age()`; `c14_age`, `c14_fraction_remaining`; `IsochronPoint` and
  `isochron_age` (least-squares regression); `closure_temperature`.
- `khanij.formula`: `Formula.parse` for mineral formulas with parenthesised
  groups, Unicode subscripts, hydrates (`·` or `•`) and solid solutions;
  `count()` and `total_atoms()`.
- `khanij.geochemistry`: `MajorOxides` (total, validity check, total alkali,
  TAS class, Mg-number, ASI), `classify_tas` / `TasClassification`,
  `mg_number`, `alumina_saturation_index`, `classify_asi` /
  `AsiClassification`, and Rayleigh `fractional_crystallization`.
- `khanij.geothermal`: heat flux, temperature and lithostatic pressure at
  depth, thermal diffusivity, stored heat, Gibbs energy and spontaneity,
  ideal-gas volatile pressure, `MetamorphicFacies` with `classify_facies`
  and `facies_at_depth`, intrusion cooling and cooling time, contact aureole
  temperature, and reference values in `Conductivity` and `SpecificHeat`.
- `khanij.glaciology`: `GlacierType`, Glen's flow law, basal sliding
  velocity, mass balance, equilibrium line altitude, isostatic depression
  and rebound time, and depth-integrated ice velocity.
- `khanij.bridge`: conversions such as Mohs to Vickers hardness,
  porosity to Kozeny-Carman permeability, elastic moduli to P-wave velocity,
  element to oxide percentages and ore grade to yield.
- `khanij.errors`: the exception hierarchy rooted at `KhanijError`
  (`InvalidMineralError`, `InvalidCompositionError`,
  `InvalidHardnessError`, `ComputationError`).

Where an input has no meaningful answer, most functions return `None`
(for example `c14_age(0.0)`, `bragg_angle` when no diffraction is possible,
or `Formula.parse("")`). `d_spacing` raises `ValueError` for the index (0 0 0).

## Installation

```
pip install khanij
```

## Examples

```python
from khanij.formula import Formula
from khanij.crystallography import UnitCell, MillerIndex, d_spacing, bragg_angle
from khanij.dating import IsotopeSystem, c14_age, closure_temperature
from khanij.geochemistry import classify_tas, TasClassification
from khanij.geothermal import classify_facies, MetamorphicFacies

talc = Formula.parse("Mg₃Si₄O₁₀(OH)₂")
assert talc.count("O") == 12

gypsum = Formula.parse("CaSO4·2H2O")
assert gypsum.count("H") == 4

cell = UnitCell.halite()
d = d_spacing(cell, MillerIndex(1, 1, 1))
theta = bragg_angle(d, 1.5406)          # about 13.68 degrees

age = c14_age(0.5)                      # about 5730 years
tc = closure_temperature(IsotopeSystem.U238PB206, "zircon")   # 900.0

assert classify_tas(50.0, 3.0) is TasClassification.BASALT
assert classify_facies(600.0, 1.5) is MetamorphicFacies.ECLOGITE
```

## What it does not do

khanij is a library only: it has no command-line program, and it does not
store or load data files. Serialisation is limited to the `to_dict` /
`from_dict` methods of `UnitCell`, `MillerIndex` and `MajorOxides`.

## Running the tests

```
pip install -e ".[test]"
pytest
```