# pdbqtdock

Building blocks for molecular docking code:

- AutoDock4 and X-Score atom typing tables and predicates (`pdbqtdock.atoms`);
- dense 3-D arrays and rectangular / strictly triangular matrices
  (`pdbqtdock.arrays`);
- random numbers, points and seeds drawn from a `random.Random` generator
  (`pdbqtdock.randomness`);
- quaternions and rotation helpers (`pdbqtdock.quaternion`);
- rigid-body and torsional conformations of ligands and flexible residues,
  and the changes applied to them (`pdbqtdock.conformation`).

## Installation

```
pip install .
```

Python 3.10 or later is required; the only runtime dependency is numpy.
To run the test suite:

```
pip install ".[test]"
pytest
```

## Atom types

```python
from pdbqtdock.atoms import (
    AD_TYPE_SIZE,
    ad_type_property,
    string_to_ad_type,
    xs_h_bond_possible,
    XS_TYPE_N_D,
    XS_TYPE_O_A,
)

oa = string_to_ad_type("OA")
print(ad_type_property(oa).covalent_radius)   # 0.73
print(string_to_ad_type("Se") == string_to_ad_type("S"))  # True
print(string_to_ad_type("Xx") == AD_TYPE_SIZE)            # True
print(xs_h_bond_possible(XS_TYPE_N_D, XS_TYPE_O_A))       # True
```

`string_to_ad_type` returns `AD_TYPE_SIZE` for names it does not know and
maps equivalent names such as `Se` onto `S`. `ad_type_property` returns the
`AtomKind` record (radius, depth, hydrogen-bond parameters, solvation, volume,
covalent radius) of a type and raises `ValueError` for an index outside the
table; `ad_type_to_el_type`, `xs_radius` and `xs_vinardo_radius` do the same
for unknown or out-of-range types. `Atom`, `Bond` and `AtomIndex` are plain
dataclasses for atom records.

## Arrays and matrices

`Array3D` stores a 3-D grid with the first index varying fastest and accepts
a `factory` for its initial cells. `Matrix` is column-major and can only grow
(`resize`, `append` of a diagonal block). `StrictlyTriangularMatrix` keeps the
cells above the diagonal; `append_blocks(rectangular, triangular)` extends it
by a coupling block and a new diagonal block. All of them are indexed with
`m[i, j]` (or `a[i, j, k]`) and raise `IndexError` outside their shape.
`checked_multiply(*sizes)` raises `MemoryError` when a product would not fit
in a 64-bit size.

## Geometry and conformations

```python
import math
import random

from pdbqtdock.quaternion import angle_to_quaternion, quaternion_to_r3, quaternion_to_angle
from pdbqtdock.conformation import Change, Conf, ConfSize

q = angle_to_quaternion([0.0, 0.0, math.pi / 2])
print(quaternion_to_r3(q).round(6))   # rotation by 90 degrees about z
print(quaternion_to_angle(q))         # [0. 0. 1.5707...]

size = ConfSize(ligands=[2], flex=[1])
print(size.num_degrees_of_freedom())  # 9

rng = random.Random(42)
conf = Conf.from_size(size)
conf.randomize((-5.0, -5.0, -5.0), (5.0, 5.0, 5.0), rng)

step = Change.from_size(size)
step[0] = 0.5                         # x of the first ligand's position
conf.increment(step, 1.0)
```

A `Change` is addressable as a flat sequence of floats: for each ligand three
position components, three orientation components and its torsions, then the
torsions of each flexible residue. `Conf.increment` normalizes torsions into
[-pi, pi]; `Conf.too_close` compares two conformations against a `Scale` of
position, orientation and torsion cutoffs. `OutputType` holds a pose with its
energy terms and sorts by energy `e`.

The sampling helpers in `pdbqtdock.randomness` (`random_fl`, `random_normal`,
`random_int`, `random_sz`, `random_inside_sphere`, `random_in_box`) take a
`random.Random` instance as their generator, so results are reproducible from
a seed; `auto_seed()` draws a seed from the operating system's entropy source.

## What this package does not do

The package has no PDBQT reader or writer and no command-line program: it
does not parse receptor, ligand or flexible-residue files, does not split
multi-model result files, and does not score or search for docking poses.
It provides the typing tables, containers and conformation arithmetic that
such tools are built on.