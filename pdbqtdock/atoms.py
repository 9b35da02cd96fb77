"""Atom type tables, type predicates and basic atom records."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import List, Tuple

Vec = Tuple[float, float, float]

MAX_SZ = sys.maxsize
MAX_FL = sys.float_info.max
MAX_VEC: Vec = (MAX_FL, MAX_FL, MAX_FL)

# Element types (hydrogen included)
EL_TYPE_H = 0
EL_TYPE_C = 1
EL_TYPE_N = 2
EL_TYPE_O = 3
EL_TYPE_S = 4
EL_TYPE_P = 5
EL_TYPE_F = 6
EL_TYPE_Cl = 7
EL_TYPE_Br = 8
EL_TYPE_I = 9
EL_TYPE_Si = 10
EL_TYPE_At = 11
EL_TYPE_Met = 12
EL_TYPE_Dummy = 13
EL_TYPE_SIZE = 14

# AutoDock4 types
AD_TYPE_C = 0
AD_TYPE_A = 1
AD_TYPE_N = 2
AD_TYPE_O = 3
AD_TYPE_P = 4
AD_TYPE_S = 5
AD_TYPE_H = 6  # non-polar hydrogen
AD_TYPE_F = 7
AD_TYPE_I = 8
AD_TYPE_NA = 9
AD_TYPE_OA = 10
AD_TYPE_SA = 11
AD_TYPE_HD = 12
AD_TYPE_Mg = 13
AD_TYPE_Mn = 14
AD_TYPE_Zn = 15
AD_TYPE_Ca = 16
AD_TYPE_Fe = 17
AD_TYPE_Cl = 18
AD_TYPE_Br = 19
AD_TYPE_Si = 20
AD_TYPE_At = 21
AD_TYPE_G0 = 22  # closure of cyclic molecules
AD_TYPE_G1 = 23
AD_TYPE_G2 = 24
AD_TYPE_G3 = 25
AD_TYPE_CG0 = 26
AD_TYPE_CG1 = 27
AD_TYPE_CG2 = 28
AD_TYPE_CG3 = 29
AD_TYPE_W = 30  # hydrated ligand
AD_TYPE_SIZE = 31

# X-Score types
XS_TYPE_C_H = 0
XS_TYPE_C_P = 1
XS_TYPE_N_P = 2
XS_TYPE_N_D = 3
XS_TYPE_N_A = 4
XS_TYPE_N_DA = 5
XS_TYPE_O_P = 6
XS_TYPE_O_D = 7
XS_TYPE_O_A = 8
XS_TYPE_O_DA = 9
XS_TYPE_S_P = 10
XS_TYPE_P_P = 11
XS_TYPE_F_H = 12
XS_TYPE_Cl_H = 13
XS_TYPE_Br_H = 14
XS_TYPE_I_H = 15
XS_TYPE_Si = 16
XS_TYPE_At = 17
XS_TYPE_Met_D = 18
XS_TYPE_C_H_CG0 = 19
XS_TYPE_C_P_CG0 = 20
XS_TYPE_G0 = 21
XS_TYPE_C_H_CG1 = 22
XS_TYPE_C_P_CG1 = 23
XS_TYPE_G1 = 24
XS_TYPE_C_H_CG2 = 25
XS_TYPE_C_P_CG2 = 26
XS_TYPE_G2 = 27
XS_TYPE_C_H_CG3 = 28
XS_TYPE_C_P_CG3 = 29
XS_TYPE_G3 = 30
XS_TYPE_W = 31
XS_TYPE_SIZE = 32

# DrugScore-CSD types
SY_TYPE_C_3 = 0
SY_TYPE_C_2 = 1
SY_TYPE_C_ar = 2
SY_TYPE_C_cat = 3
SY_TYPE_N_3 = 4
SY_TYPE_N_ar = 5
SY_TYPE_N_am = 6
SY_TYPE_N_pl3 = 7
SY_TYPE_O_3 = 8
SY_TYPE_O_2 = 9
SY_TYPE_O_co2 = 10
SY_TYPE_S = 11
SY_TYPE_P = 12
SY_TYPE_F = 13
SY_TYPE_Cl = 14
SY_TYPE_Br = 15
SY_TYPE_I = 16
SY_TYPE_Met = 17
SY_TYPE_SIZE = 18


@dataclass(frozen=True)
class AtomKind:
    """Force-field parameters of one AutoDock4 atom type."""

    name: str
    radius: float
    depth: float
    hb_depth: float  # pair (i, j) is an H-bond if hb_depth[i] * hb_depth[j] < 0
    hb_radius: float
    solvation: float
    volume: float
    covalent_radius: float


ATOM_KIND_DATA: Tuple[AtomKind, ...] = (
    AtomKind("C", 2.00000, 0.15000, 0.0, 0.0, -0.00143, 33.51030, 0.77),
    AtomKind("A", 2.00000, 0.15000, 0.0, 0.0, -0.00052, 33.51030, 0.77),
    AtomKind("N", 1.75000, 0.16000, 0.0, 0.0, -0.00162, 22.44930, 0.75),
    AtomKind("O", 1.60000, 0.20000, 0.0, 0.0, -0.00251, 17.15730, 0.73),
    AtomKind("P", 2.10000, 0.20000, 0.0, 0.0, -0.00110, 38.79240, 1.06),
    AtomKind("S", 2.00000, 0.20000, 0.0, 0.0, -0.00214, 33.51030, 1.02),
    AtomKind("H", 1.00000, 0.02000, 0.0, 0.0, 0.00051, 0.00000, 0.37),
    AtomKind("F", 1.54500, 0.08000, 0.0, 0.0, -0.00110, 15.44800, 0.71),
    AtomKind("I", 2.36000, 0.55000, 0.0, 0.0, -0.00110, 55.05850, 1.33),
    AtomKind("NA", 1.75000, 0.16000, -5.0, 1.9, -0.00162, 22.44930, 0.75),
    AtomKind("OA", 1.60000, 0.20000, -5.0, 1.9, -0.00251, 17.15730, 0.73),
    AtomKind("SA", 2.00000, 0.20000, -1.0, 2.5, -0.00214, 33.51030, 1.02),
    AtomKind("HD", 1.00000, 0.02000, 1.0, 0.0, 0.00051, 0.00000, 0.37),
    AtomKind("Mg", 0.65000, 0.87500, 0.0, 0.0, -0.00110, 1.56000, 1.30),
    AtomKind("Mn", 0.65000, 0.87500, 0.0, 0.0, -0.00110, 2.14000, 1.39),
    AtomKind("Zn", 0.74000, 0.55000, 0.0, 0.0, -0.00110, 1.70000, 1.31),
    AtomKind("Ca", 0.99000, 0.55000, 0.0, 0.0, -0.00110, 2.77000, 1.74),
    AtomKind("Fe", 0.65000, 0.01000, 0.0, 0.0, -0.00110, 1.84000, 1.25),
    AtomKind("Cl", 2.04500, 0.27600, 0.0, 0.0, -0.00110, 35.82350, 0.99),
    AtomKind("Br", 2.16500, 0.38900, 0.0, 0.0, -0.00110, 42.56610, 1.14),
    AtomKind("Si", 2.30000, 0.20000, 0.0, 0.0, -0.00143, 50.96500, 1.11),
    AtomKind("At", 2.40000, 0.55000, 0.0, 0.0, -0.00110, 57.90580, 1.44),
    AtomKind("G0", 0.00000, 0.00000, 0.0, 0.0, 0.00000, 0.00000, 0.77),
    AtomKind("G1", 0.00000, 0.00000, 0.0, 0.0, 0.00000, 0.00000, 0.77),
    AtomKind("G2", 0.00000, 0.00000, 0.0, 0.0, 0.00000, 0.00000, 0.77),
    AtomKind("G3", 0.00000, 0.00000, 0.0, 0.0, 0.00000, 0.00000, 0.77),
    AtomKind("CG0", 2.00000, 0.15000, 0.0, 0.0, -0.00143, 33.51030, 0.77),
    AtomKind("CG1", 2.00000, 0.15000, 0.0, 0.0, -0.00143, 33.51030, 0.77),
    AtomKind("CG2", 2.00000, 0.15000, 0.0, 0.0, -0.00143, 33.51030, 0.77),
    AtomKind("CG3", 2.00000, 0.15000, 0.0, 0.0, -0.00143, 33.51030, 0.77),
    AtomKind("W", 0.00000, 0.00000, 0.0, 0.0, 0.00000, 0.00000, 0.00),
)

METAL_SOLVATION_PARAMETER = -0.00110
METAL_COVALENT_RADIUS = 1.75  # for metals not in the table

ATOM_EQUIVALENCES = {"Se": "S"}

# (ad_type, optimal length, depth)
ACCEPTOR_KINDS: Tuple[Tuple[int, float, float], ...] = (
    (AD_TYPE_NA, 1.9, 5.0),
    (AD_TYPE_OA, 1.9, 5.0),
    (AD_TYPE_SA, 2.5, 1.0),
)

XS_VDW_RADII: Tuple[float, ...] = (
    1.9, 1.9, 1.8, 1.8, 1.8, 1.8, 1.7, 1.7, 1.7, 1.7,
    2.0, 2.1, 1.5, 1.8, 2.0, 2.2, 2.2, 2.3, 1.2,
    1.9, 1.9, 1.9, 1.9, 1.9, 1.9, 1.9, 1.9,
    0.0, 0.0, 0.0, 0.0, 0.0,
)

XS_VINARDO_VDW_RADII: Tuple[float, ...] = (
    2.0, 2.0, 1.7, 1.7, 1.7, 1.7, 1.6, 1.6, 1.6, 1.6,
    2.0, 2.1, 1.5, 1.8, 2.0, 2.2, 2.2, 2.3, 1.2,
    2.0, 2.0, 2.0, 2.0, 2.0, 2.0, 2.0, 2.0,
    0.0, 0.0, 0.0, 0.0, 0.0,
)

NON_AD_METAL_NAMES = frozenset({"Cu", "Fe", "Na", "K", "Hg", "Co", "U", "Cd", "Ni"})

_AD_TO_EL = {
    AD_TYPE_C: EL_TYPE_C,
    AD_TYPE_A: EL_TYPE_C,
    AD_TYPE_N: EL_TYPE_N,
    AD_TYPE_O: EL_TYPE_O,
    AD_TYPE_P: EL_TYPE_P,
    AD_TYPE_S: EL_TYPE_S,
    AD_TYPE_H: EL_TYPE_H,
    AD_TYPE_F: EL_TYPE_F,
    AD_TYPE_I: EL_TYPE_I,
    AD_TYPE_NA: EL_TYPE_N,
    AD_TYPE_OA: EL_TYPE_O,
    AD_TYPE_SA: EL_TYPE_S,
    AD_TYPE_HD: EL_TYPE_H,
    AD_TYPE_Mg: EL_TYPE_Met,
    AD_TYPE_Mn: EL_TYPE_Met,
    AD_TYPE_Zn: EL_TYPE_Met,
    AD_TYPE_Ca: EL_TYPE_Met,
    AD_TYPE_Fe: EL_TYPE_Met,
    AD_TYPE_Cl: EL_TYPE_Cl,
    AD_TYPE_Br: EL_TYPE_Br,
    AD_TYPE_Si: EL_TYPE_Si,
    AD_TYPE_At: EL_TYPE_At,
    AD_TYPE_CG0: EL_TYPE_C,
    AD_TYPE_CG1: EL_TYPE_C,
    AD_TYPE_CG2: EL_TYPE_C,
    AD_TYPE_CG3: EL_TYPE_C,
    AD_TYPE_G0: EL_TYPE_Dummy,
    AD_TYPE_G1: EL_TYPE_Dummy,
    AD_TYPE_G2: EL_TYPE_Dummy,
    AD_TYPE_G3: EL_TYPE_Dummy,
    AD_TYPE_W: EL_TYPE_Dummy,
    AD_TYPE_SIZE: EL_TYPE_SIZE,
}

_HYDROPHOBIC = frozenset({XS_TYPE_C_H, XS_TYPE_F_H, XS_TYPE_Cl_H, XS_TYPE_Br_H, XS_TYPE_I_H})
_ACCEPTORS = frozenset({XS_TYPE_N_A, XS_TYPE_N_DA, XS_TYPE_O_A, XS_TYPE_O_DA})
_DONORS = frozenset({XS_TYPE_N_D, XS_TYPE_N_DA, XS_TYPE_O_D, XS_TYPE_O_DA, XS_TYPE_Met_D})


def ad_is_hydrogen(ad: int) -> bool:
    return ad in (AD_TYPE_H, AD_TYPE_HD)


def ad_is_heteroatom(ad: int) -> bool:
    """True for non-carbon, non-hydrogen AD types; False for ad >= AD_TYPE_SIZE."""
    return ad not in (AD_TYPE_A, AD_TYPE_C, AD_TYPE_H, AD_TYPE_HD) and ad < AD_TYPE_SIZE


def ad_type_to_el_type(t: int) -> int:
    try:
        return _AD_TO_EL[t]
    except KeyError:
        raise ValueError(f"unknown AutoDock type {t!r}") from None


def _check_xs(t: int) -> None:
    if not 0 <= t < XS_TYPE_SIZE:
        raise ValueError(f"X-Score type {t!r} out of range")


def xs_radius(t: int) -> float:
    _check_xs(t)
    return XS_VDW_RADII[t]


def xs_vinardo_radius(t: int) -> float:
    _check_xs(t)
    return XS_VINARDO_VDW_RADII[t]


def is_non_ad_metal_name(name: str) -> bool:
    return name in NON_AD_METAL_NAMES


def xs_is_hydrophobic(xs: int) -> bool:
    return xs in _HYDROPHOBIC


def xs_is_acceptor(xs: int) -> bool:
    return xs in _ACCEPTORS


def xs_is_donor(xs: int) -> bool:
    return xs in _DONORS


def xs_donor_acceptor(t1: int, t2: int) -> bool:
    return xs_is_donor(t1) and xs_is_acceptor(t2)


def xs_h_bond_possible(t1: int, t2: int) -> bool:
    return xs_donor_acceptor(t1, t2) or xs_donor_acceptor(t2, t1)


def ad_type_property(i: int) -> AtomKind:
    if not 0 <= i < len(ATOM_KIND_DATA):
        raise ValueError(f"AutoDock type {i!r} out of range")
    return ATOM_KIND_DATA[i]


def string_to_ad_type(name: str) -> int:
    """Return the AD type of a name, or AD_TYPE_SIZE when it is not known."""
    for index, kind in enumerate(ATOM_KIND_DATA):
        if kind.name == name:
            return index
    if name in ATOM_EQUIVALENCES:
        return string_to_ad_type(ATOM_EQUIVALENCES[name])
    return AD_TYPE_SIZE


def max_covalent_radius() -> float:
    return max((kind.covalent_radius for kind in ATOM_KIND_DATA), default=0.0)


@dataclass(frozen=True)
class AtomIndex:
    """Index of an atom, either among movable atoms or among grid atoms."""

    i: int = MAX_SZ
    in_grid: bool = False


@dataclass
class Bond:
    connected_atom_index: AtomIndex = field(default_factory=AtomIndex)
    length: float = 0.0
    rotatable: bool = False


@dataclass
class Atom:
    """An atom with its types, partial charge, coordinates and bonds."""

    ad: int = AD_TYPE_SIZE
    xs: int = XS_TYPE_SIZE
    charge: float = 0.0
    coords: Vec = MAX_VEC
    bonds: List[Bond] = field(default_factory=list)