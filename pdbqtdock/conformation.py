"""Conformations of ligands and flexible residues, and changes applied to them."""

from __future__ import annotations

import copy
import math
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from pdbqtdock.quaternion import (
    QT_IDENTITY,
    Quaternion,
    normalized_angle,
    quaternion_difference,
    quaternion_increment,
    quaternion_to_r3,
    random_orientation,
)
from pdbqtdock.randomness import random_fl, random_in_box, random_inside_sphere


def _zero_vec() -> np.ndarray:
    return np.zeros(3, dtype=float)


def torsions_increment(torsions: Sequence[float], c: Sequence[float], factor: float) -> List[float]:
    """Torsions moved by factor * c, each result normalized into [-pi, pi]."""
    return [
        normalized_angle(t + normalized_angle(factor * dt))
        for t, dt in zip(torsions, c, strict=True)
    ]


def torsions_randomize(torsions: Sequence[float], generator: random.Random) -> List[float]:
    """As many uniformly random angles in [-pi, pi] as there are torsions."""
    return [random_fl(-math.pi, math.pi, generator) for _ in torsions]


def torsions_too_close(
    torsions1: Sequence[float], torsions2: Sequence[float], cutoff: float
) -> bool:
    """True when every pair of torsions differs by at most cutoff (modulo a turn)."""
    if len(torsions1) != len(torsions2):
        raise ValueError("torsion lists differ in length")
    return all(
        abs(normalized_angle(t1 - t2)) <= cutoff for t1, t2 in zip(torsions1, torsions2)
    )


def torsions_generate(
    torsions: Sequence[float],
    spread: float,
    rp: float,
    rs: Optional[Sequence[float]],
    generator: random.Random,
) -> List[float]:
    """Perturbed torsions; with probability rp each is taken from rs instead."""
    if rs is not None and len(rs) != len(torsions):
        raise ValueError("reference torsions differ in length")
    result = []
    for i, t in enumerate(torsions):
        if rs is not None and random_fl(0.0, 1.0, generator) < rp:
            result.append(rs[i])
        else:
            result.append(t + random_fl(-spread, spread, generator))
    return result


@dataclass
class Scale:
    position: float
    orientation: float
    torsion: float


@dataclass
class ConfSize:
    """Number of torsions of each ligand and each flexible residue."""

    ligands: List[int] = field(default_factory=list)
    flex: List[int] = field(default_factory=list)

    def num_degrees_of_freedom(self) -> int:
        return sum(self.ligands) + sum(self.flex) + 6 * len(self.ligands)


@dataclass(eq=False)
class RigidChange:
    position: np.ndarray = field(default_factory=_zero_vec)
    orientation: np.ndarray = field(default_factory=_zero_vec)


@dataclass(eq=False)
class RigidConf:
    """Position and orientation of a rigid body."""

    position: np.ndarray = field(default_factory=_zero_vec)
    orientation: Quaternion = QT_IDENTITY

    def set_to_null(self) -> None:
        self.position = _zero_vec()
        self.orientation = QT_IDENTITY

    def increment(self, c: RigidChange, factor: float) -> None:
        self.position = self.position + factor * np.asarray(c.position, dtype=float)
        rotation = factor * np.asarray(c.orientation, dtype=float)
        self.orientation = quaternion_increment(self.orientation, rotation)

    def randomize(
        self, corner1: Sequence[float], corner2: Sequence[float], generator: random.Random
    ) -> None:
        self.position = random_in_box(corner1, corner2, generator)
        self.orientation = random_orientation(generator)

    def too_close(self, c: "RigidConf", position_cutoff: float, orientation_cutoff: float) -> bool:
        diff = self.position - c.position
        if float(diff @ diff) > position_cutoff**2:
            return False
        rotation = quaternion_difference(self.orientation, c.orientation)
        if float(rotation @ rotation) > orientation_cutoff**2:
            return False
        return True

    def mutate_position(self, spread: float, generator: random.Random) -> None:
        self.position = self.position + spread * random_inside_sphere(generator)

    def mutate_orientation(self, spread: float, generator: random.Random) -> None:
        rotation = spread * random_inside_sphere(generator)
        self.orientation = quaternion_increment(self.orientation, rotation)

    def generate(
        self,
        position_spread: float,
        orientation_spread: float,
        rp: float,
        rs: Optional["RigidConf"],
        generator: random.Random,
    ) -> None:
        if rs is not None and random_fl(0.0, 1.0, generator) < rp:
            self.position = np.array(rs.position, dtype=float)
        else:
            self.mutate_position(position_spread, generator)
        if rs is not None and random_fl(0.0, 1.0, generator) < rp:
            self.orientation = rs.orientation
        else:
            self.mutate_orientation(orientation_spread, generator)

    def apply(self, coords: Sequence[Sequence[float]], begin: int, end: int) -> np.ndarray:
        """Rows begin..end of coords, rotated by the orientation and then translated."""
        points = np.asarray(coords, dtype=float).reshape(-1, 3)
        if not 0 <= begin <= end <= len(points):
            raise IndexError(f"range [{begin}, {end}) out of bounds for {len(points)} atoms")
        matrix = quaternion_to_r3(self.orientation)
        return points[begin:end] @ matrix.T + self.position


@dataclass(eq=False)
class LigandChange:
    rigid: RigidChange = field(default_factory=RigidChange)
    torsions: List[float] = field(default_factory=list)


@dataclass(eq=False)
class LigandConf:
    rigid: RigidConf = field(default_factory=RigidConf)
    torsions: List[float] = field(default_factory=list)

    def set_to_null(self) -> None:
        self.rigid.set_to_null()
        self.torsions = [0.0] * len(self.torsions)

    def increment(self, c: LigandChange, factor: float) -> None:
        self.rigid.increment(c.rigid, factor)
        self.torsions = torsions_increment(self.torsions, c.torsions, factor)

    def randomize(
        self, corner1: Sequence[float], corner2: Sequence[float], generator: random.Random
    ) -> None:
        self.rigid.randomize(corner1, corner2, generator)
        self.torsions = torsions_randomize(self.torsions, generator)


@dataclass(eq=False)
class ResidueChange:
    torsions: List[float] = field(default_factory=list)


@dataclass(eq=False)
class ResidueConf:
    torsions: List[float] = field(default_factory=list)

    def set_to_null(self) -> None:
        self.torsions = [0.0] * len(self.torsions)

    def increment(self, c: ResidueChange, factor: float) -> None:
        self.torsions = torsions_increment(self.torsions, c.torsions, factor)

    def randomize(self, generator: random.Random) -> None:
        self.torsions = torsions_randomize(self.torsions, generator)


_Slot = Tuple[Union[np.ndarray, List[float]], int]


@dataclass(eq=False)
class Change:
    """A direction in conformation space, addressable as a flat sequence of floats."""

    ligands: List[LigandChange] = field(default_factory=list)
    flex: List[ResidueChange] = field(default_factory=list)

    @staticmethod
    def from_size(size: ConfSize) -> "Change":
        return Change(
            ligands=[LigandChange(torsions=[0.0] * n) for n in size.ligands],
            flex=[ResidueChange(torsions=[0.0] * n) for n in size.flex],
        )

    def _locate(self, index: int) -> _Slot:
        if index < 0:
            raise IndexError(f"index {index} out of range")
        rest = index
        for lig in self.ligands:
            if rest < 3:
                return lig.rigid.position, rest
            rest -= 3
            if rest < 3:
                return lig.rigid.orientation, rest
            rest -= 3
            if rest < len(lig.torsions):
                return lig.torsions, rest
            rest -= len(lig.torsions)
        for res in self.flex:
            if rest < len(res.torsions):
                return res.torsions, rest
            rest -= len(res.torsions)
        raise IndexError(f"index {index} out of range")

    def __getitem__(self, index: int) -> float:
        container, offset = self._locate(index)
        return float(container[offset])

    def __setitem__(self, index: int, value: float) -> None:
        container, offset = self._locate(index)
        container[offset] = value

    def num_floats(self) -> int:
        return sum(6 + len(lig.torsions) for lig in self.ligands) + sum(
            len(res.torsions) for res in self.flex
        )

    def __len__(self) -> int:
        return self.num_floats()


@dataclass(eq=False)
class Conf:
    """The full conformation: rigid pose and torsions of ligands, torsions of residues."""

    ligands: List[LigandConf] = field(default_factory=list)
    flex: List[ResidueConf] = field(default_factory=list)

    @staticmethod
    def from_size(size: ConfSize) -> "Conf":
        return Conf(
            ligands=[LigandConf(torsions=[0.0] * n) for n in size.ligands],
            flex=[ResidueConf(torsions=[0.0] * n) for n in size.flex],
        )

    def copy(self) -> "Conf":
        return copy.deepcopy(self)

    def set_to_null(self) -> None:
        for lig in self.ligands:
            lig.set_to_null()
        for res in self.flex:
            res.set_to_null()

    def increment(self, c: Change, factor: float) -> None:
        """Move along c; torsions are normalized, orientations are not."""
        for lig, lig_change in zip(self.ligands, c.ligands, strict=True):
            lig.increment(lig_change, factor)
        for res, res_change in zip(self.flex, c.flex, strict=True):
            res.increment(res_change, factor)

    def internal_too_close(self, c: "Conf", torsions_cutoff: float) -> bool:
        if len(self.ligands) != len(c.ligands):
            raise ValueError("conformations have different numbers of ligands")
        return all(
            torsions_too_close(a.torsions, b.torsions, torsions_cutoff)
            for a, b in zip(self.ligands, c.ligands)
        )

    def external_too_close(self, c: "Conf", cutoff: Scale) -> bool:
        if len(self.ligands) != len(c.ligands):
            raise ValueError("conformations have different numbers of ligands")
        for a, b in zip(self.ligands, c.ligands):
            if not a.rigid.too_close(b.rigid, cutoff.position, cutoff.orientation):
                return False
        if len(self.flex) != len(c.flex):
            raise ValueError("conformations have different numbers of flexible residues")
        return all(
            torsions_too_close(a.torsions, b.torsions, cutoff.torsion)
            for a, b in zip(self.flex, c.flex)
        )

    def too_close(self, c: "Conf", cutoff: Scale) -> bool:
        return self.internal_too_close(c, cutoff.torsion) and self.external_too_close(c, cutoff)

    def generate_internal(
        self,
        torsion_spread: float,
        rp: float,
        rs: Optional["Conf"],
        generator: random.Random,
    ) -> None:
        """Reset ligand poses and perturb ligand torsions (left unnormalized)."""
        for i, lig in enumerate(self.ligands):
            lig.rigid.position = _zero_vec()
            lig.rigid.orientation = QT_IDENTITY
            reference = rs.ligands[i].torsions if rs is not None else None
            lig.torsions = torsions_generate(lig.torsions, torsion_spread, rp, reference, generator)

    def generate_external(
        self, spread: Scale, rp: float, rs: Optional["Conf"], generator: random.Random
    ) -> None:
        """Perturb ligand poses and residue torsions (left unnormalized)."""
        for i, lig in enumerate(self.ligands):
            reference = rs.ligands[i].rigid if rs is not None else None
            lig.rigid.generate(spread.position, spread.orientation, rp, reference, generator)
        for i, res in enumerate(self.flex):
            reference_torsions = rs.flex[i].torsions if rs is not None else None
            res.torsions = torsions_generate(
                res.torsions, spread.torsion, rp, reference_torsions, generator
            )

    def randomize(
        self, corner1: Sequence[float], corner2: Sequence[float], generator: random.Random
    ) -> None:
        for lig in self.ligands:
            lig.randomize(corner1, corner2, generator)
        for res in self.flex:
            res.randomize(generator)


@dataclass(eq=False)
class OutputType:
    """A resulting pose with its energy terms; poses order by energy e."""

    c: Conf
    e: float
    lb: float = 0.0
    ub: float = 0.0
    intra: float = 0.0
    inter: float = 0.0
    conf_independent: float = 0.0
    unbound: float = 0.0
    total: float = 0.0
    coords: List[np.ndarray] = field(default_factory=list)

    def __lt__(self, other: "OutputType") -> bool:
        return self.e < other.e