import pytest

from pdbqtdock import atoms
from pdbqtdock.atoms import (
    Atom,
    AtomIndex,
    Bond,
    ad_is_heteroatom,
    ad_is_hydrogen,
    ad_type_property,
    ad_type_to_el_type,
    is_non_ad_metal_name,
    max_covalent_radius,
    string_to_ad_type,
    xs_donor_acceptor,
    xs_h_bond_possible,
    xs_is_acceptor,
    xs_is_donor,
    xs_is_hydrophobic,
    xs_radius,
    xs_vinardo_radius,
)


def test_table_sizes_match_type_counts():
    kinds = [ad_type_property(i) for i in range(atoms.AD_TYPE_SIZE)]
    assert kinds == list(atoms.ATOM_KIND_DATA)
    radii = [xs_radius(t) for t in range(atoms.XS_TYPE_SIZE)]
    assert radii == list(atoms.XS_VDW_RADII)
    vinardo = [xs_vinardo_radius(t) for t in range(atoms.XS_TYPE_SIZE)]
    assert vinardo == list(atoms.XS_VINARDO_VDW_RADII)


def test_string_to_ad_type_roundtrip():
    for index, kind in enumerate(atoms.ATOM_KIND_DATA):
        assert string_to_ad_type(kind.name) == index
        assert ad_type_property(index) is kind


def test_string_to_ad_type_equivalence_and_unknown():
    assert string_to_ad_type("Se") == atoms.AD_TYPE_S
    assert string_to_ad_type("Cu") == atoms.AD_TYPE_SIZE
    assert string_to_ad_type("c") == atoms.AD_TYPE_SIZE


def test_ad_type_property_out_of_range():
    with pytest.raises(ValueError):
        ad_type_property(atoms.AD_TYPE_SIZE)


def test_hydrogen_and_heteroatom_predicates():
    assert ad_is_hydrogen(atoms.AD_TYPE_H)
    assert ad_is_hydrogen(atoms.AD_TYPE_HD)
    assert not ad_is_hydrogen(atoms.AD_TYPE_C)
    assert ad_is_heteroatom(atoms.AD_TYPE_OA)
    assert not ad_is_heteroatom(atoms.AD_TYPE_A)
    assert not ad_is_heteroatom(atoms.AD_TYPE_HD)
    assert not ad_is_heteroatom(atoms.AD_TYPE_SIZE)


def test_ad_type_to_el_type():
    assert ad_type_to_el_type(atoms.AD_TYPE_A) == atoms.EL_TYPE_C
    assert ad_type_to_el_type(atoms.AD_TYPE_NA) == atoms.EL_TYPE_N
    assert ad_type_to_el_type(atoms.AD_TYPE_Zn) == atoms.EL_TYPE_Met
    assert ad_type_to_el_type(atoms.AD_TYPE_G2) == atoms.EL_TYPE_Dummy
    assert ad_type_to_el_type(atoms.AD_TYPE_SIZE) == atoms.EL_TYPE_SIZE
    with pytest.raises(ValueError):
        ad_type_to_el_type(atoms.AD_TYPE_SIZE + 1)


def test_xs_radii():
    assert xs_radius(atoms.XS_TYPE_C_H) == 1.9
    assert xs_radius(atoms.XS_TYPE_Met_D) == 1.2
    assert xs_vinardo_radius(atoms.XS_TYPE_C_H) == 2.0
    assert xs_vinardo_radius(atoms.XS_TYPE_W) == 0.0
    with pytest.raises(ValueError):
        xs_radius(atoms.XS_TYPE_SIZE)
    with pytest.raises(ValueError):
        xs_vinardo_radius(-1)


def test_non_ad_metal_names_are_case_sensitive():
    assert is_non_ad_metal_name("Fe")
    assert is_non_ad_metal_name("Cu")
    assert not is_non_ad_metal_name("fe")
    assert not is_non_ad_metal_name("Zn")


def test_xs_donor_acceptor_predicates():
    assert xs_is_hydrophobic(atoms.XS_TYPE_Cl_H)
    assert not xs_is_hydrophobic(atoms.XS_TYPE_C_P)
    assert xs_is_acceptor(atoms.XS_TYPE_O_A)
    assert xs_is_donor(atoms.XS_TYPE_Met_D)
    assert not xs_is_acceptor(atoms.XS_TYPE_Met_D)
    assert xs_donor_acceptor(atoms.XS_TYPE_N_D, atoms.XS_TYPE_O_A)
    assert not xs_donor_acceptor(atoms.XS_TYPE_O_A, atoms.XS_TYPE_N_D)


def test_h_bond_possible_is_symmetric():
    types = range(atoms.XS_TYPE_SIZE)
    for a in types:
        for b in types:
            assert xs_h_bond_possible(a, b) == xs_h_bond_possible(b, a)
    assert xs_h_bond_possible(atoms.XS_TYPE_O_A, atoms.XS_TYPE_N_D)
    assert not xs_h_bond_possible(atoms.XS_TYPE_C_H, atoms.XS_TYPE_O_A)


def test_max_covalent_radius_is_table_maximum():
    result = max_covalent_radius()
    assert result == 1.74
    assert all(kind.covalent_radius <= result for kind in atoms.ATOM_KIND_DATA)


def test_atom_index_defaults_and_equality():
    default = AtomIndex()
    assert default.i == atoms.MAX_SZ
    assert default.in_grid is False
    assert AtomIndex(3, True) == AtomIndex(3, True)
    assert not AtomIndex(3, True) == AtomIndex(3, False)


def test_bond_and_atom_defaults():
    bond = Bond()
    assert bond.length == 0.0
    assert bond.rotatable is False
    assert bond.connected_atom_index == AtomIndex()

    atom = Atom()
    assert atom.charge == 0.0
    assert atom.coords == atoms.MAX_VEC
    assert atom.ad == atoms.AD_TYPE_SIZE
    assert atom.bonds == []
    other = Atom()
    atom.bonds.append(Bond(AtomIndex(1, False), 1.5, True))
    assert other.bonds == []