#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.

"""Tags for the symmetry classes of fermion terms and Pauli terms."""

from enum import Enum


class FermionTermType(Enum):
    r"""Symmetry class of a fermion term.

    The class fixes both the number of spin-orbital indices in the term and
    the Jordan-Wigner rule used to convert it:

        IDENTITY: constant term, no indices.
        PP: number operator a^\dagger_p a_p.
        PQ: excitation a^\dagger_p a_q.
        PQQP: density-density a^\dagger_p a^\dagger_q a_q a_p.
        PQQR: two-body term with one repeated index.
        PQRS: two-body term on four distinct indices.
    """

    IDENTITY = 0
    PP = 1
    PQ = 2
    PQQP = 3
    PQQR = 4
    PQRS = 5

    @property
    def arity(self):
        """The number of spin-orbital indices a term of this class has."""
        return _FERMION_TERM_ARITY[self]


_FERMION_TERM_ARITY = {
    FermionTermType.IDENTITY: 0,
    FermionTermType.PP: 1,
    FermionTermType.PQ: 2,
    FermionTermType.PQQP: 2,
    FermionTermType.PQQR: 4,
    FermionTermType.PQRS: 4,
}


class PauliTermType(Enum):
    """Structure of a compact Pauli term.

        IDENTITY: the identity on all qubits.
        Z: Z_p.
        ZZ: Z_p Z_q.
        PQ: Jordan-Wigner string of a one-body excitation between p and q.
        PQQR: Jordan-Wigner string of a one-body excitation between p and r
            weighted by Z_q.
        V01234: the four-term antisymmetrized two-body operator on p<q<r<s,
            which carries a vector of four coefficients.
    """

    IDENTITY = 0
    Z = 1
    ZZ = 2
    PQ = 3
    PQQR = 4
    V01234 = 5


class Encoding(Enum):
    """Fermion-to-qubit encodings."""

    JORDAN_WIGNER = 0
