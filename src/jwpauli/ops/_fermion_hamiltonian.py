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

"""FermionHamiltonian stores classified fermion terms and coefficients."""

import numpy

from jwpauli.ops._fermion_term import FermionTerm
from jwpauli.ops._symbolic_hamiltonian import SymbolicHamiltonian
from jwpauli.ops._term_types import FermionTermType

COEFFICIENT_TYPES = (int, float, numpy.integer, numpy.floating)


class FermionHamiltonian(SymbolicHamiltonian):
    """A fermion Hamiltonian whose terms are filed by symmetry class.

    FermionHamiltonian is a subclass of SymbolicHamiltonian with
    term_types = FermionTermType. Terms are FermionTerm instances and
    coefficients are real numbers. Adding a term records its indices in
    system_indices.

    Example:
        .. code-block:: python

            ham = FermionHamiltonian()
            ham.add_term(FermionTermType.PP, [0], -1.25)
            ham.add_term(FermionTermType.PQQP, [0, 1], 0.67)
            ham.add_term(FermionTermType.PQRS, [0, 2, 3, 1], 0.18)

    Note:
        The number of indices of a term is not checked against its symmetry
        class here; the Jordan-Wigner transform rejects malformed terms.
    """
    term_types = FermionTermType

    def __init__(self, terms=None, system_indices=None):
        super(FermionHamiltonian, self).__init__(
            system_indices=system_indices)
        if terms is not None:
            for term_type, bucket in terms.items():
                for term, coefficient in bucket.items():
                    self.add_term(term_type, term, coefficient)

    def add_term(self, term_type, term, coefficient=1.):
        """Add a fermion term to the bucket of its symmetry class.

        Args:
            term_type (FermionTermType): The symmetry class of the term.
            term (FermionTerm or Sequence[int]): The spin-orbital indices.
            coefficient (float): The real coefficient of the term.

        Raises:
            ValueError: Coefficient is not a real number.
            SymbolicHamiltonianError: term_type is not a FermionTermType.
        """
        if (isinstance(coefficient, bool) or
                not isinstance(coefficient, COEFFICIENT_TYPES)):
            raise ValueError('Coefficient must be a real numeric type.')
        if not isinstance(term, FermionTerm):
            term = FermionTerm(term)
        self._add_term(term_type, term, coefficient)
        self.system_indices.update(term.indices)

    @property
    def n_spin_orbitals(self):
        """The number of spin orbitals implied by system_indices."""
        if not self.system_indices:
            return 0
        return max(self.system_indices) + 1
