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

"""PauliHamiltonian stores compact Pauli terms and coefficients."""

import numpy

from jwpauli.ops._pauli_term import PauliTerm
from jwpauli.ops._fermion_hamiltonian import COEFFICIENT_TYPES
from jwpauli.ops._symbolic_hamiltonian import (SymbolicHamiltonian,
                                               SymbolicHamiltonianError)
from jwpauli.ops._term_types import PauliTermType


class PauliHamiltonian(SymbolicHamiltonian):
    """A qubit Hamiltonian whose terms are compact Pauli terms.

    Terms are filed under their own PauliTermType. Every term carries a
    real coefficient, except V01234 terms which carry four coefficients,
    one for each of the Pauli strings of the antisymmetrized two-body
    operator; those are stored as numpy arrays of shape (4,) so that
    recurring terms sum element-wise.

    system_indices is not derived from the terms. Transforms copy it over
    from the fermion Hamiltonian they convert.
    """
    term_types = PauliTermType

    def __init__(self, terms=None, system_indices=None):
        super(PauliHamiltonian, self).__init__(
            system_indices=system_indices)
        if terms is not None:
            for term_type, bucket in terms.items():
                for term, coefficient in bucket.items():
                    if (isinstance(term, PauliTerm) and
                            term.term_type is not term_type):
                        raise SymbolicHamiltonianError(
                            'Term {} filed under {}.'.format(
                                term, term_type))
                    self.add_term(term, coefficient)

    def _coerce_coefficient(self, term_type, coefficient):
        if term_type is PauliTermType.V01234:
            try:
                coefficient = numpy.array(coefficient, dtype=float)
            except (TypeError, ValueError):
                raise ValueError('V01234 coefficients must be real numbers, '
                                 'got {}.'.format(coefficient))
            if coefficient.shape != (4,):
                raise ValueError('V01234 terms need four coefficients, '
                                 'got shape {}.'.format(coefficient.shape))
        elif numpy.ndim(coefficient) != 0:
            raise ValueError('{} terms need a scalar coefficient.'.format(
                term_type.name))
        elif (isinstance(coefficient, bool) or
              not isinstance(coefficient, COEFFICIENT_TYPES)):
            raise ValueError('Coefficient must be a real numeric type.')
        return coefficient

    def add_term(self, term, coefficient=1.):
        """Add coefficient to the bucket of term.term_type.

        Args:
            term (PauliTerm): The Pauli term.
            coefficient (float or Sequence[float]): A scalar, or four
                coefficients for a V01234 term.
        """
        if not isinstance(term, PauliTerm):
            raise TypeError('term must be a PauliTerm, not {}.'.format(
                type(term).__name__))
        self._add_term(term.term_type, term, coefficient)

    def add_terms(self, pauli_terms):
        """Add a list of (PauliTerm, coefficient) pairs."""
        for term, coefficient in pauli_terms:
            self.add_term(term, coefficient)

    @property
    def n_qubits(self):
        """The number of qubits implied by system_indices."""
        if not self.system_indices:
            return 0
        return max(self.system_indices) + 1

    def _format_term(self, term_type, term):
        return str(term)
