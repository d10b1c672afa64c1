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

"""PauliTerm stores one compact Pauli term acting on qubits."""

from jwpauli.ops._fermion_term import _parse_indices
from jwpauli.ops._term_types import PauliTermType


class PauliTerm(object):
    """A Pauli structure tag together with the qubit indices it acts on.

    The tag names a fixed product of Pauli operators, e.g. a PauliTerm of
    type ZZ on (1, 2) is Z_1 Z_2, while a PauliTerm of type PQ on (0, 3)
    stands for the Jordan-Wigner string of the excitation between qubits 0
    and 3. The order of the indices is kept as given.
    """

    def __init__(self, indices=(), term_type=PauliTermType.IDENTITY):
        """
        Args:
            indices (Sequence[int]): The qubit indices.
            term_type (PauliTermType): The Pauli structure of the term.

        Raises:
            ValueError: An index is not a non-negative integer.
            TypeError: term_type is not a PauliTermType.
        """
        if not isinstance(term_type, PauliTermType):
            raise TypeError('term_type must be a PauliTermType, '
                            'not {}.'.format(type(term_type).__name__))
        self._indices = _parse_indices(indices)
        self._term_type = term_type

    @property
    def indices(self):
        """The qubit indices as a tuple."""
        return self._indices

    @property
    def term_type(self):
        """The PauliTermType of the term."""
        return self._term_type

    def __len__(self):
        return len(self._indices)

    def __eq__(self, other):
        if not isinstance(other, PauliTerm):
            return NotImplemented
        return (self._term_type == other._term_type and
                self._indices == other._indices)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((PauliTerm, self._term_type, self._indices))

    def __str__(self):
        return '{}{}'.format(self._term_type.name, self._indices)

    def __repr__(self):
        return 'PauliTerm({}, {})'.format(self._indices, self._term_type)
