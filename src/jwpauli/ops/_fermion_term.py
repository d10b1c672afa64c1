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

"""FermionTerm stores the spin-orbital indices of one fermion term."""

import numpy


def _parse_indices(indices):
    """Check a sequence of indices and return it as a tuple of ints."""
    parsed = []
    for index in indices:
        if (isinstance(index, bool) or
                not isinstance(index, (int, numpy.integer)) or index < 0):
            raise ValueError('Invalid index {}. The index should be a '
                             'non-negative integer.'.format(index))
        parsed.append(int(index))
    return tuple(parsed)


class FermionTerm(object):
    r"""An ordered sequence of spin-orbital indices.

    Each index is the operand of a creation or annihilation operator. Which
    of the two it is follows from the symmetry class the term is filed
    under (see FermionTermType), so only the indices are stored. For
    instance the PQRS term a^\dagger_0 a^\dagger_2 a_3 a_1 is stored as
    FermionTerm((0, 2, 3, 1)).

    FermionTerm instances are immutable and hashable so that they can be
    used as keys of the coefficient dictionaries of a FermionHamiltonian.
    """

    def __init__(self, indices=()):
        """
        Args:
            indices (Sequence[int]): The spin-orbital indices, in operator
                order.

        Raises:
            ValueError: An index is not a non-negative integer.
        """
        self._indices = _parse_indices(indices)

    @property
    def indices(self):
        """The spin-orbital indices as a tuple."""
        return self._indices

    def __len__(self):
        return len(self._indices)

    def __iter__(self):
        return iter(self._indices)

    def __getitem__(self, item):
        return self._indices[item]

    def __eq__(self, other):
        if not isinstance(other, FermionTerm):
            return NotImplemented
        return self._indices == other._indices

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((FermionTerm, self._indices))

    def __str__(self):
        return ' '.join(str(index) for index in self._indices)

    def __repr__(self):
        return 'FermionTerm({})'.format(self._indices)
