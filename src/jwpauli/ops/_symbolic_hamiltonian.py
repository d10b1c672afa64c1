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

"""SymbolicHamiltonian is the base class for FermionHamiltonian and
PauliHamiltonian."""
import copy

import numpy

from jwpauli.config import EQ_TOLERANCE


class SymbolicHamiltonianError(Exception):
    pass


class SymbolicHamiltonian(object):
    """Base class for FermionHamiltonian and PauliHamiltonian.

    A SymbolicHamiltonian stores a weighted sum of terms, bucketed by the
    type tag of the term. For FermionHamiltonian the tag is the symmetry
    class of a fermion term (FermionTermType), for PauliHamiltonian it is
    the Pauli structure of a compact Pauli term (PauliTermType).

    Attributes:
        term_types (type): The Enum whose members are the allowed tags.
            This should be defined in the subclass.
        terms (dict):
            **key** (Enum member): The tag of the bucket.
            **value** (dict): Maps each term of the bucket to its
            coefficient.
        system_indices (set): The distinct spin-orbital (or qubit) indices
            the Hamiltonian is defined on.
    """
    term_types = None

    def __init__(self, terms=None, system_indices=None):
        self.terms = {}
        self.system_indices = set()
        if terms is not None:
            for term_type, bucket in terms.items():
                for term, coefficient in bucket.items():
                    self._add_term(term_type, term, coefficient)
        if system_indices is not None:
            self.system_indices.update(system_indices)

    def _coerce_coefficient(self, term_type, coefficient):
        """Return the coefficient in the form it is stored in."""
        return coefficient

    def _add_term(self, term_type, term, coefficient):
        """Add coefficient to the bucket of term_type, summing with any
        coefficient already stored for term."""
        if not isinstance(term_type, self.term_types):
            raise SymbolicHamiltonianError(
                'Invalid term type {}. Valid term types are: {}'.format(
                    term_type, [t.name for t in self.term_types]))
        coefficient = self._coerce_coefficient(term_type, coefficient)
        bucket = self.terms.setdefault(term_type, {})
        if term in bucket:
            bucket[term] = bucket[term] + coefficient
        else:
            bucket[term] = coefficient

    @property
    def n_terms(self):
        """The number of distinct terms over all buckets."""
        return sum(len(bucket) for bucket in self.terms.values())

    def iter_terms(self):
        """Iterate over (term_type, term, coefficient) triples."""
        for term_type, bucket in self.terms.items():
            for term, coefficient in bucket.items():
                yield term_type, term, coefficient

    def get_term_groups(self, num_groups):
        """Split the terms into groups of roughly equal size.

        Args:
            num_groups (int): The number of groups to split into.

        Returns:
            term_groups (list): At most num_groups non-empty lists of
                (term_type, term, coefficient) triples.
        """
        if num_groups <= 0:
            raise ValueError('Invalid number of groups {} <= 0.'.format(
                num_groups))
        triples = list(self.iter_terms())
        group_size = max(-(-len(triples) // num_groups), 1)
        return [triples[start:start + group_size]
                for start in range(0, len(triples), group_size)]

    def __iadd__(self, addend):
        """In-place merge (+=) of a Hamiltonian of the same type.

        Coefficients of terms present in both are summed and the system
        indices are joined.

        Raises:
            TypeError: Cannot add invalid type.
        """
        if not isinstance(addend, type(self)):
            raise TypeError('Cannot add invalid type to {}.'.format(
                type(self).__name__))
        for term_type, term, coefficient in addend.iter_terms():
            self._add_term(term_type, term, coefficient)
        self.system_indices.update(addend.system_indices)
        return self

    def __add__(self, addend):
        summand = copy.deepcopy(self)
        summand += addend
        return summand

    def compress(self, abs_tol=EQ_TOLERANCE):
        """Eliminate all terms whose coefficients are all close to zero.

        Args:
            abs_tol(float): Absolute tolerance, must be at least 0.0
        """
        for term_type in list(self.terms):
            bucket = self.terms[term_type]
            kept = {term: coefficient
                    for term, coefficient in bucket.items()
                    if numpy.any(numpy.abs(coefficient) > abs_tol)}
            if kept:
                self.terms[term_type] = kept
            else:
                del self.terms[term_type]

    def isclose(self, other, rel_tol=EQ_TOLERANCE, abs_tol=EQ_TOLERANCE):
        """Returns True if other (SymbolicHamiltonian) is close to self.

        Comparison is done for each term individually, and terms present in
        only one of the two are compared to zero. System indices must match
        exactly.

        Args:
            other(SymbolicHamiltonian): Hamiltonian to compare against.
            rel_tol(float): Relative tolerance, must be greater than 0.0
            abs_tol(float): Absolute tolerance, must be at least 0.0
        """
        if not isinstance(other, type(self)):
            raise TypeError('Cannot compare a {} with a {}'.format(
                type(self).__name__, type(other).__name__))
        if self.system_indices != other.system_indices:
            return False
        for term_type in set(self.terms).union(other.terms):
            ours = self.terms.get(term_type, {})
            theirs = other.terms.get(term_type, {})
            for term in set(ours).union(theirs):
                a = ours.get(term, 0.0)
                b = theirs.get(term, 0.0)
                if not numpy.allclose(a, b, rtol=rel_tol, atol=abs_tol):
                    return False
        return True

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.isclose(other)

    def __ne__(self, other):
        return not self == other

    def __str__(self):
        """Return an easy-to-read string representation."""
        if not self.terms:
            return '0'
        lines = []
        for term_type, term, coefficient in self.iter_terms():
            lines.append('{} [{}]'.format(
                _format_coefficient(coefficient),
                self._format_term(term_type, term)))
        return ' +\n'.join(lines)

    def __repr__(self):
        return str(self)

    def _format_term(self, term_type, term):
        return '{} {}'.format(term_type.name, term).strip()


def _format_coefficient(coefficient):
    if isinstance(coefficient, numpy.ndarray):
        return '({})'.format(', '.join(str(c) for c in coefficient))
    return str(coefficient)
