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

"""Functions useful for tests."""

import itertools

import numpy

from jwpauli.ops import FermionHamiltonian, FermionTermType


def _pqrs_orderings(p, q, r, s):
    """The six orderings pqrs, psqr, prsq, qprs, spqr, prqs of p<q<r<s."""
    return [(p, q, r, s), (p, s, q, r), (p, r, s, q),
            (q, p, r, s), (s, p, q, r), (p, r, q, s)]


def random_fermion_hamiltonian(n_spin_orbitals, seed=None):
    """Generate a random, well-formed FermionHamiltonian.

    Every symmetry class is populated. One-body and PQQP terms are drawn for
    all index pairs, PQQR terms for every (p, q, r) with p < r and q apart
    from both, in one of the three index patterns the transform accepts, and
    PQRS terms for every p < q < r < s in one of the six canonical orderings.

    Args:
        n_spin_orbitals: The number of spin orbitals.
        seed: A random number generator seed.
    """
    prng = numpy.random.RandomState(seed)
    hamiltonian = FermionHamiltonian()

    hamiltonian.add_term(FermionTermType.IDENTITY, (), prng.randn())
    for p in range(n_spin_orbitals):
        hamiltonian.add_term(FermionTermType.PP, (p,), prng.randn())
    for p, q in itertools.permutations(range(n_spin_orbitals), 2):
        hamiltonian.add_term(FermionTermType.PQ, (p, q), prng.randn())
    for p, q in itertools.combinations(range(n_spin_orbitals), 2):
        hamiltonian.add_term(FermionTermType.PQQP, (p, q), prng.randn())

    for p, r in itertools.combinations(range(n_spin_orbitals), 2):
        for q in range(n_spin_orbitals):
            if q in (p, r):
                continue
            patterns = [(p, q, q, r), (q, p, r, q), (p, q, r, q)]
            term = patterns[prng.randint(len(patterns))]
            hamiltonian.add_term(FermionTermType.PQQR, term, prng.randn())

    for indices in itertools.combinations(range(n_spin_orbitals), 4):
        orderings = _pqrs_orderings(*indices)
        term = orderings[prng.randint(len(orderings))]
        hamiltonian.add_term(FermionTermType.PQRS, term, prng.randn())

    return hamiltonian
