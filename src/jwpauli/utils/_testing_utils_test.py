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

import itertools
import unittest

from jwpauli.ops import FermionTermType

from jwpauli.utils._testing_utils import random_fermion_hamiltonian


class RandomFermionHamiltonianTest(unittest.TestCase):

    def setUp(self):
        self.n_spin_orbitals = 5
        self.hamiltonian = random_fermion_hamiltonian(self.n_spin_orbitals,
                                                      seed=11)

    def test_every_class_is_present(self):
        self.assertEqual(set(self.hamiltonian.terms), set(FermionTermType))

    def test_term_counts(self):
        n = self.n_spin_orbitals
        counts = {term_type: len(bucket)
                  for term_type, bucket in self.hamiltonian.terms.items()}
        self.assertEqual(counts[FermionTermType.IDENTITY], 1)
        self.assertEqual(counts[FermionTermType.PP], n)
        self.assertEqual(counts[FermionTermType.PQ], n * (n - 1))
        self.assertEqual(counts[FermionTermType.PQQP], n * (n - 1) // 2)
        self.assertEqual(counts[FermionTermType.PQRS], 5)

    def test_terms_have_the_arity_of_their_class(self):
        for term_type, term, _ in self.hamiltonian.iter_terms():
            self.assertEqual(len(term), term_type.arity)

    def test_pqqr_terms_have_a_repeated_index(self):
        for term in self.hamiltonian.terms[FermionTermType.PQQR]:
            self.assertTrue(term[0] == term[3] or term[1] == term[3] or
                            term[1] == term[2])
            self.assertEqual(len(set(term)), 3)

    def test_pqrs_terms_are_canonical_orderings(self):
        for term in self.hamiltonian.terms[FermionTermType.PQRS]:
            p, q, r, s = sorted(term)
            self.assertIn(term.indices, [(p, q, r, s), (p, s, q, r),
                                         (p, r, s, q), (q, p, r, s),
                                         (s, p, q, r), (p, r, q, s)])

    def test_system_indices(self):
        self.assertEqual(self.hamiltonian.system_indices,
                         set(range(self.n_spin_orbitals)))

    def test_seed_is_reproducible(self):
        self.assertEqual(
            random_fermion_hamiltonian(self.n_spin_orbitals, seed=11),
            self.hamiltonian)

    def test_small_systems(self):
        hamiltonian = random_fermion_hamiltonian(2, seed=0)
        self.assertNotIn(FermionTermType.PQQR, hamiltonian.terms)
        self.assertNotIn(FermionTermType.PQRS, hamiltonian.terms)
        self.assertEqual(
            sorted(term.indices for term in
                   hamiltonian.terms[FermionTermType.PQ]),
            sorted(itertools.permutations(range(2), 2)))
