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

import copy
import pickle
import unittest

import numpy

from jwpauli.ops._fermion_hamiltonian import FermionHamiltonian
from jwpauli.ops._pauli_hamiltonian import PauliHamiltonian
from jwpauli.ops._symbolic_hamiltonian import SymbolicHamiltonianError
from jwpauli.ops._pauli_term import PauliTerm
from jwpauli.ops._term_types import PauliTermType


class PauliHamiltonianTest(unittest.TestCase):

    def setUp(self):
        self.identity = PauliTerm((), PauliTermType.IDENTITY)
        self.z3 = PauliTerm((3,), PauliTermType.Z)
        self.v0123 = PauliTerm((0, 1, 2, 3), PauliTermType.V01234)

    def test_add_term_buckets_by_own_type(self):
        hamiltonian = PauliHamiltonian()
        hamiltonian.add_term(self.identity, 0.5)
        hamiltonian.add_term(self.z3, -0.5)
        self.assertEqual(hamiltonian.terms, {
            PauliTermType.IDENTITY: {self.identity: 0.5},
            PauliTermType.Z: {self.z3: -0.5}})
        self.assertEqual(hamiltonian.system_indices, set())

    def test_add_terms_sums_recurring_terms(self):
        hamiltonian = PauliHamiltonian()
        hamiltonian.add_terms([(self.identity, 0.5), (self.z3, -0.5),
                               (self.identity, 1.5)])
        self.assertEqual(hamiltonian.terms[PauliTermType.IDENTITY],
                         {self.identity: 2.})
        self.assertEqual(hamiltonian.n_terms, 2)

    def test_v01234_coefficients_are_vectors(self):
        hamiltonian = PauliHamiltonian()
        hamiltonian.add_term(self.v0123, (1., 1., -1., 1.))
        hamiltonian.add_term(self.v0123, (0.5, 0., 0., -1.))
        coefficient = hamiltonian.terms[PauliTermType.V01234][self.v0123]
        self.assertIsInstance(coefficient, numpy.ndarray)
        numpy.testing.assert_allclose(coefficient, [1.5, 1., -1., 0.])

    def test_coefficient_shape_is_checked(self):
        hamiltonian = PauliHamiltonian()
        with self.assertRaises(ValueError):
            hamiltonian.add_term(self.v0123, 1.)
        with self.assertRaises(ValueError):
            hamiltonian.add_term(self.v0123, (1., 2., 3.))
        with self.assertRaises(ValueError):
            hamiltonian.add_term(self.z3, (1., 2., 3., 4.))

    def test_init_from_terms(self):
        hamiltonian = PauliHamiltonian(
            {PauliTermType.Z: {self.z3: -0.5},
             PauliTermType.V01234: {self.v0123: (1., 1., -1., 1.)}},
            system_indices=[0, 1, 2, 3])
        expected = PauliHamiltonian(system_indices=[0, 1, 2, 3])
        expected.add_term(self.z3, -0.5)
        expected.add_term(self.v0123, (1., 1., -1., 1.))
        self.assertEqual(hamiltonian, expected)
        self.assertIsInstance(
            hamiltonian.terms[PauliTermType.V01234][self.v0123],
            numpy.ndarray)

    def test_init_rejects_term_in_wrong_bucket(self):
        pq = PauliTerm((0, 1), PauliTermType.PQ)
        with self.assertRaises(SymbolicHamiltonianError):
            PauliHamiltonian({PauliTermType.Z: {pq: 1.}})
        with self.assertRaises(TypeError):
            PauliHamiltonian({PauliTermType.Z: {(0,): 1.}})

    def test_scalar_coefficients_must_be_real_numbers(self):
        hamiltonian = PauliHamiltonian()
        for coefficient in ['abc', 1j, True, None]:
            with self.assertRaises(ValueError):
                hamiltonian.add_term(self.z3, coefficient)
        with self.assertRaises(ValueError):
            hamiltonian.add_term(self.v0123, ('a', 'b', 'c', 'd'))
        with self.assertRaises(ValueError):
            hamiltonian.add_term(self.v0123, (1j, 0., 0., 0.))
        hamiltonian.add_term(self.z3, numpy.float64(0.5))
        hamiltonian.add_term(self.z3, 2)
        self.assertEqual(hamiltonian.terms[PauliTermType.Z][self.z3], 2.5)

    def test_add_term_needs_pauli_term(self):
        with self.assertRaises(TypeError):
            PauliHamiltonian().add_term((3,), 1.)

    def test_zero_terms_are_kept_until_compressed(self):
        hamiltonian = PauliHamiltonian()
        hamiltonian.add_term(self.z3, 0.)
        hamiltonian.add_term(self.v0123, (0., 0., 0., 0.))
        hamiltonian.add_term(self.identity, 1.)
        self.assertEqual(hamiltonian.n_terms, 3)
        hamiltonian.compress()
        self.assertEqual(hamiltonian.n_terms, 1)
        self.assertEqual(list(hamiltonian.terms), [PauliTermType.IDENTITY])

    def test_compress_keeps_partly_nonzero_vectors(self):
        hamiltonian = PauliHamiltonian()
        hamiltonian.add_term(self.v0123, (0., 0., 1e-3, 0.))
        hamiltonian.compress()
        self.assertEqual(hamiltonian.n_terms, 1)

    def test_n_qubits(self):
        hamiltonian = PauliHamiltonian()
        self.assertEqual(hamiltonian.n_qubits, 0)
        hamiltonian.system_indices = {0, 4}
        self.assertEqual(hamiltonian.n_qubits, 5)

    def test_isclose_with_vectors(self):
        one = PauliHamiltonian()
        one.add_term(self.v0123, (1., 1., -1., 1.))
        other = PauliHamiltonian()
        other.add_term(self.v0123, (1., 1., -1., 1. + 1e-12))
        self.assertEqual(one, other)
        other.add_term(self.v0123, (0., 0., 0., 1.))
        self.assertNotEqual(one, other)

    def test_isclose_absent_vector_compares_to_zero(self):
        one = PauliHamiltonian()
        one.add_term(self.v0123, (0., 0., 0., 0.))
        self.assertEqual(one, PauliHamiltonian())

    def test_cannot_mix_hamiltonian_types(self):
        with self.assertRaises(TypeError):
            PauliHamiltonian().isclose(FermionHamiltonian())
        with self.assertRaises(TypeError):
            PauliHamiltonian().__iadd__(FermionHamiltonian())

    def test_iadd_does_not_alias_vectors(self):
        one = PauliHamiltonian()
        other = PauliHamiltonian()
        other.add_term(self.v0123, (1., 0., 0., 0.))
        one += other
        one += other
        numpy.testing.assert_allclose(
            other.terms[PauliTermType.V01234][self.v0123], [1., 0., 0., 0.])
        numpy.testing.assert_allclose(
            one.terms[PauliTermType.V01234][self.v0123], [2., 0., 0., 0.])

    def test_copy_and_pickle(self):
        hamiltonian = PauliHamiltonian(system_indices=[0, 1, 2, 3])
        hamiltonian.add_term(self.z3, -0.5)
        hamiltonian.add_term(self.v0123, (1., 1., -1., 1.))
        self.assertEqual(copy.deepcopy(hamiltonian), hamiltonian)
        self.assertEqual(pickle.loads(pickle.dumps(hamiltonian)), hamiltonian)

    def test_str(self):
        hamiltonian = PauliHamiltonian()
        hamiltonian.add_term(self.z3, -0.5)
        hamiltonian.add_term(self.v0123, (1., 1., -1., 1.))
        self.assertEqual(str(hamiltonian),
                         '-0.5 [Z(3,)] +\n'
                         '(1.0, 1.0, -1.0, 1.0) [V01234(0, 1, 2, 3)]')
