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

import pytest

from jwpauli.ops import (FermionHamiltonian, FermionTermType,
                         PauliHamiltonian)

from jwpauli.utils._operator_utils import count_qubits


def test_count_qubits_fermion_hamiltonian():
    hamiltonian = FermionHamiltonian()
    assert count_qubits(hamiltonian) == 0
    hamiltonian.add_term(FermionTermType.PQ, [2, 6], 1.)
    assert count_qubits(hamiltonian) == 7


def test_count_qubits_pauli_hamiltonian():
    assert count_qubits(PauliHamiltonian(system_indices=[0, 3])) == 4


def test_count_qubits_bad_type():
    with pytest.raises(TypeError):
        count_qubits({0: 1.})
