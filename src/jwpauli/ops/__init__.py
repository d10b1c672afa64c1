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

"""
This module contains the term tags, terms and Hamiltonian containers that the
transforms read from and write to.
"""
from ._term_types import Encoding, FermionTermType, PauliTermType
from ._fermion_term import FermionTerm
from ._pauli_term import PauliTerm
from ._symbolic_hamiltonian import (SymbolicHamiltonian,
                                    SymbolicHamiltonianError)
from ._fermion_hamiltonian import FermionHamiltonian
from ._pauli_hamiltonian import PauliHamiltonian
