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

"""This module provides generic tools for Hamiltonian containers."""

from jwpauli.ops import FermionHamiltonian, PauliHamiltonian


def count_qubits(hamiltonian):
    """Compute the number of qubits (or spin orbitals) of a Hamiltonian.

    The count is one more than the largest entry of system_indices, so an
    index that no term touches still counts.

    Args:
        hamiltonian: FermionHamiltonian or PauliHamiltonian.

    Returns:
        num_qubits (int): The number of qubits the Hamiltonian acts on.

    Raises:
       TypeError: Hamiltonian of invalid type.
    """
    if isinstance(hamiltonian, FermionHamiltonian):
        return hamiltonian.n_spin_orbitals
    elif isinstance(hamiltonian, PauliHamiltonian):
        return hamiltonian.n_qubits
    raise TypeError('Hamiltonian of invalid type.')
