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

"""Conversion of fermion Hamiltonians to qubit Hamiltonians."""

from jwpauli.ops import Encoding
from jwpauli.transforms._jordan_wigner import jordan_wigner


def get_pauli_hamiltonian(hamiltonian, encoding=Encoding.JORDAN_WIGNER,
                          options=None):
    """Convert a FermionHamiltonian to a PauliHamiltonian.

    Args:
        hamiltonian(FermionHamiltonian): The Hamiltonian to convert.
        encoding(Encoding): The fermion-to-qubit encoding to use.
        options: Options passed on to the transform of the chosen encoding,
            e.g. JordanWignerOptions.

    Returns:
        pauli_hamiltonian: An instance of the PauliHamiltonian class.

    Raises:
        ValueError: Unsupported encoding.
    """
    if encoding is Encoding.JORDAN_WIGNER:
        return jordan_wigner(hamiltonian, options)
    raise ValueError('Unsupported encoding {}.'.format(encoding))
