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
jwpauli

Jordan-Wigner conversion of fermion Hamiltonians, stored as coefficients of
classified fermion terms, into Hamiltonians of compact Pauli terms.
"""

from jwpauli.ops import *
from jwpauli.transforms import *
from jwpauli.utils import *

from ._version import __version__
