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

"""Jordan-Wigner transform on classified fermion Hamiltonians."""
import functools
import logging
import multiprocessing

from jwpauli.ops import (FermionHamiltonian, FermionTermType,
                         PauliHamiltonian, PauliTerm, PauliTermType)
from jwpauli.utils import count_qubits


class TermEncodingError(Exception):
    pass


class UnsupportedTermClassError(TermEncodingError):
    pass


class MalformedTermError(TermEncodingError):
    pass


class JordanWignerOptions(object):
    """Options for converting the terms of a Hamiltonian in parallel."""

    def __init__(self, processes=10, pool=None):
        """
        Args:
            processes(int): Number of processors to use.
            pool(multiprocessing.Pool): A pool of workers. If given, it is
                used instead of a new pool and left open afterwards.
        """
        if processes <= 0:
            raise ValueError('Invalid number of processors specified {} <= 0'
                             .format(processes))

        self.processes = min(processes, multiprocessing.cpu_count())
        self.pool = pool

    def get_processes(self, num):
        """Number of real processes to use."""
        return max(min(num, self.processes), 1)

    def get_pool(self, num=None):
        """Gets a pool of workers to do some parallel work.

        Args:
            num(int): Number of workers one needs.
        Returns:
            pool(multiprocessing.Pool): A pool of workers.
        """
        if self.pool is not None:
            return self.pool
        processes = self.get_processes(num or self.processes)
        logging.info("Calling multiprocessing.Pool(%d)", processes)
        return multiprocessing.Pool(processes)


def jordan_wigner(hamiltonian, options=None):
    """Apply the Jordan-Wigner transform to a FermionHamiltonian.

    Every term is converted by jordan_wigner_fermion_term and the resulting
    Pauli terms are summed into a new PauliHamiltonian. The system indices
    of the input are copied over. The input is not modified.

    Args:
        hamiltonian(FermionHamiltonian): The Hamiltonian to convert.
        options(JordanWignerOptions): If given, terms are converted in
            groups by a pool of worker processes and the partial results
            are summed in group order.

    Returns:
        transformed_hamiltonian: An instance of the PauliHamiltonian class.

    Raises:
        TypeError: Hamiltonian must be a FermionHamiltonian.
        UnsupportedTermClassError: A bucket tag is not a FermionTermType.
        MalformedTermError: A term has the wrong number of indices for its
            symmetry class, or a PQRS term repeats an index.
    """
    if not isinstance(hamiltonian, FermionHamiltonian):
        raise TypeError('Hamiltonian must be a FermionHamiltonian.')

    logging.info("Jordan-Wigner transform of %d fermion terms on %d spin "
                 "orbitals.", hamiltonian.n_terms, count_qubits(hamiltonian))

    if options is None:
        transformed_hamiltonian = _jordan_wigner_term_group(
            list(hamiltonian.iter_terms()))
    else:
        term_groups = hamiltonian.get_term_groups(options.processes)
        pool = options.get_pool(len(term_groups))
        try:
            partial_hamiltonians = pool.imap(_jordan_wigner_term_group,
                                             term_groups)
            transformed_hamiltonian = functools.reduce(
                _merge, partial_hamiltonians, PauliHamiltonian())
        finally:
            if options.pool is None:
                pool.close()
                pool.join()

    transformed_hamiltonian.system_indices = set(hamiltonian.system_indices)

    logging.info("Jordan-Wigner transform produced %d Pauli terms.",
                 transformed_hamiltonian.n_terms)
    return transformed_hamiltonian


def _merge(total, partial):
    total += partial
    return total


def _jordan_wigner_term_group(term_group):
    """Convert a list of (term_type, term, coefficient) triples."""
    partial_hamiltonian = PauliHamiltonian()
    for term_type, term, coefficient in term_group:
        partial_hamiltonian.add_terms(
            jordan_wigner_fermion_term(term, term_type, coefficient))
    return partial_hamiltonian


def jordan_wigner_fermion_term(term, term_type, coefficient):
    r"""Map one classified fermion term to Pauli terms.

    The Pauli terms produced for each symmetry class are:

        IDENTITY: I with coefficient c.
        PP (p): I with .5c and Z_p with -.5c.
        PQ (p, q): the excitation string PQ(p, q) with .25c.
        PQQP (p, q): Z_p Z_q with -.25c, Z_p with -.25c and Z_q with .25c.
        PQQR: the indices are first brought to p, q, q, r order, then
            PQQR(p, q, q, r) with -.125mc and PQ(p, r) with .125mc, where
            the sign m depends on the order the indices came in.
        PQRS: a single V01234 term on the sorted indices with the four
            coefficients from identify_pqrs_permutation.

    Args:
        term (FermionTerm or Sequence[int]): The spin-orbital indices.
        term_type (FermionTermType): The symmetry class of the term.
        coefficient (float): The coefficient of the term.

    Returns:
        pauli_terms (list): (PauliTerm, coefficient) pairs. The coefficient
            of the V01234 term is a tuple of four floats.

    Raises:
        UnsupportedTermClassError: term_type is not a FermionTermType.
        MalformedTermError: The number of indices does not match term_type,
            or a PQRS term repeats an index.
    """
    if not isinstance(term_type, FermionTermType):
        raise UnsupportedTermClassError(
            'Unsupported fermion term type {}.'.format(term_type))

    # Make a copy of the list of indices.
    seq = list(term)
    if len(seq) != term_type.arity:
        raise MalformedTermError(
            'A {} term needs {} indices, got {}.'.format(
                term_type.name, term_type.arity, tuple(seq)))

    pauli_terms = []

    if term_type is FermionTermType.IDENTITY:
        pauli_terms.append((PauliTerm((), PauliTermType.IDENTITY),
                            coefficient))

    elif term_type is FermionTermType.PP:
        pauli_terms.append((PauliTerm((), PauliTermType.IDENTITY),
                            .5 * coefficient))
        pauli_terms.append((PauliTerm(seq[:1], PauliTermType.Z),
                            -.5 * coefficient))

    elif term_type is FermionTermType.PQ:
        pauli_terms.append((PauliTerm(seq, PauliTermType.PQ),
                            .25 * coefficient))

    elif term_type is FermionTermType.PQQP:
        pauli_terms.append((PauliTerm(seq[:2], PauliTermType.ZZ),
                            -.25 * coefficient))
        pauli_terms.append((PauliTerm(seq[:1], PauliTermType.Z),
                            -.25 * coefficient))
        pauli_terms.append((PauliTerm(seq[1:2], PauliTermType.Z),
                            .25 * coefficient))

    elif term_type is FermionTermType.PQQR:
        multiplier = 1.
        if seq[0] == seq[-1]:
            # Ordered like QPRQ. The assignments are sequential, so seq[2]
            # picks up the new seq[1].
            seq[0] = seq[1]
            seq[1] = seq[3]
            seq[3] = seq[2]
            seq[2] = seq[1]
        elif seq[1] == seq[3]:
            # Ordered like PQRQ.
            seq[3] = seq[2]
            seq[2] = seq[1]
            multiplier = -1.
        pauli_terms.append((PauliTerm(seq, PauliTermType.PQQR),
                            -.125 * multiplier * coefficient))
        pauli_terms.append((PauliTerm((seq[0], seq[3]), PauliTermType.PQ),
                            .125 * multiplier * coefficient))

    elif term_type is FermionTermType.PQRS:
        if len(set(seq)) != 4:
            raise MalformedTermError(
                'A PQRS term needs 4 distinct indices, got {}.'.format(
                    tuple(seq)))
        pqrs_sorted, v0123 = identify_pqrs_permutation(
            sorted(seq), seq, coefficient)
        pauli_terms.append((PauliTerm(pqrs_sorted, PauliTermType.V01234),
                            v0123))

    else:
        raise UnsupportedTermClassError(
            'Unsupported fermion term type {}.'.format(term_type))

    return pauli_terms


def identify_pqrs_permutation(pqrs_sorted, pqrs_permuted, coefficient):
    """Classify the index order of a PQRS term and antisymmetrize it.

    The observed order is compared against the orderings prsq, pqsr and
    psrq of the sorted indices p < q < r < s, in that order. Each match
    puts the scaled coefficient into one slot of h = (h0, h1, h2); any
    other ordering (pqrs, qprs and spqr among the canonical ones) leaves h
    at zero. The four V01234 coefficients are fixed linear combinations of
    h.

    Args:
        pqrs_sorted (Sequence[int]): The four indices in ascending order.
        pqrs_permuted (Sequence[int]): The four indices in the order they
            appear in the fermion term.
        coefficient (float): The coefficient of the fermion term.

    Returns:
        pqrs_sorted (tuple): The sorted indices, unchanged.
        v0123 (tuple): The four coefficients of the V01234 term.
    """
    p, q, r, s = pqrs_sorted
    pqrs_permuted = tuple(pqrs_permuted)
    coefficient = coefficient * .0625

    prsq = (p, r, s, q)
    pqsr = (p, q, s, r)
    psrq = (p, s, r, q)

    if pqrs_permuted == prsq:
        h0, h1, h2 = 0., 0., coefficient
    elif pqrs_permuted == pqsr:
        h0, h1, h2 = -coefficient, 0., 0.
    elif pqrs_permuted == psrq:
        h0, h1, h2 = 0., -coefficient, 0.
    else:
        h0, h1, h2 = 0., 0., 0.

    v0123 = (-h0 - h1 + h2,
             h0 - h1 + h2,
             -h0 - h1 - h2,
             -h0 + h1 + h2)
    return (p, q, r, s), v0123
