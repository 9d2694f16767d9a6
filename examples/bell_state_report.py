"""Bell-state example: entangle two qubits and report what each one looks like.

Builds H(0) followed by CNOT(0, 1), replays it on a fresh simulator and
prints the symbolic state, the full density matrix and the per-qubit Bloch
vector, purity and measurement probabilities. Both qubits end up at the
centre of their Bloch sphere with purity 1/2.
"""

from __future__ import annotations

import blochlab as bl
from blochlab.circuit.library import example_circuit


def main() -> None:
    """Simulate the Bell circuit and print a state report."""
    circuit = example_circuit("bell", n_qubits=2)
    print(circuit.to_text_diagram())
    print()

    sim = circuit.simulate()
    bl.print_state_summary(sim)
    print()
    print(bl.format_matrix(sim.density_matrix()))

    entangled = [q for q in range(sim.n_qubits) if sim.is_entangled(q)]
    print(f"\nEntangled qubits: {entangled}")


if __name__ == "__main__":
    main()
