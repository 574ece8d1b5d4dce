import numpy as np

from PSO_ENGINE.PSO.SwarmStore import SwarmStore, POSITION, VELOCITY, BEST_POSITION


class Particle:
    """
    One candidate solution. position, velocity and best_position are views
    into the owning SwarmStore row, so writes go straight to the shared block.
    """

    def __init__(self, store: SwarmStore, index: int, best_value: float):
        self.index = index
        self.dim = store.n_axis
        self.position = store.row(index, POSITION)
        self.velocity = store.row(index, VELOCITY)
        self.best_position = store.row(index, BEST_POSITION)

        self.value = best_value  # cost at the current position, last evaluation
        self.best_value = best_value

    def read_only_position(self) -> np.ndarray:
        view = self.position.view()
        view.flags.writeable = False
        return view

    def __repr__(self):
        return (f"Particle({self.index}, position={self.position}, value={self.value}, "
                f"best_value={self.best_value})")
