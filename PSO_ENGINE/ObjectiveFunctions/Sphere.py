import numpy as np

from PSO_ENGINE.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class SphereFunction(ObjectiveFunction):
    def __init__(self, dim=2):
        super().__init__(dim)
        self.bounds = [(-5.12, 5.12)] * dim
        self.minimum_position = np.zeros(dim)
        self.minimum_value = 0.0

    def evaluate(self, x: np.ndarray) -> float:
        return float(np.sum(np.square(x)))
