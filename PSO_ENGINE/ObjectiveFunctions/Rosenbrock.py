import numpy as np

from PSO_ENGINE.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class RosenbrockFunction(ObjectiveFunction):
    def __init__(self, dim=2):
        super().__init__(dim)
        self.bounds = [(-30, 30)] * dim
        self.minimum_position = np.ones(dim)
        self.minimum_value = 0.0

    def evaluate(self, x: np.ndarray) -> float:
        return float(np.sum(100 * (x[1:] - x[:-1] ** 2) ** 2 + (x[:-1] - 1) ** 2))
