import numpy as np

from PSO_ENGINE.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class QuadraticBowlFunction(ObjectiveFunction):
    """
    f(x, y) = 5x^2 - 52x + 200 + 5y^2 - 30y + 100

    Separable second order bowl. Vertex of each quadratic: x = 52 / 10 = 5.2,
    y = 30 / 10 = 3, so the minimum is 200 - 135.2 + 100 - 45 = 119.8.
    offset is subtracted from every value (offset=119.8 moves the minimum to 0).
    """

    def __init__(self, offset=0.0):
        super().__init__(dim=2)
        self.bounds = [(-10, 10), (-20, 20)]
        self.offset = offset
        self.minimum_position = np.array([5.2, 3.0])
        self.minimum_value = 119.8 - offset

    def evaluate(self, x: np.ndarray) -> float:
        return 5. * x[0] * x[0] - 52. * x[0] + 200. + 5. * x[1] * x[1] - 30. * x[1] + 100. - self.offset
