import numpy as np

from PSO_ENGINE.ObjectiveFunctions.ObjectiveFunction import ObjectiveFunction


class SineTaylorFunction(ObjectiveFunction):
    """
    Fits a1*x + a3*x^3 + a5*x^5 to sin(x) on [-pi, pi).

    The position is (a1, a3, a5); the cost is the mean squared error over
    n_points evenly spaced samples. The Taylor coefficients are
    (1, -1/6, 1/120), though the least squares fit on this interval differs.
    """

    def __init__(self, n_points=1000):
        super().__init__(dim=3)
        self.bounds = [(0, 2), (-1, 0), (0., 1)]
        self.n_points = n_points
        dx = 2. * np.pi / n_points
        self.x = -np.pi + dx * np.arange(n_points)
        self.target = np.sin(self.x)
        self.x3 = self.x ** 3
        self.x5 = self.x ** 5

    def evaluate(self, x: np.ndarray) -> float:
        a1, a3, a5 = x[0], x[1], x[2]
        estimate = a1 * self.x + a3 * self.x3 + a5 * self.x5
        error = self.target - estimate
        return float(np.mean(error * error))
