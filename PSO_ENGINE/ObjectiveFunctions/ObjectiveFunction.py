# --- Objective Function Base Class ---
from abc import ABC, abstractmethod
from typing import List, Tuple

import numpy as np
from matplotlib import pyplot as plt


class ObjectiveFunction(ABC):
    """
    Cost function with its own search domain. Instances are callable, so they
    can be handed to PSO directly as the cost function.
    """

    def __init__(self, dim=2):
        self.dim = dim
        self.bounds: List[Tuple[float, float]] = [(-5.12, 5.12)] * dim  # Default bounds, one pair per axis
        self.minimum_value = None  # Known global minimum, if any
        self.minimum_position = None

    @abstractmethod
    def evaluate(self, x: np.ndarray) -> float:
        pass

    def __call__(self, x: np.ndarray) -> float:
        return self.evaluate(x)

    def plot_3d_surface(self, resolution=100, save_path=None, show=False):
        if self.dim != 2:
            raise ValueError("3D surface plot only supports 2D objective functions.")

        (x_low, x_high), (y_low, y_high) = [sorted(pair) for pair in self.bounds]
        x = np.linspace(x_low, x_high, resolution)
        y = np.linspace(y_low, y_high, resolution)
        X, Y = np.meshgrid(x, y)

        Z = np.array([
            self.evaluate(np.array([x_val, y_val]))
            for x_val, y_val in zip(np.ravel(X), np.ravel(Y))
        ]).reshape(X.shape)

        fig = plt.figure(figsize=(10, 7))
        ax = fig.add_subplot(111, projection='3d')
        ax.plot_surface(X, Y, Z, cmap='viridis', edgecolor='k', alpha=0.8)
        ax.set_title(f"3D Surface of {self.__class__.__name__}")
        ax.set_xlabel("x1")
        ax.set_ylabel("x2")
        ax.set_zlabel("f(x)")

        if save_path is not None:
            fig.savefig(save_path)
        if show:
            plt.show()
        plt.close(fig)
        return save_path
