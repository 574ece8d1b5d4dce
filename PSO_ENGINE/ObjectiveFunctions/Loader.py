from PSO_ENGINE.ObjectiveFunctions.QuadraticBowl import QuadraticBowlFunction
from PSO_ENGINE.ObjectiveFunctions.Rosenbrock import RosenbrockFunction
from PSO_ENGINE.ObjectiveFunctions.SineTaylor import SineTaylorFunction
from PSO_ENGINE.ObjectiveFunctions.Sphere import SphereFunction

# Name used on the command line and in CONFIG.EXAMPLE_SETTINGS -> class
objective_function_classes = {
    "quadratic": QuadraticBowlFunction,
    "sine_taylor": SineTaylorFunction,
    "sphere": SphereFunction,
    "rosenbrock": RosenbrockFunction,
}


def load_objective_function(name: str, **kwargs):
    try:
        function_class = objective_function_classes[name]
    except KeyError:
        available = ", ".join(sorted(objective_function_classes))
        raise ValueError(f"Unknown objective function '{name}'. Available: {available}") from None
    return function_class(**kwargs)
