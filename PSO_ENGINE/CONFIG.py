# === Central Run Configuration ===
# --- Swarm Defaults ---
DEFAULT_N_PARTICLES = 50
DEFAULT_N_ITERATIONS = 20
DEFAULT_MAX_ERROR = 0.3  # Stop once the global best cost drops below this

# --- Update Rule Coefficients (fixed for a run) ---
DEFAULT_OMEGA = 0.1  # Inertia weight
DEFAULT_C1 = 0.5     # Cognitive / self confidence
DEFAULT_C2 = 0.8     # Social / swarm confidence

# --- Best Tracking ---
# Seed for every personal best value and for the global best value.
# Must be larger than any cost the objective can return (minimization).
SENTINEL_VALUE = 1e10

# --- Logging ---
LOG_PROGRESS = True   # Log "Iteration i - cost" after every pass
ENABLE_COLOR = True   # ANSI colors (only used when stdout is a terminal)
DEBUG = False         # Enables log_debug output

# --- Output ---
FIGURES_DIR = "Figures/"  # Where run_pso.py --plot writes images

# --- Reference settings for the bundled cost functions ---
# (n_particles, n_iterations, max_error, omega, c1, c2)
EXAMPLE_SETTINGS = {
    "quadratic": {
        "n_particles": 50,
        "n_iterations": 20,
        "max_error": 0.3,
        "omega": 0.1,
        "c1": 0.5,
        "c2": 0.8,
    },
    "sine_taylor": {
        "n_particles": 500,
        "n_iterations": 500,
        "max_error": 0.0001,
        "omega": 0.95,
        "c1": 0.1,
        "c2": 0.1,
    },
    "sphere": {
        "n_particles": 30,
        "n_iterations": 200,
        "max_error": 1e-6,
        "omega": 0.7,
        "c1": 1.5,
        "c2": 1.5,
    },
    "rosenbrock": {
        "n_particles": 40,
        "n_iterations": 1000,
        "max_error": 1e-3,
        "omega": 0.7,
        "c1": 1.5,
        "c2": 1.5,
    },
}
