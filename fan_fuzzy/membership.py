import numpy as np

KINDS = {"Triangular": 3, "Trapezoidal": 4}


# --- membership ---
# Outer feet are checked first: x <= a or x >= c/d is 0.0 even when a == b or c == d.
def _tri(U, a, b, c):
    U = np.asarray(U, float); mu = np.zeros_like(U)
    inside = (U > a) & (U < c)
    m = inside & (U < b)
    if b > a: mu[m] = (U[m] - a) / (b - a)
    mu[inside & (U == b)] = 1.0
    m = inside & (U > b)
    if c > b: mu[m] = (c - U[m]) / (c - b)
    return mu

def _trap(U, a, b, c, d):
    U = np.asarray(U, float); mu = np.zeros_like(U)
    inside = (U > a) & (U < d)
    mu[inside & (U >= b) & (U <= c)] = 1.0
    m = inside & (U < b)
    if b > a: mu[m] = (U[m] - a) / (b - a)
    m = inside & (U > c)
    if d > c: mu[m] = (d - U[m]) / (d - c)
    return mu

def _scalar_or_array(x, mu):
    return float(mu) if np.ndim(x) == 0 else mu


def triangular(x, a, b, c):
    """Degree of `x` in Triangular(a, b, c); `x` may be a scalar or a universe."""
    return _scalar_or_array(x, _tri(x, a, b, c))

def trapezoidal(x, a, b, c, d):
    """Degree of `x` in Trapezoidal(a, b, c, d); `x` may be a scalar or a universe."""
    return _scalar_or_array(x, _trap(x, a, b, c, d))


def check_params(kind, params):
    if kind not in KINDS:
        raise ValueError(f"Unknown membership type: {kind!r}")
    params = tuple(float(p) for p in params)
    if len(params) != KINDS[kind]:
        raise ValueError(f"{kind} needs {KINDS[kind]} parameters, got {len(params)}")
    if any(lo > hi for lo, hi in zip(params, params[1:])):
        raise ValueError(f"{kind} parameters must be non-decreasing: {params}")
    return params

def build_membership(U, kind, params):
    if kind == "Triangular":
        a, b, c = params;    return triangular(U, a, b, c)
    if kind == "Trapezoidal":
        a, b, c, d = params; return trapezoidal(U, a, b, c, d)
    raise ValueError("Unknown membership type.")
