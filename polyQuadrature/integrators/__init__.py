from .base_class import Integrator
from .analytical_integrator import AnalyticalIntegrator
from .riemann_integrator import RiemannIntegrator

__all__ = [
    "Integrator",
    "AnalyticalIntegrator",
    "RiemannIntegrator",
]
