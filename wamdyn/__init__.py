"""Identified arm dynamics regressors and parameters, reference trajectories and joint-space controllers."""

__version__ = "0.1.0"
__all__ = ["params", "regressors", "trajectories", "w_regressor", "dynamics", "controllers", "ctc"]