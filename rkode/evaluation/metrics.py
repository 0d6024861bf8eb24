"""
Error Metrics
Distances between an integrated state and a reference state
"""

import torch


def compute_l2_error(pred: torch.Tensor, target: torch.Tensor) -> float:
    """Euclidean norm of pred - target."""
    with torch.no_grad():
        return torch.norm(pred - target, p=2).item()


def compute_relative_error(
    pred: torch.Tensor,
    target: torch.Tensor,
    eps: float = 1e-10
) -> float:
    """
    Relative error ||pred - target|| / ||target||.

    Args:
        pred: Integrated state
        target: Reference state
        eps: Added to the denominator for a zero reference

    Returns:
        Relative error (float)
    """
    with torch.no_grad():
        return compute_l2_error(pred, target) / (torch.norm(target).item() + eps)


def compute_max_error(pred: torch.Tensor, target: torch.Tensor) -> float:
    """Largest componentwise absolute error."""
    with torch.no_grad():
        return torch.max(torch.abs(pred - target)).item()


ERROR_NORMS = {
    'max': compute_max_error,
    'l2': compute_l2_error,
    'relative': compute_relative_error,
}
