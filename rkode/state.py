"""
VectorState - fixed-length real state vector.

Backed by a 1-D float64 tensor. The length is fixed at construction and every
combination checks operand lengths; nothing is broadcast or resized.
"""

import torch
from typing import Iterable, Sequence, Union

from .errors import DimensionMismatchError

DTYPE = torch.float64


def as_vector(values, context: str = 'vector') -> torch.Tensor:
    """
    Convert values to a 1-D float64 tensor.

    Accepts tensors, numpy arrays and sequences of floats or 0-d tensors.

    Args:
        values: Vector-like input
        context: Name used in error messages

    Returns:
        New 1-D float64 tensor
    """
    if isinstance(values, torch.Tensor):
        tensor = values.detach().to(DTYPE).clone()
    elif isinstance(values, (list, tuple)) and values and all(
        isinstance(v, torch.Tensor) for v in values
    ):
        tensor = torch.stack([v.detach().to(DTYPE).reshape(()) for v in values])
    else:
        tensor = torch.as_tensor(values, dtype=DTYPE).clone()

    if tensor.dim() != 1:
        raise DimensionMismatchError(1, tensor.dim(), context=f"{context} rank")
    return tensor


class VectorState:
    """
    n-dimensional real vector with the scaled additions RK stages need.

    Args:
        values: Sequence of reals, numpy array or tensor (must be 1-D, non-empty)
    """

    __slots__ = ('_data',)

    def __init__(self, values: Union[Sequence[float], torch.Tensor]):
        data = as_vector(values, context='state')
        if data.numel() == 0:
            raise DimensionMismatchError(1, 0, context='state')
        self._data = data

    @classmethod
    def _wrap(cls, data: torch.Tensor) -> 'VectorState':
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    def __len__(self) -> int:
        return self._data.shape[0]

    def __iter__(self):
        return iter(self._data.tolist())

    def __getitem__(self, index: int) -> float:
        return self._data[index].item()

    def __repr__(self):
        values = ', '.join(f"{v:.6g}" for v in self._data.tolist())
        return f"VectorState([{values}])"

    @property
    def dim(self) -> int:
        return len(self)

    def check_length(self, other: torch.Tensor, context: str = 'vector') -> None:
        """Raise DimensionMismatchError unless other has this vector's length."""
        if other.dim() != 1 or other.shape[0] != len(self):
            got = other.shape[0] if other.dim() == 1 else other.numel()
            raise DimensionMismatchError(len(self), got, context=context)

    def _operand(self, other) -> torch.Tensor:
        tensor = other._data if isinstance(other, VectorState) else as_vector(other)
        self.check_length(tensor, context='operand')
        return tensor

    def axpy(self, c: float, other) -> 'VectorState':
        """
        Scaled addition: self + c * other.

        Args:
            c: Scalar coefficient
            other: VectorState or vector-like of the same length

        Returns:
            New VectorState
        """
        return VectorState._wrap(self._data + c * self._operand(other))

    def linear_combination(
        self,
        coeffs: Sequence[float],
        vectors: Iterable
    ) -> 'VectorState':
        """Return self + sum(c_i * v_i)."""
        vectors = list(vectors)
        if len(coeffs) != len(vectors):
            raise ValueError(
                f"Got {len(coeffs)} coefficients for {len(vectors)} vectors"
            )
        result = self._data.clone()
        for c, v in zip(coeffs, vectors):
            result = result + c * self._operand(v)
        return VectorState._wrap(result)

    def __add__(self, other) -> 'VectorState':
        return self.axpy(1.0, other)

    def __sub__(self, other) -> 'VectorState':
        return self.axpy(-1.0, other)

    def __mul__(self, c: float) -> 'VectorState':
        return VectorState._wrap(self._data * float(c))

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, VectorState):
            return NotImplemented
        return len(self) == len(other) and torch.equal(self._data, other._data)

    __hash__ = None

    def allclose(self, other, rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        return torch.allclose(self._data, self._operand(other), rtol=rtol, atol=atol)

    def to_tensor(self) -> torch.Tensor:
        """Return a copy of the underlying float64 tensor."""
        return self._data.clone()

    def tolist(self) -> list:
        return self._data.tolist()
