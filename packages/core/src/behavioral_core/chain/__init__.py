"""Chain of responsibility."""

from .base import Chain, FunctionLink, chain_of
from .variants import ProcessChain, RequestChain

__all__ = [
    "Chain",
    "FunctionLink",
    "ProcessChain",
    "RequestChain",
    "chain_of",
]
