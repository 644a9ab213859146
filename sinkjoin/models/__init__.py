"""Value models returned by sinkjoin operations."""

from sinkjoin.models.result import JoinResult

__all__ = ["JoinResult"]
