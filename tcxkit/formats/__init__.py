"""File format handlers for activity data files (TCX)."""

from .tcx import decode, parse_tcx

__all__ = ["decode", "parse_tcx"]
