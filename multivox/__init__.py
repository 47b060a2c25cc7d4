"""Slice mapping, rotation tracking, voxel rasterisation and scan-out helpers for swept-volume voxel displays."""

__version__ = "0.1.0"