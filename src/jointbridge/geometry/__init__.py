"""
Geometry module - Mesh reference helpers.
"""

from jointbridge.geometry.mesh_paths import replace_stl_with_obj

__all__ = [
    "replace_stl_with_obj",
]
