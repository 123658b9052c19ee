"""
Mesh file path helpers.

Robot descriptions often reference STL meshes that a dynamics backend can
only read as OBJ; these helpers rewrite the references.
"""

_LOWER_CASE_STL = ".stl"
_UPPER_CASE_STL = ".STL"
_REPLACEMENT = ".obj"


def replace_stl_with_obj(path: str) -> str:
    """
    Replace every ``.stl`` and ``.STL`` occurrence in ``path`` with ``.obj``.

    Mixed-case spellings such as ``.Stl`` are left unchanged.

    Example:
        >>> replace_stl_with_obj("meshes/link.STL")
        'meshes/link.obj'
    """
    return path.replace(_LOWER_CASE_STL, _REPLACEMENT).replace(_UPPER_CASE_STL, _REPLACEMENT)
