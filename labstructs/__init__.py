"""Indexed list, sparse matrix, heap, k-way merge and ordered multidictionary."""

__version__ = "0.1.0"
__all__ = [
    "indexed_list",
    "sparse_matrix",
    "heap",
    "merge",
    "ordered_multidict",
]