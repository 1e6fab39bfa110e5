from .display import homology_table, print_homology

__all__ = ["homology_table", "print_homology"]
