"""Data structures and 2-D geometry routines for algorithmic problem solving."""

__version__ = "0.1.0"

__all__ = [
    "advanced_segment_trees",
    "balanced_trees",
    "btree",
    "cartesian_tree",
    "centroid",
    "circles",
    "dsu",
    "fenwick",
    "geometry",
    "heavy_light",
    "link_cut_tree",
    "merge_sort_tree",
    "persistent_segment_tree",
    "polygons",
    "rope",
    "segment_tree",
    "skip_list",
    "sparse_segment_tree",
    "sparse_table",
    "suffix_trie",
    "trie",
]