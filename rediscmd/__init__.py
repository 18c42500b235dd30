"""Build Redis commands, encode them in the wire protocol and route them to cluster slots."""

__version__ = "0.21.5"

__all__ = [
    "cmd",
    "cluster_routing",
    "strings",
    "hashes",
    "lists",
    "sets",
    "sorted_sets",
    "acl",
    "geo",
    "streams",
]