from .mapping import concat_map, concat_map_w, concat_mapM, map_maybe, map_maybe_w, map_maybeM
from .partition import partition, partition_w, partitionM
from .traverse import traverse, traverse_w, traverseM

__all__ = (
    # LazyCoroResult
    "concat_map",
    "map_maybe",
    "partition",
    "traverse",
    # LazyCoroResultWriter
    "concat_map_w",
    "map_maybe_w",
    "partition_w",
    "traverse_w",
    # Generic
    "concat_mapM",
    "map_maybeM",
    "partitionM",
    "traverseM",
)
