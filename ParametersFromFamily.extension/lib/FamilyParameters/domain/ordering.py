import sys

UNMAPPED_RANK = sys.maxsize


def build_rank_index(group_mapping):
    """Map each group key to its position in the mapping's key order."""
    return dict((group, index) for index, group in enumerate(group_mapping))


def group_rank(group, rank_index):
    return rank_index.get(group, UNMAPPED_RANK)


def order_records(records, group_mapping):
    """Sort by (mapping position of group, name); unmapped groups go last."""
    rank_index = build_rank_index(group_mapping)
    return sorted(records, key=lambda r: (group_rank(r.group, rank_index), r.name))
