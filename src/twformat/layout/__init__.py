from twformat.layout.grouper import group_responsive
from twformat.layout.packer import category_buckets, pack, pack_with_config

__all__ = ["category_buckets", "group_responsive", "pack", "pack_with_config"]
