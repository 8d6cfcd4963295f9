"""Loading nets from YAML documents."""

from netpaths.dsl.loader import (
    load_net_dict,
    load_net_file,
    load_net_yaml,
    parse_net_dict,
)

__all__ = ["load_net_dict", "load_net_file", "load_net_yaml", "parse_net_dict"]
