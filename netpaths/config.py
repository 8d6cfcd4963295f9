"""Configuration classes for netpaths components."""

from dataclasses import dataclass


@dataclass
class NetConfig:
    """Configuration for path search and path rendering."""

    # Joins point identifiers when a path is rendered ("A-B-C")
    path_separator: str = "-"

    # Joins several rendered paths ("A-B-C + A-D-C")
    paths_separator: str = " + "

    # Reject unknown destinations with PointNotFoundError instead of
    # reporting them as NoPathFoundError
    validate_destination: bool = True


# Global configuration instance
NET_CONFIG = NetConfig()
