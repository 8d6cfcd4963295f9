"""Graph model: points, nodes, paths and the searchable net."""
