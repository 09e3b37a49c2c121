"""Game rules: cave grid, maze generation, placement, arrows and players."""
