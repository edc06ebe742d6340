"""Selection, publishing and pruning services."""
