"""Small data structures and exercise programs: arrays, vectors, a hash map,
a sorted vector, a land register, big integers, a rope string and an AVL tree."""

__version__ = "0.1.0"