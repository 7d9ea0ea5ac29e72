"""Contest algorithms: number theory, combinatorics, transforms, matrices, hashing and string structures."""

__version__ = "0.1.0"