"""
quadstat.core
=============

Shared vocabulary of the package: tail names, numeric type aliases,
documented defaults and the helper that lifts scalar kernels to sequences.
"""
