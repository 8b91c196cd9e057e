"""Package model used by the linter.

Pure data: links, constraints, packages and the pool that aggregates
repositories. Nothing here reads files or talks to the network.
"""
