"""
branchscout - infer the base branch for a pull request.

Models branches, remotes and commits on top of pluggable git command
execution, and resolves which remote branch a feature branch was cut from.
"""

__version__ = "0.1.0"
